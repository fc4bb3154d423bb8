"""Application settings using pydantic-settings."""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables (and ``.env``)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Store
    db_path: str = Field(
        default="../../cpg.db",
        description="Path to the CPG SQLite file (DB_PATH); opened read-only",
    )
    db_echo: bool = False

    # API server
    api_host: str = "0.0.0.0"
    api_port: int = 3001
    cors_origins: List[str] = Field(
        default_factory=lambda: ["*"],
        description="Allowed CORS origins; '*' reflects any origin",
    )

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get the cached settings instance."""
    return Settings()
