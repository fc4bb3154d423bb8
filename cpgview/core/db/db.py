"""
Database connection management for the read-only CPG store.

The store is a SQLite file written by the offline analysis pass. It is
opened exactly once per process through a ``mode=ro`` URI, so no
connection handed out here can ever write to it.
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from ..exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)


def build_readonly_url(db_path: str) -> str:
    """Build a SQLAlchemy URL that opens ``db_path`` strictly read-only."""
    resolved = Path(db_path).expanduser().resolve().as_posix()
    return f"sqlite:///file:{resolved}?mode=ro&uri=true"


class DatabaseManager:
    """Owns the process-wide engine and hands out short-lived sessions.

    Constructed at startup and passed explicitly to every query function;
    nothing looks it up through a global.
    """

    def __init__(self, db_path: str, echo: bool = False):
        self.db_path = db_path
        self.database_url = build_readonly_url(db_path)
        self.engine: Optional[Engine] = None
        self.SessionLocal: Optional[sessionmaker] = None
        self._echo = echo

    def init_db(self) -> None:
        """Create the engine and verify the store can be read.

        Raises:
            StoreUnavailableError: If the file is missing or unreadable.
        """
        if not Path(self.db_path).expanduser().is_file():
            raise StoreUnavailableError(f"Database file not found: {self.db_path}")

        self.engine = create_engine(
            self.database_url,
            echo=self._echo,
            # Handlers run on the server threadpool; SQLite serialises reads itself.
            connect_args={"check_same_thread": False},
        )
        self.SessionLocal = sessionmaker(bind=self.engine, autoflush=False)

        if not self.check_connection():
            self.close()
            raise StoreUnavailableError(f"Failed to open database: {self.db_path}")

        logger.info(f"Connected to database (read-only): {self.db_path}")

    @contextmanager
    def get_session(self) -> Generator[Session, None, None]:
        """Yield a session; nothing is ever committed."""
        if self.SessionLocal is None:
            raise StoreUnavailableError("Database not initialised; call init_db() first")

        session = self.SessionLocal()
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def check_connection(self) -> bool:
        """Return True if a trivial query succeeds."""
        if self.engine is None:
            return False
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.error(f"Database connection check failed: {e}")
            return False

    def close(self) -> None:
        """Dispose of the engine at shutdown."""
        if self.engine is not None:
            self.engine.dispose()
            logger.info("Database connection closed")
        self.engine = None
        self.SessionLocal = None


def get_database_manager(db_path: str, echo: bool = False) -> DatabaseManager:
    """Create and initialise a DatabaseManager for ``db_path``."""
    manager = DatabaseManager(db_path, echo=echo)
    manager.init_db()
    return manager
