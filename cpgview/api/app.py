"""FastAPI application factory for cpgview.

Creates and configures the FastAPI app with CORS, error handlers,
and all route modules registered.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from .. import __version__
from ..core.db import DatabaseManager
from ..core.exceptions import CPGViewError, StoreUnavailableError
from ..setting import Settings, get_settings

logger = logging.getLogger(__name__)


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(CPGViewError)
    async def handle_domain_error(request: Request, exc: CPGViewError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(SQLAlchemyError)
    async def handle_store_error(request: Request, exc: SQLAlchemyError):
        logger.exception(f"Store error in {request.url.path}", exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    @app.exception_handler(StoreUnavailableError)
    async def handle_store_unavailable(request: Request, exc: StoreUnavailableError):
        logger.error(f"Store unavailable in {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app(db_manager: DatabaseManager, settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        db_manager: Initialised, read-only DatabaseManager
        settings: Settings instance (defaults to get_settings())

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="cpgview API",
        description="Read-only explorer for a code property graph",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Store shared dependencies on app state
    app.state.db_manager = db_manager
    app.state.settings = settings

    _register_error_handlers(app)

    # Register routers
    from .routes.functions import router as functions_router
    from .routes.graph import router as graph_router
    from .routes.health import router as health_router
    from .routes.source import router as source_router

    app.include_router(functions_router)
    app.include_router(graph_router)
    app.include_router(source_router)
    app.include_router(health_router)

    logger.info("FastAPI app created with all routes registered")
    return app
