"""FastAPI dependencies for cpgview.

Provides shared dependencies via FastAPI's Depends() injection system.
"""

from fastapi import Request

from ..core.db import DatabaseManager
from ..core.graph import GraphAssembler


def get_db_manager(request: Request) -> DatabaseManager:
    """Get DatabaseManager from app state."""
    return request.app.state.db_manager


def get_graph_assembler(request: Request) -> GraphAssembler:
    """Build a GraphAssembler over the shared DatabaseManager."""
    return GraphAssembler(request.app.state.db_manager)
