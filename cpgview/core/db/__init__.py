"""
Database module for cpgview.

Exports:
- DatabaseManager: read-only connection and session management
- get_database_manager: Factory function for DatabaseManager
- Models: Node, Edge, SourceFile
- Kinds: NodeKind, EdgeKind
- Base: SQLAlchemy declarative base
"""

from .db import DatabaseManager, build_readonly_url, get_database_manager
from .models import Base, Edge, EdgeKind, Node, NodeKind, SourceFile

__all__ = [
    # Database management
    "DatabaseManager",
    "build_readonly_url",
    "get_database_manager",

    # ORM models
    "Base",
    "Node",
    "Edge",
    "SourceFile",
    "NodeKind",
    "EdgeKind",
]
