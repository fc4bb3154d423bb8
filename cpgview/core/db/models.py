"""
SQLAlchemy ORM models for the code property graph store.

The store is produced by an offline analysis pass and only read here:
- Node: program entities (functions and other kinds)
- Edge: relationships between nodes (call and other kinds)
- SourceFile: full text of every analyzed file
"""

from enum import Enum

from sqlalchemy import Column, Index, Integer, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class NodeKind(Enum):
    """Node kinds that change query behaviour.

    Only function nodes take part in neighborhood resolution; every other
    kind the analysis pass emits collapses to OTHER.
    """
    FUNCTION = "function"
    OTHER = "other"

    @classmethod
    def parse(cls, raw) -> "NodeKind":
        return cls.FUNCTION if raw == cls.FUNCTION.value else cls.OTHER


class EdgeKind(Enum):
    """Edge kinds. Only call edges are traversed."""
    CALL = "call"
    OTHER = "other"


# =============================================================================
# Graph Tables
# =============================================================================

class Node(Base):
    """A program entity. External functions use the ``ext::`` id prefix."""
    __tablename__ = "nodes"

    id = Column(String, primary_key=True)
    kind = Column(String, nullable=False)
    name = Column(String)
    package = Column(String)
    file = Column(String)
    line = Column(Integer)
    end_line = Column(Integer)
    type_info = Column(Text)

    __table_args__ = (
        Index("idx_nodes_kind_name", "kind", "name"),
    )

    def __repr__(self):
        return f"<Node(id='{self.id}', kind='{self.kind}', name='{self.name}')>"


class Edge(Base):
    """A directed relationship. ``call`` from A to B means A invokes B."""
    __tablename__ = "edges"

    # Edges have no natural key in the store; rowid keeps the ORM happy.
    rowid = Column(Integer, primary_key=True, autoincrement=True)
    source = Column(String, nullable=False)
    target = Column(String, nullable=False)
    kind = Column(String, nullable=False)

    __table_args__ = (
        Index("idx_edges_source", "source", "kind"),
        Index("idx_edges_target", "target", "kind"),
    )

    def __repr__(self):
        return f"<Edge(source='{self.source}', target='{self.target}', kind='{self.kind}')>"


class SourceFile(Base):
    """Full newline-delimited text of an analyzed file."""
    __tablename__ = "sources"

    file = Column(String, primary_key=True)
    content = Column(Text, nullable=False)

    def __repr__(self):
        return f"<SourceFile(file='{self.file}')>"
