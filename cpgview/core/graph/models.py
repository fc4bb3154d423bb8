"""Data contracts for the graph query layer.

Kept as dataclasses (not ORM models) for transport between the query
functions and the API layer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class Direction(Enum):
    """Which side of the target a neighbor sits on."""
    CALLER = "caller"
    CALLEE = "callee"


@dataclass
class ValidationResult:
    """Outcome of validating an externally supplied string.

    ``sanitized`` is only meaningful when ``valid`` is True; invalid
    results always carry an empty string and an error reason.
    """
    valid: bool
    sanitized: str = ""
    error: Optional[str] = None


@dataclass
class FunctionMatch:
    """A function-name search hit."""
    id: str
    name: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name}


@dataclass
class TargetFunction:
    """The function a neighborhood is built around."""
    id: str
    name: Optional[str]


@dataclass
class NeighborRow:
    """One direction-tagged caller or callee of the target."""
    direction: Direction
    id: str
    name: Optional[str]
    package: Optional[str] = None
    file: Optional[str] = None
    line: Optional[int] = None


@dataclass
class Neighborhood:
    """Target function plus its callers (first) and callees, in query order."""
    target: TargetFunction
    rows: List[NeighborRow] = field(default_factory=list)

    @property
    def callers(self) -> List[NeighborRow]:
        return [r for r in self.rows if r.direction is Direction.CALLER]

    @property
    def callees(self) -> List[NeighborRow]:
        return [r for r in self.rows if r.direction is Direction.CALLEE]


@dataclass
class GraphNode:
    id: str
    label: str


@dataclass
class GraphEdge:
    """A call edge. ``id`` is response-local (``edge-<index>``), never stable."""
    id: str
    source: str
    target: str


@dataclass
class Graph:
    nodes: List[GraphNode] = field(default_factory=list)
    edges: List[GraphEdge] = field(default_factory=list)


@dataclass
class SourceSlice:
    """Source lines backing a node. Line numbers are 1-based and inclusive."""
    file_name: str
    start_line: int
    end_line: int
    code: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file_name": self.file_name,
            "start_line": self.start_line,
            "end_line": self.end_line,
            "code": self.code,
        }
