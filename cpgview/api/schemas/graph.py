"""Graph API response schemas."""

from typing import List, Optional

from pydantic import BaseModel, Field


class FunctionItem(BaseModel):
    """Function search hit."""
    id: str = Field(..., description="Node id")
    name: Optional[str] = Field(None, description="Function name")


class NodeData(BaseModel):
    id: str = Field(..., description="Node id")
    label: str = Field(..., description="Display label (name, or id when unnamed)")


class EdgeData(BaseModel):
    id: str = Field(..., description="Response-local edge id (edge-<index>)")
    source: str = Field(..., description="Calling node id")
    target: str = Field(..., description="Called node id")


class GraphNodeElement(BaseModel):
    """Cytoscape node element."""
    data: NodeData


class GraphEdgeElement(BaseModel):
    """Cytoscape edge element."""
    data: EdgeData


class GraphResponse(BaseModel):
    """Neighborhood graph response."""
    nodes: List[GraphNodeElement] = Field(default_factory=list, description="Target and its neighbors")
    edges: List[GraphEdgeElement] = Field(default_factory=list, description="Call edges among the nodes")


class SourceResponse(BaseModel):
    """Source lines backing a node."""
    file_name: str = Field(..., description="File the node is defined in")
    start_line: int = Field(..., description="First line (1-based)")
    end_line: int = Field(..., description="Last line (1-based, inclusive)")
    code: str = Field(..., description="Extracted source text")


class GraphStats(BaseModel):
    """Store summary counts."""
    total_nodes: int = Field(0, description="Total number of nodes")
    total_edges: int = Field(0, description="Total number of edges")
    node_kinds: dict = Field(default_factory=dict, description="Node count by kind")
    edge_kinds: dict = Field(default_factory=dict, description="Edge count by kind")
    source_files: int = Field(0, description="Number of stored source files")
