"""Pydantic schemas for API response models."""

from .graph import (
    EdgeData,
    FunctionItem,
    GraphEdgeElement,
    GraphNodeElement,
    GraphResponse,
    GraphStats,
    NodeData,
    SourceResponse,
)

__all__ = [
    'FunctionItem',
    'NodeData',
    'EdgeData',
    'GraphNodeElement',
    'GraphEdgeElement',
    'GraphResponse',
    'SourceResponse',
    'GraphStats',
]
