# cpgview graph queries - search, one-hop call neighborhoods, source slices
# Only function nodes and call edges take part in traversal.

from .assembler import GraphAssembler
from .neighborhood import resolve_neighborhood
from .queries import (
    get_call_edges_between,
    get_function,
    get_graph_stats,
    get_neighbor_rows,
    get_node_kind,
    search_functions,
)
from .source import get_source, resolve_line_range
from .validation import escape_like, sanitize_node_id, validate_search_query

__all__ = [
    "GraphAssembler",
    "resolve_neighborhood",
    "search_functions",
    "get_function",
    "get_node_kind",
    "get_neighbor_rows",
    "get_call_edges_between",
    "get_graph_stats",
    "get_source",
    "resolve_line_range",
    "sanitize_node_id",
    "escape_like",
    "validate_search_query",
]
