"""Graph API routes: call neighborhood and store overview.

The id travels as a query parameter because function ids contain
slashes, which would split a path segment.
"""

import logging

from fastapi import APIRouter, Depends, Query

from ...core.exceptions import ValidationError
from ...core.graph import GraphAssembler, get_graph_stats, resolve_neighborhood, sanitize_node_id
from ..deps import get_db_manager, get_graph_assembler
from ..schemas import GraphResponse, GraphStats

logger = logging.getLogger(__name__)

router = APIRouter(tags=["graph"])


@router.get("/function/graph", response_model=GraphResponse)
def get_function_graph(
    id: str = Query(default="", description="Function node id"),
    db_manager=Depends(get_db_manager),
    assembler: GraphAssembler = Depends(get_graph_assembler),
):
    """Get the one-hop caller/callee graph around a function.

    Returns Cytoscape elements: the function, its direct callers and
    callees (capped at 1000 nodes), and every call edge among them.
    """
    validation = sanitize_node_id(id)
    if not validation.valid:
        raise ValidationError(validation.error or "Invalid function ID")

    neighborhood = resolve_neighborhood(db_manager, validation.sanitized)
    graph = assembler.assemble(neighborhood)

    return {
        "nodes": [{"data": {"id": n.id, "label": n.label}} for n in graph.nodes],
        "edges": [
            {"data": {"id": e.id, "source": e.source, "target": e.target}}
            for e in graph.edges
        ],
    }


@router.get("/stats", response_model=GraphStats)
def graph_overview(db_manager=Depends(get_db_manager)):
    """Get store overview: node and edge counts by kind."""
    return get_graph_stats(db_manager)
