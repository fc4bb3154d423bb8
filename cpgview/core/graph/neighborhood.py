"""One-hop call neighborhood resolution."""

import logging

from ..db import DatabaseManager, NodeKind
from ..exceptions import NotFoundError, WrongKindError
from . import queries
from .models import Neighborhood

logger = logging.getLogger(__name__)


def resolve_neighborhood(db: DatabaseManager, function_id: str) -> Neighborhood:
    """Resolve the direct callers and callees of a function.

    Args:
        db: DatabaseManager instance
        function_id: Validated function node id

    Returns:
        Neighborhood with caller rows before callee rows

    Raises:
        NotFoundError: No node has this id
        WrongKindError: A node has this id but is not a function
    """
    rows = queries.get_neighbor_rows(db, function_id)

    logger.info(f"Looking for function with ID: {function_id}")
    found = queries.get_node_kind(db, function_id)
    if found is None:
        logger.warning(f"Function not found: {function_id}")
        raise NotFoundError(f"Function not found: {function_id}")

    raw_kind, kind = found
    if kind is not NodeKind.FUNCTION:
        logger.warning(f"Node exists but kind is '{raw_kind}', not 'function'")
        raise WrongKindError(function_id, raw_kind)

    target = queries.get_function(db, function_id)
    neighborhood = Neighborhood(target=target, rows=rows)
    logger.info(
        f"Found function: {target.name} ({target.id}), "
        f"{len(neighborhood.callers)} callers, {len(neighborhood.callees)} callees"
    )
    return neighborhood
