"""Source route: the code lines backing a graph node."""

import logging

from fastapi import APIRouter, Depends, Query

from ...core.exceptions import ValidationError
from ...core.graph import get_source, sanitize_node_id
from ..deps import get_db_manager
from ..schemas import SourceResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["source"])


@router.get("/source", response_model=SourceResponse)
def get_node_source(
    id: str = Query(default="", description="Node id"),
    db_manager=Depends(get_db_manager),
):
    """Get the source lines for a node.

    External functions and nodes without file metadata answer 404 with
    the node's display metadata instead of code.
    """
    validation = sanitize_node_id(id)
    if not validation.valid:
        raise ValidationError(validation.error or "Invalid node ID")

    return get_source(db_manager, validation.sanitized).to_dict()
