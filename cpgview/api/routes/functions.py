"""Function search route."""

import logging
from typing import List

from fastapi import APIRouter, Depends, Query

from ...core.exceptions import ValidationError
from ...core.graph import search_functions, validate_search_query
from ..deps import get_db_manager
from ..schemas import FunctionItem

logger = logging.getLogger(__name__)

router = APIRouter(tags=["functions"])


@router.get("/functions", response_model=List[FunctionItem])
def find_functions(
    q: str = Query(default="", description="Substring of the function name"),
    db_manager=Depends(get_db_manager),
):
    """Search function nodes by name substring (max 50 results).

    An empty query returns an empty list without touching the store.
    """
    validation = validate_search_query(q)
    if not validation.valid:
        raise ValidationError(validation.error or "Invalid query")

    matches = search_functions(db_manager, validation.sanitized)
    return [m.to_dict() for m in matches]
