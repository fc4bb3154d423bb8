"""Health route."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..deps import get_db_manager

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check(db_manager=Depends(get_db_manager)):
    """Report whether the store answers a trivial query."""
    timestamp = datetime.now(timezone.utc).isoformat()
    if db_manager.check_connection():
        return {"status": "ok", "database": "connected", "timestamp": timestamp}

    logger.error("Health check failed: database unavailable")
    return JSONResponse(
        status_code=503,
        content={"status": "error", "database": "disconnected", "timestamp": timestamp},
    )
