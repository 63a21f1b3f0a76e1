"""
notecache — Health Check Route
===============================

What:  Liveness/readiness probe for supervisors and load balancers.
How:   Checks that the cache directory exists and is writable. A plain
       `def`, so FastAPI runs the blocking stat calls in its threadpool. Always
       answers 200; the `status` field carries the verdict.
"""

import logging
import os
import time

from fastapi import APIRouter, Depends

from notecache import __version__
from notecache.schemas.note import HealthResponse
from notecache.services import get_note_store
from notecache.services.note_store import NoteStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
def health_check(store: NoteStore = Depends(get_note_store)) -> HealthResponse:
    cache_dir = store.cache_dir
    writable = cache_dir.is_dir() and os.access(cache_dir, os.W_OK)
    if not writable:
        logger.warning("Health check: cache directory not writable: %s", cache_dir)

    return HealthResponse(
        status="healthy" if writable else "unhealthy",
        version=__version__,
        cache_dir=str(cache_dir.resolve()),
        cache_writable=writable,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
