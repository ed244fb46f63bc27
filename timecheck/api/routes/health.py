"""Health & Diagnostics — liveness probe, root greeting and a forced-error route.

Invariants:
    - GET / always returns "Hello, world!" as plain text
    - GET /-1/health always returns 200 if the process is up (liveness)
    - GET /-1/error always returns 500 with a plain-text body
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import PlainTextResponse

from timecheck.api.dependencies import get_timestamp_store
from timecheck.core.timestamp_store import TimestampStore

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse)
async def hello_world():
    return "Hello, world!"


@router.get("/-1/health", status_code=status.HTTP_200_OK)
async def health_check(
    request: Request, store: TimestampStore = Depends(get_timestamp_store),
):
    """Basic liveness probe. Returns 200 if the process is up."""
    settings = request.app.state.settings
    return {
        "status": "healthy",
        "service": settings.service_name,
        "version": settings.version,
        "tracked_keys": len(store),
    }


@router.get("/-1/error", response_class=PlainTextResponse)
async def forced_error():
    """Always fails; used to check error plumbing end to end."""
    logger.warning("Forced error endpoint called", extra={"path": "/-1/error"})
    return PlainTextResponse(
        "Internal Server Error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
