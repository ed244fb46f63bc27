"""Elapsed Timer — save a key now, later ask how many whole seconds have passed.

Invariants:
    - POST /12/save/{key} never fails and returns an empty 200
    - GET /12/load/{key} returns the elapsed seconds as a plain-text integer
    - Unknown keys surface as KeyNotFoundError → 404 via the global handler
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse, Response

from timecheck.api.dependencies import get_timestamp_store
from timecheck.core.timestamp_store import TimestampStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/12", tags=["elapsed"])


@router.post("/save/{key}", status_code=status.HTTP_200_OK)
async def save_key(
    key: str, store: TimestampStore = Depends(get_timestamp_store),
):
    store.record(key)
    return Response(status_code=status.HTTP_200_OK)


@router.get("/load/{key}", response_class=PlainTextResponse)
async def load_key(
    key: str, store: TimestampStore = Depends(get_timestamp_store),
):
    """Whole seconds since key was last saved."""
    return str(store.elapsed(key))
