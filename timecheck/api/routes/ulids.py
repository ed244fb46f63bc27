"""ULID Routes — bulk ULID → UUID conversion and batch statistics.

Invariants:
    - Request bodies are JSON arrays of strings (validated by FastAPI)
    - POST /12/ulids drops invalid entries and reverses the order
    - POST /12/ulids/{weekday} rejects the whole batch on the first bad entry

Design Decisions:
    - "now" comes from the get_now dependency so tests can pin it
"""

import logging
from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Body, Depends

from timecheck.api.dependencies import get_now
from timecheck.core.ulid_analytics import compute_batch_stats, convert_reversed
from timecheck.schemas.ulids import BatchStatsResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/12/ulids", tags=["ulids"])


@router.post("", response_model=list[UUID])
async def ulids_to_uuids(ulids: list[str] = Body(...)):
    """Convert ULIDs to UUIDs, newest input first."""
    return convert_reversed(ulids)


@router.post("/{weekday}", response_model=BatchStatsResponse)
async def ulid_batch_stats(
    weekday: int,
    ulids: list[str] = Body(...),
    now: datetime = Depends(get_now),
):
    stats = compute_batch_stats(weekday, ulids, now=now)
    logger.info(
        "ULID batch stats served",
        extra={"batch_size": len(ulids), "weekday": weekday},
    )
    return BatchStatsResponse.from_stats(stats)
