"""Request Dependencies — hand app-scoped collaborators to route handlers.

Invariants:
    - The TimestampStore lives on app.state, created once by create_app()
    - get_now is the only wall-clock read in the request path

Design Decisions:
    - Depends() over module globals: tests override get_now with
      app.dependency_overrides and build apps with their own store
"""

from datetime import datetime

from fastapi import Request

from timecheck.core.timestamp_store import TimestampStore
from timecheck.core.ulid_analytics import utc_now


def get_timestamp_store(request: Request) -> TimestampStore:
    """FastAPI dependency for the process-wide TimestampStore."""
    return request.app.state.timestamp_store


def get_now() -> datetime:
    """FastAPI dependency for the reference "now" (UTC)."""
    return utc_now()
