"""API test fixtures — isolated app per test + async HTTP client.

Invariants:
    - Every test gets a fresh app with its own TimestampStore on a fake clock
    - get_now pinned to a fixed instant so future-dated counts are stable
"""

from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient

from timecheck.api.dependencies import get_now
from timecheck.config import Settings
from timecheck.core.timestamp_store import TimestampStore
from timecheck.main import create_app

PINNED_NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def store(fake_clock):
    return TimestampStore(clock=fake_clock)


@pytest.fixture
def test_app(store):
    app = create_app(settings=Settings(), store=store)
    app.dependency_overrides[get_now] = lambda: PINNED_NOW
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(test_app):
    async with AsyncClient(
        transport=ASGITransport(app=test_app), base_url="http://test",
    ) as c:
        yield c
