"""Root conftest — shared test configuration."""

import os

import pytest

# Keep a developer's .env or shell settings from leaking into tests
os.environ.setdefault("TIMECHECK_LOG_FORMAT", "text")
os.environ.setdefault("TIMECHECK_LOG_LEVEL", "WARNING")


class FakeMonotonicClock:
    """Controllable stand-in for time.monotonic."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock():
    return FakeMonotonicClock()
