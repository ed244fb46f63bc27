"""Timestamp Store — in-memory key -> monotonic instant map shared by all requests.

Invariants:
    - At most one entry per key; record() overwrites (last write wins)
    - Entries are never deleted; state lives for the process lifetime only
    - Every read and write happens under self._lock
    - elapsed() is measured on the monotonic clock, floored to whole seconds

Design Decisions:
    - One map-wide threading.Lock: operations are O(1) dict accesses, so
      per-key locking or a reader/writer lock buys nothing at this load
    - Clock injected at construction: tests drive time without sleeping
"""

import logging
import math
import threading
import time

from timecheck.core.domain_types import MonotonicClock
from timecheck.core.errors import KeyNotFoundError

logger = logging.getLogger(__name__)


class TimestampStore:
    """Thread-safe map from an opaque key to the instant it was last recorded."""

    def __init__(self, clock: MonotonicClock = time.monotonic) -> None:
        self._recorded_at: dict[str, float] = {}
        self._lock = threading.Lock()
        self._clock = clock

    def record(self, key: str) -> None:
        """Set key's instant to now, replacing any earlier one."""
        with self._lock:
            self._recorded_at[key] = self._clock()
        logger.debug("Recorded key", extra={"key": key})

    def elapsed(self, key: str) -> int:
        """Whole seconds since key was last recorded.

        Raises:
            KeyNotFoundError: key was never recorded in this process.
        """
        with self._lock:
            recorded_at = self._recorded_at.get(key)
        if recorded_at is None:
            raise KeyNotFoundError(key)
        return max(0, math.floor(self._clock() - recorded_at))

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._recorded_at

    def __len__(self) -> int:
        with self._lock:
            return len(self._recorded_at)
