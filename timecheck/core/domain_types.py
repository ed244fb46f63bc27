"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Weekday values follow datetime.weekday(): 0 = Monday .. 6 = Sunday
    - MonotonicClock returns seconds from an arbitrary, never-decreasing origin

Design Decisions:
    - Clocks as plain callables: time.monotonic and a lambda both satisfy them,
      so tests inject fakes without subclassing anything
"""

from enum import Enum
from typing import Callable

from timecheck.core.errors import InvalidWeekdayError


# ─── Clocks ──────────────────────────────────────────────────────

MonotonicClock = Callable[[], float]


# ─── Enums ───────────────────────────────────────────────────────

class Weekday(int, Enum):
    """Day of week, numbered like datetime.weekday()."""
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


def parse_weekday(value: int) -> Weekday:
    """Map an integer selector to Weekday or raise InvalidWeekdayError."""
    try:
        return Weekday(value)
    except ValueError:
        raise InvalidWeekdayError(value) from None
