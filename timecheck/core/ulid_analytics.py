"""ULID Analytics — decode ULIDs, convert them to UUIDs and count batch predicates.

Invariants:
    - A ULID is 128 bits: 48-bit millisecond timestamp (high) + 80 random bits (low)
    - ULID -> UUID is a bit-for-bit reinterpretation; nothing added or dropped
    - convert_reversed() never raises: unparseable entries are dropped and
      the survivors come back in reverse input order
    - compute_batch_stats() is fail-fast: the weekday is checked first, then
      every entry must decode, so all four counts cover the same set
    - All calendar predicates use the UTC date

Design Decisions:
    - python-ulid does the Crockford base-32 parsing
    - Calendar fields come from whole milliseconds, not float seconds, so
      entries a millisecond before midnight never round into the next day
    - Timestamps past datetime.max (year 9999) are shifted back by whole
      400-year Gregorian cycles for month/day/weekday; 146097 days is a
      whole number of weeks, so the shift preserves all three
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Iterable, Sequence
from uuid import UUID

from ulid import ULID

from timecheck.core.domain_types import parse_weekday
from timecheck.core.errors import MalformedIdentifierError

logger = logging.getLogger(__name__)

RANDOMNESS_BITS = 80
RANDOMNESS_MASK = (1 << RANDOMNESS_BITS) - 1
CHRISTMAS_EVE = (12, 24)  # (month, day)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)
_MAX_MILLISECONDS = (datetime.max.replace(tzinfo=timezone.utc) - _EPOCH) // _ONE_MS
_GREGORIAN_CYCLE_MS = 146_097 * 86_400_000


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def utc_date_of(milliseconds: int) -> date:
    """UTC calendar date for a Unix millisecond timestamp of any 48-bit size."""
    while milliseconds > _MAX_MILLISECONDS:
        milliseconds -= _GREGORIAN_CYCLE_MS
    return (_EPOCH + timedelta(milliseconds=milliseconds)).date()


@dataclass(frozen=True)
class DecodedUlid:
    """A parsed ULID with the derived attributes analytics needs."""
    ulid: ULID

    @property
    def value(self) -> int:
        return int(self.ulid)

    @property
    def milliseconds(self) -> int:
        return self.ulid.milliseconds

    @property
    def randomness(self) -> int:
        return self.value & RANDOMNESS_MASK

    @property
    def uuid(self) -> UUID:
        return self.ulid.to_uuid()

    @property
    def created_at(self) -> datetime:
        """Creation instant in UTC.

        Raises OverflowError for timestamps past year 9999; created_on and
        is_after cover the full 48-bit range.
        """
        return _EPOCH + timedelta(milliseconds=self.milliseconds)

    @property
    def created_on(self) -> date:
        return utc_date_of(self.milliseconds)

    @property
    def lsb_is_set(self) -> bool:
        return self.value & 1 == 1

    def is_after(self, instant: datetime) -> bool:
        """True when the creation instant is strictly later than instant."""
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        instant_us = (instant - _EPOCH) // timedelta(microseconds=1)
        return self.milliseconds * 1000 > instant_us


def decode_ulid(text: str, index: int | None = None) -> DecodedUlid:
    """Parse a 26-character ULID string, in any letter case.

    Args:
        text: Crockford base-32 ULID.
        index: Position in the caller's batch, reported in the error.

    Raises:
        MalformedIdentifierError: text is not a valid ULID.
    """
    if not isinstance(text, str):
        raise MalformedIdentifierError(str(text), index)
    try:
        # Crockford base-32 is case-insensitive; python-ulid reads uppercase only
        return DecodedUlid(ULID.from_str(text.upper()))
    except (ValueError, TypeError):
        raise MalformedIdentifierError(str(text), index) from None


def ulid_to_uuid(text: str) -> UUID:
    """Reinterpret a ULID string's 128 bits as a UUID."""
    return decode_ulid(text).uuid


def convert_reversed(ulids: Iterable[str]) -> list[UUID]:
    """Convert ULIDs to UUIDs, dropping invalid ones, in reverse input order."""
    converted: list[UUID] = []
    dropped = 0
    for text in ulids:
        try:
            converted.append(ulid_to_uuid(text))
        except MalformedIdentifierError:
            dropped += 1
    if dropped:
        logger.info(
            f"Dropped {dropped} malformed ULID(s) during conversion",
            extra={"batch_size": len(converted) + dropped},
        )
    converted.reverse()
    return converted


@dataclass(frozen=True)
class BatchStats:
    """Four independent counts over a ULID batch."""
    christmas_eve: int = 0
    weekday: int = 0
    in_the_future: int = 0
    lsb_is_1: int = 0


def compute_batch_stats(
    weekday: int, ulids: Sequence[str], now: datetime | None = None,
) -> BatchStats:
    """Count Christmas Eve, weekday, future-dated and odd-valued ULIDs.

    Args:
        weekday: 0 (Monday) .. 6 (Sunday).
        ulids: ULID strings; every one must be valid.
        now: Reference instant for the future-dated count (default: current UTC).

    Raises:
        InvalidWeekdayError: weekday outside 0..6, checked before decoding.
        MalformedIdentifierError: first entry that fails to decode.
    """
    target = parse_weekday(weekday)
    decoded = [decode_ulid(text, index) for index, text in enumerate(ulids)]
    now = now or utc_now()

    dates = [d.created_on for d in decoded]
    stats = BatchStats(
        christmas_eve=sum(
            1 for day in dates if (day.month, day.day) == CHRISTMAS_EVE
        ),
        weekday=sum(1 for day in dates if day.weekday() == target),
        in_the_future=sum(1 for d in decoded if d.is_after(now)),
        lsb_is_1=sum(1 for d in decoded if d.lsb_is_set),
    )
    logger.debug(
        "Computed ULID batch stats",
        extra={"batch_size": len(decoded), "weekday": int(target)},
    )
    return stats
