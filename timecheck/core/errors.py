"""Error Hierarchy — typed, categorized exceptions for all Timecheck failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - All errors here are request-scoped (400/404): none is fatal to the process
    - to_response() produces the REST envelope used by the global handler
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with TimecheckError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    key: str | None = None
    index: int | None = None
    debug_info: dict[str, Any] | None = None


class TimecheckError(Exception):
    """Base exception for all Timecheck errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "key": self.context.key,
                    "index": self.context.index,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class KeyNotFoundError(TimecheckError):
    """Elapsed lookup on a key that was never recorded."""
    def __init__(self, key: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.key = key
        super().__init__(
            f"Key '{key}' has not been recorded",
            "KEY_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.key = key


class InvalidWeekdayError(TimecheckError):
    """Weekday selector outside 0 (Monday) .. 6 (Sunday)."""
    def __init__(self, weekday: int, context: ErrorContext | None = None):
        super().__init__(
            f"Weekday must be between 0 (Monday) and 6 (Sunday), got {weekday}",
            "INVALID_WEEKDAY", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.weekday = weekday


class MalformedIdentifierError(TimecheckError):
    """String is not a valid 26-character ULID."""
    def __init__(
        self, value: str, index: int | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.index = index
        where = f" at position {index}" if index is not None else ""
        super().__init__(
            f"Malformed ULID{where}: {value!r}",
            "MALFORMED_IDENTIFIER", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.value = value
        self.index = index
