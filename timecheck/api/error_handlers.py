"""Error Handlers — map exceptions to the JSON error envelope.

Invariants:
    - TimecheckError → its own to_response() envelope and http_status
    - RequestValidationError → 400 VALIDATION_ERROR naming the offending fields
    - Any other exception → 500 INTERNAL_ERROR, no internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from timecheck.core.errors import ErrorCategory, ErrorSeverity, TimecheckError

logger = logging.getLogger(__name__)


def _envelope(
    code: str, message: str, category: ErrorCategory, severity: ErrorSeverity,
    **extra,
) -> dict:
    return {"error": {
        "code": code,
        "message": message,
        "category": category.value,
        "severity": severity.value,
        **extra,
    }}


async def handle_domain_error(request: Request, exc: TimecheckError):
    logger.warning(
        exc.message, extra={"error_code": exc.code, "path": request.url.path},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_validation_error(request: Request, exc: RequestValidationError):
    fields = [".".join(str(part) for part in e["loc"]) for e in exc.errors()]
    logger.warning(
        f"Rejected request fields: {', '.join(fields)}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, fields=fields,
        ),
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.error(
        f"Unhandled {type(exc).__name__}", exc_info=exc,
        extra={"path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the three handlers, most specific first."""
    app.add_exception_handler(TimecheckError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
