"""Timecheck API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TimecheckError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Exactly one TimestampStore per app, created here and shared by all requests

Design Decisions:
    - create_app() factory: tests build isolated apps with their own store
      and clock; the module-level `app` serves uvicorn
    - Store created in the factory rather than in lifespan: ASGI test
      transports do not run lifespan, and the store needs no async setup
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from timecheck.api.error_handlers import register_error_handlers
from timecheck.api.routes import elapsed, health, ulids
from timecheck.config import Settings, get_settings
from timecheck.core.timestamp_store import TimestampStore
from timecheck.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"{settings.service_name} API started")
    yield
    logger.info(f"{settings.service_name} API shutting down")


def create_app(
    settings: Settings | None = None, store: TimestampStore | None = None,
) -> FastAPI:
    """Build the FastAPI app with its shared TimestampStore."""
    settings = settings or get_settings()
    app = FastAPI(
        title="Timecheck API", version=settings.version, lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.timestamp_store = store if store is not None else TimestampStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(elapsed.router)
    app.include_router(ulids.router)

    register_error_handlers(app)
    return app


app = create_app()


def main() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
