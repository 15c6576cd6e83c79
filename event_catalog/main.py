"""event-catalog — synthetic event catalog service.

This is the application entry point.  It wires the event repository,
the events router, CORS and the health endpoint together.

Run with:
    uvicorn event_catalog.main:app --port 5000
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from event_catalog.api.events import create_events_router, install_error_handlers
from event_catalog.config import Settings, settings
from event_catalog.domain.event import Event
from event_catalog.store.random_event_repository import RandomEventRepository
from event_catalog.store.repository import Repository

# ── Logging ──────────────────────────────────────────────────────────────────

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)

logger = logging.getLogger(__name__)


def create_app(
    repository: Repository[Event] | None = None,
    config: Settings = settings,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        repository: Event backend.  Defaults to a RandomEventRepository
            anchored at the configured coordinates.
        config: Settings to wire with.
    """
    if repository is None:
        repository = RandomEventRepository(
            config.anchor_description,
            config.anchor_latitude,
            config.anchor_longitude,
        )

    app = FastAPI(
        title=config.app_name,
        description="Event catalog backed by a synthetic event generator",
        version="0.1.0",
        debug=config.debug,
    )

    # ── Middleware ───────────────────────────────────────────────────────

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Routes ───────────────────────────────────────────────────────────

    app.include_router(create_events_router(repository))
    install_error_handlers(app)

    # ── Health ───────────────────────────────────────────────────────────

    @app.get("/health")
    async def health() -> dict:
        anchor = getattr(repository, "anchor", None)
        return {
            "status": "ok",
            "repository": type(repository).__name__,
            "anchor": anchor.model_dump() if anchor is not None else None,
        }

    logger.info("Wired %s", type(repository).__name__)
    return app


app = create_app()
