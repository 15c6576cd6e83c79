"""REST endpoints for the event catalog.

Path prefix: /api/events

The router is a thin translator between wire view-models and the
repository contract.  It holds no state and makes no decisions beyond
minimal field validation.  Repository errors are mapped to HTTP status
codes by the handler installed with ``install_error_handlers``:

    UNSUPPORTED      → 501 Not Implemented
    INVALID_ARGUMENT → 400 Bad Request
    CANCELLED        → 503 Service Unavailable
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, FastAPI, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse

from event_catalog.api.view_models import (
    EventResponse,
    EventViewModel,
    to_domain,
    to_response,
    validate_view_model,
)
from event_catalog.domain.enums import RepositoryErrorKind
from event_catalog.domain.errors import RepositoryError
from event_catalog.domain.event import Event
from event_catalog.domain.event_specs import EventSpecs
from event_catalog.foundation.clock import utc_now
from event_catalog.store.generation import GenerationSpecification
from event_catalog.store.repository import Repository

logger = logging.getLogger(__name__)

_STATUS_BY_KIND = {
    RepositoryErrorKind.UNSUPPORTED: status.HTTP_501_NOT_IMPLEMENTED,
    RepositoryErrorKind.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    RepositoryErrorKind.CANCELLED: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def _validation_problem(errors: dict[str, list[str]]) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"title": "One or more validation errors occurred.", "errors": errors},
    )


def create_events_router(repository: Repository[Event]) -> APIRouter:
    """Factory that wires the events endpoints to a concrete repository."""

    router = APIRouter(prefix="/api/events", tags=["events"])

    @router.get("", response_model=list[EventResponse])
    async def list_events() -> list[EventResponse]:
        """Newest events first, at most 500."""
        spec = GenerationSpecification.derive(EventSpecs.NEWEST_EVENTS)
        events = await repository.list(spec)
        created = utc_now()
        return [to_response(e, created) for e in events]

    @router.get("/{event_id}", response_model=EventResponse, name="events_get")
    async def get_event(event_id: int) -> EventResponse:
        event = await repository.get_by_id(event_id)
        if event is None:
            raise HTTPException(status_code=404, detail=f"Event {event_id} not found")
        return to_response(event, utc_now())

    @router.post("", status_code=status.HTTP_201_CREATED, response_model=EventResponse, name="events_create")
    async def create_event(body: EventViewModel, request: Request, response: Response):
        errors = validate_view_model(body)
        if errors:
            return _validation_problem(errors)

        body = body.model_copy(update={"id": 0, "created_utc": utc_now()})
        created = await repository.add(to_domain(body))
        response.headers["Location"] = str(request.url_for("events_get", event_id=created.id))
        return to_response(created, body.created_utc)

    @router.put("/{event_id}", response_model=EventResponse, name="events_update")
    async def replace_event(event_id: int, body: EventViewModel):
        errors = validate_view_model(body)
        if event_id != body.id:
            errors.setdefault("id", []).append("Route id must match body id.")
        if errors:
            return _validation_problem(errors)

        existing = await repository.get_by_id(event_id)
        if existing is None:
            raise HTTPException(status_code=404, detail=f"Event {event_id} not found")

        replacement = to_domain(body)
        await repository.update(replacement)
        return to_response(replacement, body.created_utc or utc_now())

    @router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT, name="events_delete")
    async def delete_event(event_id: int) -> Response:
        existing = await repository.get_by_id(event_id)
        if existing is None:
            raise HTTPException(status_code=404, detail=f"Event {event_id} not found")

        await repository.delete(existing)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


def install_error_handlers(app: FastAPI) -> None:
    """Map repository errors to HTTP responses on *app*."""

    @app.exception_handler(RepositoryError)
    async def repository_error_handler(request: Request, exc: RepositoryError) -> JSONResponse:
        code = _STATUS_BY_KIND.get(exc.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)
        if exc.kind == RepositoryErrorKind.UNSUPPORTED:
            logger.warning("%s %s → unsupported: %s", request.method, request.url.path, exc)
        else:
            logger.info("%s %s → %s: %s", request.method, request.url.path, exc.kind.value, exc)
        return JSONResponse(
            status_code=code,
            content={"detail": str(exc), "kind": exc.kind.value},
        )
