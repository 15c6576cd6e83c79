"""Wire view-models for the events API and their mapping to domain entities.

Field names are camelCase on the wire (``startsAtUtc``) and snake_case in
Python; ``populate_by_name`` accepts both on input.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from event_catalog.domain.event import Address, Event, EventTime, ensure_utc


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EventViewModel(_WireModel):
    """The editable shape of an event, as sent by clients."""

    id: int = 0
    title: str = ""
    starts_at_utc: datetime
    ends_at_utc: datetime
    is_all_day: bool = False
    location: Optional[str] = None
    description: Optional[str] = None
    created_utc: Optional[datetime] = None

    @field_validator("starts_at_utc", "ends_at_utc", "created_utc")
    @classmethod
    def timestamps_must_be_aware(cls, v: datetime | None) -> datetime | None:
        return ensure_utc(v)


class AddressView(_WireModel):
    latitude: float
    longitude: float
    description: Optional[str] = None


class EventTimeView(_WireModel):
    start: datetime
    end: Optional[datetime] = None
    is_momentary: bool
    is_range: bool


class EventResponse(EventViewModel):
    """A listed event: the view fields plus what the map client needs."""

    marker_type: str = Field(..., description="Marker discriminator, one of the title vocabulary")
    address: AddressView
    event_time: EventTimeView


# ── Validation ───────────────────────────────────────────────────────────────

def validate_view_model(model: EventViewModel) -> dict[str, list[str]]:
    """Minimal business validation.  Returns field → messages, empty if valid."""
    errors: dict[str, list[str]] = {}
    if not model.title or not model.title.strip():
        errors.setdefault("title", []).append("Title is required.")
    if model.ends_at_utc < model.starts_at_utc:
        errors.setdefault("endsAtUtc", []).append("EndsAtUtc must be >= StartsAtUtc.")
    return errors


# ── Mapping ──────────────────────────────────────────────────────────────────

def to_response(event: Event, created_utc: datetime) -> EventResponse:
    et = event.event_time
    return EventResponse(
        id=event.id,
        title=event.title,
        starts_at_utc=et.start,
        ends_at_utc=et.end or et.start,
        is_all_day=False,
        location=str(event.address),
        description=event.description or None,
        created_utc=created_utc,
        marker_type=event.title,
        address=AddressView(
            latitude=event.address.latitude,
            longitude=event.address.longitude,
            description=event.address.description,
        ),
        event_time=EventTimeView(
            start=et.start,
            end=et.end,
            is_momentary=et.is_momentary,
            is_range=et.is_range,
        ),
    )


def to_domain(model: EventViewModel) -> Event:
    """Build a domain Event from a validated view-model.

    ``location`` is parsed as "lat, lon" when possible; anything else is
    kept as the address description at (0, 0).
    """
    latitude, longitude, place = 0.0, 0.0, model.location
    if model.location:
        parts = [p.strip() for p in model.location.split(",")]
        if len(parts) == 2:
            try:
                latitude, longitude = float(parts[0]), float(parts[1])
                place = None
            except ValueError:
                pass

    end = None if model.ends_at_utc == model.starts_at_utc else model.ends_at_utc
    return Event(
        id=model.id,
        title=model.title.strip(),
        description=model.description or "",
        event_time=EventTime(start=model.starts_at_utc, end=end),
        address=Address(description=place, latitude=latitude, longitude=longitude),
    )
