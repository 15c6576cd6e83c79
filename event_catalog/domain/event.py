"""Event entities and the time and place they carry.

All three models are immutable after creation and validated at the
boundary, so downstream code never re-checks field constraints.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


def ensure_utc(v: datetime | None) -> datetime | None:
    if v is not None and v.tzinfo is None:
        return v.replace(tzinfo=timezone.utc)
    return v


# ── Event Time ───────────────────────────────────────────────────────────────

class EventTime(BaseModel):
    """When an event starts (or occurs, if momentary) and optionally ends."""

    start: datetime = Field(..., description="When the event starts, or occurs if momentary")
    end: Optional[datetime] = Field(
        default=None,
        description="When the event ends (None for momentary events)",
    )

    model_config = {"frozen": True}

    @field_validator("start", "end")
    @classmethod
    def timestamps_must_be_aware(cls, v: datetime | None) -> datetime | None:
        return ensure_utc(v)

    @model_validator(mode="after")
    def end_not_before_start(self) -> "EventTime":
        if self.end is not None and self.end < self.start:
            raise ValueError("end must not be before start")
        return self

    @property
    def is_momentary(self) -> bool:
        """True if the event is a single moment (no end, or end == start)."""
        return self.end is None or self.end == self.start

    @property
    def is_range(self) -> bool:
        """True if the event spans a duration."""
        return self.end is not None and self.start < self.end

    @property
    def duration_seconds(self) -> float:
        if self.end is None:
            return 0.0
        return (self.end - self.start).total_seconds()


# ── Address ──────────────────────────────────────────────────────────────────

class Address(BaseModel):
    """A point on the map.  Coordinates are degrees and are not range-checked."""

    id: int = 0
    description: Optional[str] = None
    latitude: float
    longitude: float

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"{self.latitude:.6f}, {self.longitude:.6f}"


# ── Event ────────────────────────────────────────────────────────────────────

class Event(BaseModel):
    """A catalogued event, identified by an integer key."""

    id: int
    title: str
    description: str = ""
    photo_path: str = ""
    event_time: EventTime
    address: Address

    model_config = {"frozen": True}
