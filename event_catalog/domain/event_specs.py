"""Built-in event specifications."""

from __future__ import annotations

from datetime import datetime, timedelta

from event_catalog.domain.errors import InvalidArgumentError
from event_catalog.domain.event import Event
from event_catalog.domain.specification import Specification
from event_catalog.foundation.clock import utc_now

NEWEST_EVENTS_TAKE = 500


def by_start(event: Event) -> datetime:
    return event.event_time.start


def newest_events(take: int = NEWEST_EVENTS_TAKE) -> Specification[Event]:
    """Most recent events first, no filter, first *take* rows."""
    return Specification(order_by_descending=by_start, skip=0, take=take)


def started_within(days: float, now: datetime | None = None) -> Specification[Event]:
    """Events whose start lies within the last *days* days.

    The threshold is fixed when the specification is built, not when it
    is evaluated.
    """
    if days <= 0:
        raise InvalidArgumentError("days", f"must be > 0, got {days}")
    threshold = (now or utc_now()) - timedelta(days=days)
    return Specification(criteria=lambda e: e.event_time.start >= threshold)


class EventSpecs:
    """Shared, module-level specification instances."""

    NEWEST_EVENTS: Specification[Event] = newest_events()
