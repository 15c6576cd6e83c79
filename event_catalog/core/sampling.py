"""Temporal sampling and title draws for synthetic events.

Every helper takes the caller's ``Random`` so one seeded stream drives a
whole generation call.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from random import Random

from event_catalog.domain.enums import MarkerType
from event_catalog.domain.event import EventTime

END_MARGIN = timedelta(minutes=1)
MAX_DURATION = timedelta(hours=24)

TITLES: tuple[str, ...] = tuple(m.value for m in MarkerType)


def random_past_instant(now: datetime, max_days_ago: float, rng: Random) -> datetime:
    """Return an instant uniformly drawn from [now - max_days_ago, now]."""
    return now - rng.random() * timedelta(days=max_days_ago)


def random_event_time(
    now: datetime,
    start: datetime,
    probability_momentary: float,
    rng: Random,
) -> EventTime:
    """Decide between a momentary and a ranged event starting at *start*.

    A ranged event ends no later than one minute before *now* and lasts at
    most 24 hours.  When *start* is too recent to fit any end before that
    margin, the event falls back to momentary.

    Draws one value for the momentary coin and, for ranged events, one more
    for the span.
    """
    if rng.random() < probability_momentary:
        return EventTime(start=start)

    max_span = (now - END_MARGIN) - start
    if max_span <= timedelta(0):
        return EventTime(start=start)

    span = rng.random() * min(max_span, MAX_DURATION)
    return EventTime(start=start, end=start + span)


def random_title(rng: Random) -> str:
    return TITLES[rng.randrange(len(TITLES))]
