"""GenerationSpecification — a Specification that also says what to synthesise.

It decorates an arbitrary caller Specification: the filter, order and
paging directives are copied verbatim from the base, and the generation
knobs are layered on top.  The base is never modified.

Knobs are validated in the constructor, so an out-of-range value fails
where the specification is built, not later when it is used.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from event_catalog.domain.errors import InvalidArgumentError
from event_catalog.domain.event import Event
from event_catalog.domain.specification import Specification

DEFAULT_RADIUS_METERS = 10_000.0
DEFAULT_COUNT = 500
DEFAULT_MAX_DAYS_AGO = 30.0
DEFAULT_PROBABILITY_MOMENTARY = 0.7


@dataclass(frozen=True)
class GenerationSpecification(Specification[Event]):
    """Generation knobs plus the inherited query directives.

    Attributes:
        radius_meters: Radius of the disc around the anchor, > 0.
        count: Number of candidates to synthesise before the query runs, >= 0.
        max_days_ago: How far back a start may lie, in days, > 0.
        probability_momentary: Chance that an event has no end, in [0, 1].
        seed: Fixes the random stream when set.
    """

    radius_meters: float = DEFAULT_RADIUS_METERS
    count: int = DEFAULT_COUNT
    max_days_ago: float = DEFAULT_MAX_DAYS_AGO
    probability_momentary: float = DEFAULT_PROBABILITY_MOMENTARY
    seed: int | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        if not (self.radius_meters > 0 and math.isfinite(self.radius_meters)):
            raise InvalidArgumentError("radius_meters", f"must be > 0, got {self.radius_meters}")
        if self.count < 0:
            raise InvalidArgumentError("count", f"must be >= 0, got {self.count}")
        if not (self.max_days_ago > 0 and math.isfinite(self.max_days_ago)):
            raise InvalidArgumentError("max_days_ago", f"must be > 0, got {self.max_days_ago}")
        if not 0.0 <= self.probability_momentary <= 1.0:
            raise InvalidArgumentError(
                "probability_momentary",
                f"must be within [0, 1], got {self.probability_momentary}",
            )

    @classmethod
    def derive(
        cls,
        base: Specification[Event] | None = None,
        **knobs: Any,
    ) -> "GenerationSpecification":
        """Build a generation specification on top of *base*.

        Query directives come from *base* unchanged; *knobs* may set
        ``radius_meters``, ``count``, ``max_days_ago``,
        ``probability_momentary`` and ``seed``.  If *base* is itself a
        GenerationSpecification its knobs are kept unless overridden.
        """
        unknown = set(knobs) - _KNOBS
        if unknown:
            raise TypeError(f"unknown generation knob(s): {', '.join(sorted(unknown))}")

        fields: dict[str, Any] = {}
        if base is not None:
            fields.update(base.directives)
            if isinstance(base, GenerationSpecification):
                fields.update({k: getattr(base, k) for k in _KNOBS})
        fields.update(knobs)
        return cls(**fields)


_KNOBS = frozenset(
    {"radius_meters", "count", "max_days_ago", "probability_momentary", "seed"}
)
