"""RandomEventRepository — a stand-in backend that synthesises events.

Nothing is stored.  Each ``list`` call generates a fresh, plausible set of
events scattered around a fixed anchor point, then runs the caller's
query directives over that set.

Design notes:
    - One ``random.Random`` per call.  No module-level generator, no state
      shared between calls, so concurrent calls need no lock.
    - The draw order per event is fixed (radius, angle, start, momentary
      coin, [span], title) so a seed reproduces the exact same output.
    - Cancellation is cooperative: the cancel signal is checked and the
      loop yields to the event loop between events.  A cancelled call
      returns nothing.
    - Only ``list`` is supported.  Everything else raises
      UnsupportedOperationError on entry.
"""

from __future__ import annotations

import asyncio
import logging
from random import Random
from typing import Iterable, NoReturn

from event_catalog.core.geo import random_offset
from event_catalog.core.pipeline import apply_specification
from event_catalog.core.sampling import random_event_time, random_past_instant, random_title
from event_catalog.domain.errors import OperationCancelledError, UnsupportedOperationError
from event_catalog.domain.event import Address, Event
from event_catalog.domain.specification import Specification
from event_catalog.foundation.clock import utc_now
from event_catalog.store.generation import GenerationSpecification
from event_catalog.store.repository import Repository

logger = logging.getLogger(__name__)


class RandomEventRepository(Repository[Event]):
    """Generates events around an anchor; supports ``list`` only.

    Args:
        description: Free-text description of the anchor.  It is NOT copied
            onto generated addresses, which always carry an empty one.
        latitude: Anchor latitude in degrees.
        longitude: Anchor longitude in degrees.
    """

    def __init__(self, description: str | None, latitude: float, longitude: float) -> None:
        self._anchor = Address(description=description, latitude=latitude, longitude=longitude)

    @property
    def anchor(self) -> Address:
        return self._anchor

    # ── Supported ────────────────────────────────────────────────────────

    async def list(
        self,
        spec: Specification[Event] | None,
        *,
        cancel: asyncio.Event | None = None,
    ) -> list[Event]:
        """Generate ``spec.count`` events and return the ones *spec* selects.

        Raises:
            UnsupportedOperationError: If *spec* is None or was not built as
                a GenerationSpecification.
            OperationCancelledError: If *cancel* is set during generation.
        """
        if spec is None:
            raise UnsupportedOperationError("list", "a GenerationSpecification is required, got None")
        if not isinstance(spec, GenerationSpecification):
            raise UnsupportedOperationError(
                "list",
                f"a GenerationSpecification is required, got {type(spec).__name__}",
            )

        candidates = await self._generate(spec, cancel)
        result = apply_specification(candidates, spec)
        logger.debug(
            "Generated %d event(s) around %s (seed=%s), returning %d",
            len(candidates),
            self._anchor,
            spec.seed,
            len(result),
        )
        return result

    # ── Unsupported ──────────────────────────────────────────────────────

    async def get_by_id(self, id: int, *, cancel: asyncio.Event | None = None) -> Event | None:
        self._unsupported("get_by_id")

    async def exists(self, id: int, *, cancel: asyncio.Event | None = None) -> bool:
        self._unsupported("exists")

    async def count(
        self,
        spec: Specification[Event] | None,
        *,
        cancel: asyncio.Event | None = None,
    ) -> int:
        self._unsupported("count")

    async def add(self, entity: Event, *, cancel: asyncio.Event | None = None) -> Event:
        self._unsupported("add")

    async def add_range(self, entities: Iterable[Event], *, cancel: asyncio.Event | None = None) -> None:
        self._unsupported("add_range")

    async def update(self, entity: Event, *, cancel: asyncio.Event | None = None) -> None:
        self._unsupported("update")

    async def update_range(self, entities: Iterable[Event], *, cancel: asyncio.Event | None = None) -> None:
        self._unsupported("update_range")

    async def delete(self, entity: Event, *, cancel: asyncio.Event | None = None) -> None:
        self._unsupported("delete")

    async def delete_range(self, entities: Iterable[Event], *, cancel: asyncio.Event | None = None) -> None:
        self._unsupported("delete_range")

    # ── Internals ────────────────────────────────────────────────────────

    async def _generate(
        self,
        spec: GenerationSpecification,
        cancel: asyncio.Event | None,
    ) -> list[Event]:
        rng = Random(spec.seed) if spec.seed is not None else Random()
        now = utc_now()
        events: list[Event] = []

        for i in range(spec.count):
            if cancel is not None and cancel.is_set():
                raise OperationCancelledError("list")
            await asyncio.sleep(0)

            lat, lon = random_offset(
                self._anchor.latitude, self._anchor.longitude, spec.radius_meters, rng
            )
            start = random_past_instant(now, spec.max_days_ago, rng)
            event_time = random_event_time(now, start, spec.probability_momentary, rng)
            title = random_title(rng)

            events.append(
                Event(
                    id=i + 1,
                    title=title,
                    description=title,
                    photo_path="",
                    event_time=event_time,
                    address=Address(description="", latitude=lat, longitude=lon),
                )
            )

        return events

    def _unsupported(self, operation: str) -> NoReturn:
        raise UnsupportedOperationError(operation, f"{type(self).__name__} only supports list")
