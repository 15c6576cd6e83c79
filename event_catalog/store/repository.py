"""Generic repository contract.

Repository[T] is the capability surface every event backend presents to
the HTTP layer.  All operations are async and accept an optional
``cancel`` signal (an ``asyncio.Event``); callers that want a timeout wrap
the call in ``asyncio.wait_for``.

A backend may implement only a subset.  Operations it cannot perform MUST
raise ``UnsupportedOperationError`` immediately, never silently return an
empty or default value, so callers can tell "nothing there" apart from
"this backend cannot do that".
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import Generic, Iterable, Protocol, TypeVar

from event_catalog.domain.specification import Specification


class Entity(Protocol):
    """Anything identified by an integer key."""

    @property
    def id(self) -> int: ...


T = TypeVar("T", bound=Entity)


class Repository(ABC, Generic[T]):
    """Abstract read/write interface over entities of type T."""

    @abstractmethod
    async def get_by_id(self, id: int, *, cancel: asyncio.Event | None = None) -> T | None:
        """Return the entity with the given key, or None if not found."""

    @abstractmethod
    async def exists(self, id: int, *, cancel: asyncio.Event | None = None) -> bool:
        """Return True if an entity with the given key exists."""

    @abstractmethod
    async def list(
        self,
        spec: Specification[T] | None,
        *,
        cancel: asyncio.Event | None = None,
    ) -> list[T]:
        """Return the entities selected, ordered and paged by *spec*."""

    @abstractmethod
    async def count(
        self,
        spec: Specification[T] | None,
        *,
        cancel: asyncio.Event | None = None,
    ) -> int:
        """Return how many entities *spec* selects."""

    @abstractmethod
    async def add(self, entity: T, *, cancel: asyncio.Event | None = None) -> T:
        """Persist a new entity and return it with its assigned key."""

    @abstractmethod
    async def add_range(self, entities: Iterable[T], *, cancel: asyncio.Event | None = None) -> None:
        ...

    @abstractmethod
    async def update(self, entity: T, *, cancel: asyncio.Event | None = None) -> None:
        ...

    @abstractmethod
    async def update_range(self, entities: Iterable[T], *, cancel: asyncio.Event | None = None) -> None:
        ...

    @abstractmethod
    async def delete(self, entity: T, *, cancel: asyncio.Event | None = None) -> None:
        ...

    @abstractmethod
    async def delete_range(self, entities: Iterable[T], *, cancel: asyncio.Event | None = None) -> None:
        ...
