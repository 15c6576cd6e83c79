"""Specification — a declarative description of which rows a caller wants.

A Specification says *what* subset, order and page of data is wanted and
nothing about *how* to fetch it.  It carries no behaviour of its own:
whoever executes the query (see ``event_catalog.core.pipeline``) reads the
four directives and applies them.

Directive precedence:
    - ``criteria``            filter predicate, ``None`` means "keep all"
    - ``order_by``            ascending key selector
    - ``order_by_descending`` descending key selector; wins over
                              ``order_by`` when both are set
    - ``skip`` / ``take``     row offset / row limit, applied after ordering
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from event_catalog.domain.errors import InvalidArgumentError

T = TypeVar("T")

Predicate = Callable[[T], bool]
KeySelector = Callable[[T], Any]


@dataclass(frozen=True)
class Specification(Generic[T]):
    """Immutable filter / order / skip / take bundle over entities of type T."""

    criteria: Predicate | None = None
    order_by: KeySelector | None = None
    order_by_descending: KeySelector | None = None
    skip: int | None = None
    take: int | None = None

    def __post_init__(self) -> None:
        if self.skip is not None and self.skip < 0:
            raise InvalidArgumentError("skip", f"must be >= 0, got {self.skip}")
        if self.take is not None and self.take < 0:
            raise InvalidArgumentError("take", f"must be >= 0, got {self.take}")

    @property
    def directives(self) -> dict[str, Any]:
        """The four query directives as keyword arguments."""
        return {
            "criteria": self.criteria,
            "order_by": self.order_by,
            "order_by_descending": self.order_by_descending,
            "skip": self.skip,
            "take": self.take,
        }
