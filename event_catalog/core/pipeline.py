"""Evaluate a Specification against an in-memory sequence.

Stages run in a fixed order, each a no-op when its directive is absent:

    filter(criteria) → order(order_by | order_by_descending) → skip → take

When both order selectors are set, descending wins.  Sorting is stable,
so rows with equal keys keep their incoming order.
"""

from __future__ import annotations

from itertools import islice
from typing import Iterable, TypeVar

from event_catalog.domain.specification import Specification

T = TypeVar("T")


def apply_specification(items: Iterable[T], spec: Specification[T]) -> list[T]:
    """Return the rows of *items* selected, ordered and paged by *spec*.

    *items* is consumed once and never mutated.
    """
    rows: Iterable[T] = items

    if spec.criteria is not None:
        rows = filter(spec.criteria, rows)

    if spec.order_by_descending is not None:
        rows = sorted(rows, key=spec.order_by_descending, reverse=True)
    elif spec.order_by is not None:
        rows = sorted(rows, key=spec.order_by)

    start = spec.skip or 0
    stop = start + spec.take if spec.take is not None else None
    return list(islice(rows, start, stop))
