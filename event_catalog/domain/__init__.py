from event_catalog.domain.errors import (
    InvalidArgumentError,
    OperationCancelledError,
    RepositoryError,
    UnsupportedOperationError,
)
from event_catalog.domain.event import Address, Event, EventTime
from event_catalog.domain.specification import Specification

__all__ = [
    "Address",
    "Event",
    "EventTime",
    "InvalidArgumentError",
    "OperationCancelledError",
    "RepositoryError",
    "Specification",
    "UnsupportedOperationError",
]
