"""Controlled enumerations for the event-catalog domain.

Every categorical field in the domain MUST reference an enum defined here.
"""

from __future__ import annotations

from enum import Enum


class MarkerType(str, Enum):
    """Title vocabulary of synthetic events.

    The map client uses the title as the marker discriminator, so the
    values double as marker-type strings on the wire.
    """

    SANTA = "santa"
    DEER = "deer"
    DWARF = "dwarf"
    TREE = "tree"


class RepositoryErrorKind(str, Enum):
    """Tag carried by every repository error."""

    INVALID_ARGUMENT = "invalid_argument"
    UNSUPPORTED = "unsupported"
    CANCELLED = "cancelled"
