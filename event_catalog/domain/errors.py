"""Repository error taxonomy.

Every error raised by a repository carries a ``kind`` tag so callers can
branch on it without caring about the concrete class::

    try:
        events = await repo.list(spec)
    except RepositoryError as exc:
        match exc.kind:
            case RepositoryErrorKind.UNSUPPORTED:
                ...

None of these are retried internally.  Retry is the caller's business.
"""

from __future__ import annotations

from event_catalog.domain.enums import RepositoryErrorKind


class RepositoryError(Exception):
    """Base class for all repository failures."""

    kind: RepositoryErrorKind

    def __init__(self, kind: RepositoryErrorKind, message: str) -> None:
        self.kind = kind
        super().__init__(message)


class InvalidArgumentError(RepositoryError, ValueError):
    """Raised at construction time when a parameter is out of its range."""

    def __init__(self, argument: str, reason: str) -> None:
        self.argument = argument
        self.reason = reason
        super().__init__(RepositoryErrorKind.INVALID_ARGUMENT, f"{argument}: {reason}")


class UnsupportedOperationError(RepositoryError, NotImplementedError):
    """Raised when a backend cannot perform the requested operation."""

    def __init__(self, operation: str, detail: str | None = None) -> None:
        self.operation = operation
        message = f"Operation '{operation}' is not supported"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(RepositoryErrorKind.UNSUPPORTED, message)


class OperationCancelledError(RepositoryError):
    """Raised when a cancellation signal is observed mid-operation."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(RepositoryErrorKind.CANCELLED, f"Operation '{operation}' was cancelled")
