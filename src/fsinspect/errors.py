"""Exception hierarchy for path resolution, fetching, and filtering.

Every failure the inspector can report derives from :class:`InspectError`, so
the CLI can turn any of them into a clean message and a non-zero exit status
while library callers can still react to the specific category.
"""

from __future__ import annotations

from typing import Optional

__all__ = [
    "InspectError",
    "ConfigurationError",
    "InvalidPath",
    "MalformedRemoteRequest",
    "NotFound",
    "DocumentNotFound",
    "TransportError",
    "FilterError",
    "OperationCancelled",
]


class InspectError(RuntimeError):
    """Base exception carrying the path and operation that failed."""

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        operation: Optional[str] = None,
    ) -> None:
        self.path = path
        self.operation = operation
        parts = [part for part in (operation, message) if part]
        text = ": ".join(parts)
        if path is not None:
            text = f"{text} ({path!r})"
        super().__init__(text)
        self.reason = message


class ConfigurationError(InspectError):
    """Raised when required settings such as the project ID are missing."""


class InvalidPath(InspectError):
    """Raised when a user-supplied path is rejected before any remote call."""


class MalformedRemoteRequest(InspectError):
    """Raised when the store judges a path structurally invalid."""


class NotFound(InspectError):
    """Raised when neither a document nor a collection produced a record."""


class DocumentNotFound(NotFound):
    """Store-level signal that a single document does not exist."""


class TransportError(InspectError):
    """Raised for any other remote I/O failure."""


class FilterError(InspectError):
    """Raised when a ``field:substring`` search expression is malformed."""


class OperationCancelled(InspectError):
    """Raised when the invocation deadline expires or it is cancelled."""
