"""Error kinds raised by the interaction and synchronization core."""

from __future__ import annotations


class JobHubError(Exception):
    """Base class for every domain error."""


class ValidationError(JobHubError):
    """Input was empty, oversized or otherwise rejected before any write."""


class AuthorizationError(JobHubError):
    """The acting user does not own the resource being edited or deleted."""


class NotFoundError(JobHubError):
    """The referenced document does not exist (or was deleted)."""


class StoreUnavailableError(JobHubError):
    """The document store failed to carry out an operation."""


__all__ = [
    "JobHubError",
    "ValidationError",
    "AuthorizationError",
    "NotFoundError",
    "StoreUnavailableError",
]
