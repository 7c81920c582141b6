"""Validation and ownership helpers shared by interaction use cases."""

from __future__ import annotations

from typing import Any

from jobhub.domain.errors import AuthorizationError, NotFoundError, ValidationError
from jobhub.infrastructure.store import DocumentStore


def require_text(value: str | None, *, label: str, max_length: int | None = None) -> str:
    """Return ``value`` stripped, rejecting blank or oversized input."""

    text = (value or "").strip()
    if not text:
        raise ValidationError(f"{label} must not be empty")
    if max_length is not None and len(text) > max_length:
        raise ValidationError(f"{label} must be at most {max_length} characters")
    return text


def require_choice(value: str | None, choices, *, label: str) -> str:
    if value not in choices:
        allowed = ", ".join(sorted(choices))
        raise ValidationError(f"{label} must be one of: {allowed}")
    return value


def require_email(value: str | None, *, label: str = "Email") -> str:
    email = require_text(value, label=label, max_length=320)
    local, _, domain = email.partition("@")
    if not local or not domain:
        raise ValidationError(f"{label} must be a valid email address")
    return email


async def get_existing(store: DocumentStore, collection: str, document_id: str) -> Any:
    """Return the document or raise :class:`NotFoundError`."""

    document = await store.get(collection, document_id)
    if document is None:
        raise NotFoundError(f"Document '{document_id}' not found in '{collection}'")
    return document


async def get_owned(
    store: DocumentStore, collection: str, document_id: str, actor_id: str
) -> Any:
    """Return the document when ``actor_id`` owns it, otherwise raise."""

    document = await get_existing(store, collection, document_id)
    if not actor_id or document.owner_id != actor_id:
        raise AuthorizationError("Only the author can change this entry")
    return document


__all__ = [
    "get_existing",
    "get_owned",
    "require_choice",
    "require_email",
    "require_text",
]
