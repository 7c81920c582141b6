"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Final

NOTIFICATION_KIND_LIKE_POST: Final[str] = "like_post"
NOTIFICATION_KIND_LIKE_JOB: Final[str] = "like_job"
NOTIFICATION_KIND_REPLY: Final[str] = "reply"
NOTIFICATION_KIND_APPLICATION: Final[str] = "application"
NOTIFICATION_KINDS: Final[frozenset[str]] = frozenset(
    {
        NOTIFICATION_KIND_LIKE_POST,
        NOTIFICATION_KIND_LIKE_JOB,
        NOTIFICATION_KIND_REPLY,
        NOTIFICATION_KIND_APPLICATION,
    }
)


@dataclass
class Notification:
    """Message delivered into a recipient's namespace.

    Only ``read`` ever changes after creation, and only from ``False`` to ``True``.
    """

    id: str | None
    recipient_id: str
    kind: str
    message: str
    read: bool = False
    created_at: datetime | None = None


__all__ = [
    "Notification",
    "NOTIFICATION_KINDS",
    "NOTIFICATION_KIND_APPLICATION",
    "NOTIFICATION_KIND_LIKE_JOB",
    "NOTIFICATION_KIND_LIKE_POST",
    "NOTIFICATION_KIND_REPLY",
]
