"""Closed set of notification message templates keyed by kind."""

from __future__ import annotations

from typing import Final

from jobhub.domain.entities import (
    NOTIFICATION_KIND_APPLICATION,
    NOTIFICATION_KIND_LIKE_JOB,
    NOTIFICATION_KIND_LIKE_POST,
    NOTIFICATION_KIND_REPLY,
)

NOTIFICATION_TEMPLATES: Final[dict[str, str]] = {
    NOTIFICATION_KIND_LIKE_POST: "{actor} liked your post",
    NOTIFICATION_KIND_LIKE_JOB: "{actor} liked your listing",
    NOTIFICATION_KIND_REPLY: "{actor} replied to your post",
    NOTIFICATION_KIND_APPLICATION: "{actor} applied to your listing",
}


def compose_message(kind: str, actor_name: str) -> str:
    """Render the message for ``kind`` with the actor's current display name."""

    try:
        template = NOTIFICATION_TEMPLATES[kind]
    except KeyError:
        raise ValueError(f"Unknown notification kind '{kind}'") from None
    return template.format(actor=actor_name or "Someone")


__all__ = ["NOTIFICATION_TEMPLATES", "compose_message"]
