"""Fan-out of interaction events into recipients' notification namespaces."""

from __future__ import annotations

import logging

from jobhub.domain.entities import NOTIFICATION_KINDS
from jobhub.domain.errors import StoreUnavailableError
from jobhub.infrastructure.store import NOTIFICATIONS, DocumentStore
from jobhub.utils import now_in_app_timezone

from .templates import compose_message

logger = logging.getLogger(__name__)


async def notify(
    store: DocumentStore,
    *,
    recipient_id: str | None,
    actor_id: str,
    kind: str,
    message: str,
) -> str | None:
    """Append an unread notification for ``recipient_id``.

    Returns the new notification id, or ``None`` when the notification was
    suppressed because the recipient is missing or is the actor. Repeated
    identical notifications are not deduplicated.
    """

    if kind not in NOTIFICATION_KINDS:
        raise ValueError(f"Unknown notification kind '{kind}'")
    if not recipient_id or recipient_id == actor_id:
        return None

    notification_id = await store.insert(
        NOTIFICATIONS,
        {
            "kind": kind,
            "message": message,
            "read": False,
            "created_at": now_in_app_timezone(),
        },
        parent_id=recipient_id,
    )
    logger.info("Notification %s (%s) delivered to %s", notification_id, kind, recipient_id)
    return notification_id


async def fan_out(
    store: DocumentStore,
    *,
    recipient_id: str | None,
    actor_id: str,
    actor_name: str,
    kind: str,
) -> str | None:
    """Compose the templated message for ``kind`` and deliver it.

    Called after a primary write already succeeded, so store failures are
    logged instead of failing the interaction.
    """

    message = compose_message(kind, actor_name)
    try:
        return await notify(
            store,
            recipient_id=recipient_id,
            actor_id=actor_id,
            kind=kind,
            message=message,
        )
    except StoreUnavailableError as exc:
        logger.warning("Could not notify %s about %s: %s", recipient_id, kind, exc)
        return None


__all__ = ["fan_out", "notify"]
