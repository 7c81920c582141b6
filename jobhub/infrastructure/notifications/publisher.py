"""Utility helpers to push notification snapshots to websocket subscribers."""

from __future__ import annotations

import asyncio
from typing import Any

from jobhub.domain.entities import Notification
from jobhub.utils import isoformat_or_none

from .manager import NotificationConnectionManager


class NotificationPublisher:
    """Serialize notification snapshots and schedule their delivery."""

    def __init__(self, manager: NotificationConnectionManager) -> None:
        self._manager = manager

    def dispatch_snapshot(self, session: Any) -> None:
        """Schedule the current snapshot of ``session`` for every socket of its user."""

        message = build_snapshot(session)
        asyncio.get_running_loop().create_task(
            self._manager.send_to_user(session.user_id, message)
        )


def serialize_notification(notification: Notification) -> dict[str, Any]:
    """Return the wire representation of ``notification``."""

    return {
        "id": notification.id,
        "kind": notification.kind,
        "message": notification.message,
        "read": notification.read,
        "createdAt": isoformat_or_none(notification.created_at),
    }


def build_snapshot(session: Any) -> dict[str, Any]:
    """Return the websocket payload describing a notification session."""

    return {
        "type": "notifications",
        "data": [serialize_notification(n) for n in session.panel_entries],
        "unread": session.unread_count,
        "badge": session.badge,
        "stale": session.view.stale,
    }


__all__ = ["NotificationPublisher", "build_snapshot", "serialize_notification"]
