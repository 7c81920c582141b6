"""Registry of notification sessions, one per signed-in user."""

from __future__ import annotations

import logging
from typing import Callable

from jobhub.application.realtime import SubscriptionProjector
from jobhub.infrastructure.store import DocumentStore

from .read_state import NotificationSession

logger = logging.getLogger(__name__)


class NotificationSessionRegistry:
    """Share one :class:`NotificationSession` among a user's connections.

    The first :meth:`acquire` signs the user in and the matching last
    :meth:`release` signs them out, closing the live view.
    """

    def __init__(
        self,
        store: DocumentStore,
        projector: SubscriptionProjector,
        *,
        mark_read_delay: float = 2.0,
        panel_limit: int = 15,
        on_change: Callable[[NotificationSession], None] | None = None,
    ) -> None:
        self._store = store
        self._projector = projector
        self._mark_read_delay = mark_read_delay
        self._panel_limit = panel_limit
        self._on_change = on_change
        self._sessions: dict[str, NotificationSession] = {}
        self._holders: dict[str, int] = {}

    def get(self, user_id: str) -> NotificationSession | None:
        return self._sessions.get(user_id)

    def acquire(self, user_id: str) -> NotificationSession:
        session = self._sessions.get(user_id)
        if session is None:
            session = NotificationSession(
                self._store,
                self._projector,
                user_id,
                mark_read_delay=self._mark_read_delay,
                panel_limit=self._panel_limit,
            )
            view = session.start()
            if self._on_change is not None:
                on_change = self._on_change
                view.observe(lambda _documents: on_change(session))
            self._sessions[user_id] = session
            logger.info("Notification session opened for %s", user_id)
        self._holders[user_id] = self._holders.get(user_id, 0) + 1
        return session

    def release(self, user_id: str) -> None:
        holders = self._holders.get(user_id, 0) - 1
        if holders > 0:
            self._holders[user_id] = holders
            return
        self._holders.pop(user_id, None)
        session = self._sessions.pop(user_id, None)
        if session is not None:
            session.close()
            logger.info("Notification session closed for %s", user_id)

    def close(self) -> None:
        sessions, self._sessions = self._sessions, {}
        self._holders.clear()
        for session in sessions.values():
            session.close()


__all__ = ["NotificationSessionRegistry"]
