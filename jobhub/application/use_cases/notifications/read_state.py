"""Per-session notification state and read-state reconciliation."""

from __future__ import annotations

import asyncio
import logging
from typing import Final

from jobhub.application.realtime import LiveView, QueryDescriptor, SubscriptionProjector
from jobhub.domain.entities import Notification
from jobhub.domain.errors import JobHubError
from jobhub.infrastructure.store import NOTIFICATIONS, DocumentStore, SetField

logger = logging.getLogger(__name__)

BADGE_CAP: Final[int] = 9


def format_badge(unread_count: int) -> str | None:
    """Return the badge label for ``unread_count``; ``None`` hides the badge."""

    if unread_count <= 0:
        return None
    if unread_count > BADGE_CAP:
        return f"{BADGE_CAP}+"
    return str(unread_count)


class NotificationSession:
    """Notification view and panel state of one signed-in user.

    The session starts a live view over the user's notifications (newest first)
    on :meth:`start` and releases it on :meth:`close`. Opening the panel owns a
    single deferred :meth:`mark_all_read` timer: reopening cancels the pending
    timer and schedules a fresh one, so one open never marks twice.
    """

    def __init__(
        self,
        store: DocumentStore,
        projector: SubscriptionProjector,
        user_id: str,
        *,
        mark_read_delay: float = 2.0,
        panel_limit: int = 15,
    ) -> None:
        self.user_id = user_id
        self._store = store
        self._projector = projector
        self._mark_read_delay = mark_read_delay
        self._panel_limit = panel_limit
        self._view: LiveView | None = None
        self._unsubscribe = None
        self._panel_open = False
        self._timer: asyncio.Task[None] | None = None

    async def __aenter__(self) -> "NotificationSession":
        self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self.close()

    # -------------------------------------------------------------- lifecycle

    def start(self) -> LiveView:
        """Subscribe to the user's notifications (sign-in)."""

        if self._view is None:
            self._view, self._unsubscribe = self._projector.subscribe(
                QueryDescriptor(NOTIFICATIONS, parent_id=self.user_id, descending=True)
            )
        return self._view

    def close(self) -> None:
        """Cancel the pending timer and release the live view (sign-out)."""

        self._cancel_timer()
        self._panel_open = False
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self._view = None

    @property
    def view(self) -> LiveView:
        if self._view is None:
            raise RuntimeError("Notification session is not started")
        return self._view

    # ------------------------------------------------------------------ state

    @property
    def notifications(self) -> tuple[Notification, ...]:
        return self.view.documents

    @property
    def unread_count(self) -> int:
        return sum(1 for notification in self.notifications if not notification.read)

    @property
    def badge(self) -> str | None:
        return format_badge(self.unread_count)

    @property
    def panel_entries(self) -> tuple[Notification, ...]:
        return self.notifications[: self._panel_limit]

    @property
    def panel_open(self) -> bool:
        return self._panel_open

    @property
    def mark_read_pending(self) -> bool:
        return self._timer is not None and not self._timer.done()

    # ---------------------------------------------------------------- actions

    async def mark_all_read(self) -> int:
        """Flag every currently unread notification as read.

        The writes run concurrently; a failed write leaves that notification
        unread and is only visible on the next refresh of the live view.
        Returns the number of notifications successfully marked.
        """

        unread = [notification for notification in self.notifications if not notification.read]
        if not unread:
            return 0

        results = await asyncio.gather(
            *(
                self._store.update(NOTIFICATIONS, notification.id, SetField("read", True))
                for notification in unread
            ),
            return_exceptions=True,
        )
        failed = 0
        for notification, result in zip(unread, results):
            if isinstance(result, JobHubError):
                failed += 1
                logger.warning(
                    "Could not mark notification %s of %s as read: %s",
                    notification.id,
                    self.user_id,
                    result,
                )
            elif isinstance(result, BaseException):
                raise result
        return len(unread) - failed

    def open_panel(self) -> None:
        """Open the panel and (re)schedule the deferred mark-as-read."""

        self._panel_open = True
        self._cancel_timer()
        self._timer = asyncio.get_running_loop().create_task(
            self._deferred_mark_all_read(), name=f"mark-read:{self.user_id}"
        )

    def close_panel(self) -> None:
        """Close the panel; an already scheduled mark-as-read still runs."""

        self._panel_open = False

    def toggle_panel(self) -> bool:
        if self._panel_open:
            self.close_panel()
        else:
            self.open_panel()
        return self._panel_open

    async def _deferred_mark_all_read(self) -> None:
        await asyncio.sleep(self._mark_read_delay)
        # Writes already issued must not be abandoned by a reopen.
        marked = await asyncio.shield(self.mark_all_read())
        logger.debug("Deferred mark-as-read flagged %d notifications of %s", marked, self.user_id)

    def _cancel_timer(self) -> None:
        if self._timer is not None and not self._timer.done():
            self._timer.cancel()
        self._timer = None


__all__ = ["BADGE_CAP", "NotificationSession", "format_badge"]
