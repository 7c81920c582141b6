"""Reconciliation of the denormalized ``reply_count`` of posts."""

from __future__ import annotations

import asyncio
import logging
from collections import Counter

from jobhub.domain.errors import NotFoundError, StoreUnavailableError
from jobhub.infrastructure.store import POSTS, REPLIES, DocumentStore, SetField

logger = logging.getLogger(__name__)


async def reconcile_reply_counts(store: DocumentStore) -> dict[str, int]:
    """Recompute every post's ``reply_count`` from its replies.

    Returns the corrected counters keyed by post id. Replies of deleted posts
    are ignored.
    """

    posts = await store.query(POSTS)
    replies = await store.query(REPLIES)
    actual = Counter(reply.post_id for reply in replies)

    corrected: dict[str, int] = {}
    for post in posts:
        expected = actual.get(post.id, 0)
        if post.reply_count == expected:
            continue
        try:
            await store.update(POSTS, post.id, SetField("reply_count", expected))
        except NotFoundError:
            continue
        logger.warning(
            "reply_count of post %s corrected from %d to %d",
            post.id,
            post.reply_count,
            expected,
        )
        corrected[post.id] = expected
    return corrected


class ReplyCountSweeper:
    """Run :func:`reconcile_reply_counts` every ``interval`` seconds."""

    def __init__(self, store: DocumentStore, *, interval: float) -> None:
        self._store = store
        self._interval = interval
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(
            self._loop(), name="reply-count-sweeper"
        )

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None

    async def _loop(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            try:
                await reconcile_reply_counts(self._store)
            except StoreUnavailableError as exc:
                logger.warning("Reply count sweep skipped: %s", exc)


__all__ = ["ReplyCountSweeper", "reconcile_reply_counts"]
