"""Use case for replying to a post."""

from __future__ import annotations

import logging

from jobhub.application.use_cases.notifications import fan_out
from jobhub.application.use_cases.validators import get_existing, require_text
from jobhub.domain.entities import NOTIFICATION_KIND_REPLY, REPLY_CONTENT_MAX_LENGTH, Actor
from jobhub.domain.errors import NotFoundError, StoreUnavailableError
from jobhub.infrastructure.store import POSTS, REPLIES, DocumentStore, Increment
from jobhub.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


async def create_reply(
    store: DocumentStore, *, post_id: str, actor: Actor, content: str
) -> str:
    """Store a reply under ``post_id`` and bump the post's ``reply_count``.

    The reply insert and the counter increment are two separate writes. Once
    the reply is stored the operation succeeds even if the increment fails; the
    counter then undercounts until :func:`reconcile_reply_counts` runs.
    """

    text = require_text(content, label="Reply", max_length=REPLY_CONTENT_MAX_LENGTH)
    post = await get_existing(store, POSTS, post_id)

    reply_id = await store.insert(
        REPLIES,
        {
            "content": text,
            "author_id": actor.user_id,
            "author_name": actor.name,
            "created_at": now_in_app_timezone(),
        },
        parent_id=post_id,
    )

    try:
        await store.update(POSTS, post_id, Increment("reply_count", 1))
    except (StoreUnavailableError, NotFoundError) as exc:
        logger.warning(
            "Reply %s stored but reply_count of post %s was not incremented: %s",
            reply_id,
            post_id,
            exc,
        )

    await fan_out(
        store,
        recipient_id=post.owner_id,
        actor_id=actor.user_id,
        actor_name=actor.name,
        kind=NOTIFICATION_KIND_REPLY,
    )
    return reply_id


__all__ = ["create_reply"]
