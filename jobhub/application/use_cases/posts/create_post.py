"""Use case for publishing a community post."""

from __future__ import annotations

import logging

from jobhub.application.use_cases.validators import require_choice, require_text
from jobhub.domain.entities import POST_CATEGORIES, POST_CONTENT_MAX_LENGTH, Actor
from jobhub.domain.errors import ValidationError
from jobhub.infrastructure.store import POSTS, DocumentStore
from jobhub.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


async def create_post(
    store: DocumentStore, *, actor: Actor, category: str, content: str
) -> str:
    """Store a new post with no likes and a zero reply counter."""

    if not actor.user_id:
        raise ValidationError("A signed-in user is required to post")
    category = require_choice(category, POST_CATEGORIES, label="Category")
    text = require_text(content, label="Content", max_length=POST_CONTENT_MAX_LENGTH)

    post_id = await store.insert(
        POSTS,
        {
            "author_id": actor.user_id,
            "author_name": actor.name,
            "category": category,
            "content": text,
            "reply_count": 0,
            "created_at": now_in_app_timezone(),
        },
    )
    logger.info("Post %s created by %s", post_id, actor.user_id)
    return post_id


__all__ = ["create_post"]
