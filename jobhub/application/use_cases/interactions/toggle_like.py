"""Use case for liking and unliking posts and job listings."""

from __future__ import annotations

import logging

from jobhub.application.use_cases.notifications import fan_out
from jobhub.application.use_cases.validators import get_existing
from jobhub.domain.entities import (
    NOTIFICATION_KIND_LIKE_JOB,
    NOTIFICATION_KIND_LIKE_POST,
    Actor,
)
from jobhub.domain.errors import ValidationError
from jobhub.infrastructure.store import JOBS, POSTS, DocumentStore, SetAdd, SetRemove

from .refs import EntityRef

logger = logging.getLogger(__name__)

_LIKE_NOTIFICATION_KINDS = {
    POSTS: NOTIFICATION_KIND_LIKE_POST,
    JOBS: NOTIFICATION_KIND_LIKE_JOB,
}


async def toggle_like(store: DocumentStore, *, entity: EntityRef, actor: Actor) -> bool:
    """Flip the actor's membership in the entity's ``likes`` set.

    Returns ``True`` when the entity ends up liked. The set is changed through
    the store's set-add/set-remove primitives so concurrent likes by different
    users never overwrite each other. Only a new like notifies the owner.
    """

    kind = _LIKE_NOTIFICATION_KINDS.get(entity.collection)
    if kind is None:
        raise ValidationError(f"Documents in '{entity.collection}' cannot be liked")
    if not actor.user_id:
        raise ValidationError("A signed-in user is required to like")

    current = await get_existing(store, entity.collection, entity.id)
    if actor.user_id in current.likes:
        await store.update(entity.collection, entity.id, SetRemove("likes", actor.user_id))
        logger.info("%s unliked %s/%s", actor.user_id, entity.collection, entity.id)
        return False

    await store.update(entity.collection, entity.id, SetAdd("likes", actor.user_id))
    logger.info("%s liked %s/%s", actor.user_id, entity.collection, entity.id)
    await fan_out(
        store,
        recipient_id=current.owner_id,
        actor_id=actor.user_id,
        actor_name=actor.name,
        kind=kind,
    )
    return True


__all__ = ["toggle_like"]
