"""Use case for deleting an owned post or job listing."""

from __future__ import annotations

import logging

from jobhub.application.use_cases.validators import get_owned
from jobhub.domain.errors import ValidationError
from jobhub.infrastructure.store import JOBS, POSTS, DocumentStore

from .refs import EntityRef

logger = logging.getLogger(__name__)

_DELETABLE = frozenset({POSTS, JOBS})


async def delete_entity(store: DocumentStore, *, entity: EntityRef, actor_id: str) -> None:
    """Delete the entity for good.

    Replies and applications are not cascaded; they stay addressable under the
    removed parent id.
    """

    if entity.collection not in _DELETABLE:
        raise ValidationError(f"Documents in '{entity.collection}' cannot be deleted")

    await get_owned(store, entity.collection, entity.id, actor_id)
    await store.delete(entity.collection, entity.id)
    logger.info("%s deleted %s/%s", actor_id, entity.collection, entity.id)


__all__ = ["delete_entity"]
