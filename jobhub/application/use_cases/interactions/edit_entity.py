"""Use case for editing the text of an owned post or job listing."""

from __future__ import annotations

from dataclasses import dataclass

from jobhub.application.use_cases.validators import get_owned, require_text
from jobhub.domain.entities import POST_CONTENT_MAX_LENGTH
from jobhub.domain.errors import ValidationError
from jobhub.infrastructure.store import JOBS, POSTS, DocumentStore, SetField
from jobhub.utils import now_in_app_timezone

from .refs import EntityRef


@dataclass(frozen=True)
class _EditRule:
    content_field: str
    marker_field: str
    max_length: int | None


_EDIT_RULES = {
    POSTS: _EditRule("content", "edited_at", POST_CONTENT_MAX_LENGTH),
    JOBS: _EditRule("description", "updated_at", None),
}


async def edit_entity(
    store: DocumentStore, *, entity: EntityRef, actor_id: str, content: str
) -> None:
    """Replace the entity's text and stamp its edit marker with the current time."""

    rule = _EDIT_RULES.get(entity.collection)
    if rule is None:
        raise ValidationError(f"Documents in '{entity.collection}' cannot be edited")

    await get_owned(store, entity.collection, entity.id, actor_id)
    text = require_text(content, label="Content", max_length=rule.max_length)

    await store.update(
        entity.collection,
        entity.id,
        SetField(rule.content_field, text),
        SetField(rule.marker_field, now_in_app_timezone()),
    )


__all__ = ["edit_entity"]
