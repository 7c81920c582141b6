"""Registry describing how each document collection maps onto ORM models."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Final

from jobhub.domain.entities import Application, Job, Notification, Post, Reply
from jobhub.infrastructure.database import Base
from jobhub.infrastructure.models import (
    ApplicationModel,
    JobModel,
    NotificationModel,
    PostModel,
    ReplyModel,
)
from jobhub.utils import ensure_app_timezone

POSTS: Final[str] = "posts"
REPLIES: Final[str] = "replies"
JOBS: Final[str] = "jobs"
APPLICATIONS: Final[str] = "applications"
NOTIFICATIONS: Final[str] = "notifications"


@dataclass(frozen=True)
class CollectionSpec:
    """Binding between a collection name, its ORM model and its domain entity."""

    name: str
    model: type[Base]
    entity: type
    parent_field: str | None = None
    set_fields: frozenset[str] = field(default_factory=frozenset)

    def to_entity(self, model: Base, set_members: dict[str, frozenset[str]]) -> Any:
        values: dict[str, Any] = {}
        for entity_field in fields(self.entity):
            if entity_field.name in self.set_fields:
                values[entity_field.name] = set_members.get(entity_field.name, frozenset())
                continue
            value = getattr(model, entity_field.name)
            if entity_field.name.endswith("_at"):
                value = ensure_app_timezone(value)
            values[entity_field.name] = value
        return self.entity(**values)


_COLLECTIONS: Final[dict[str, CollectionSpec]] = {
    spec.name: spec
    for spec in (
        CollectionSpec(POSTS, PostModel, Post, set_fields=frozenset({"likes"})),
        CollectionSpec(REPLIES, ReplyModel, Reply, parent_field="post_id"),
        CollectionSpec(JOBS, JobModel, Job, set_fields=frozenset({"likes"})),
        CollectionSpec(APPLICATIONS, ApplicationModel, Application, parent_field="job_id"),
        CollectionSpec(NOTIFICATIONS, NotificationModel, Notification, parent_field="recipient_id"),
    )
}


def get_collection(name: str) -> CollectionSpec:
    """Return the :class:`CollectionSpec` registered under ``name``."""

    try:
        return _COLLECTIONS[name]
    except KeyError:
        raise ValueError(f"Unknown collection '{name}'") from None


__all__ = [
    "APPLICATIONS",
    "CollectionSpec",
    "JOBS",
    "NOTIFICATIONS",
    "POSTS",
    "REPLIES",
    "get_collection",
]
