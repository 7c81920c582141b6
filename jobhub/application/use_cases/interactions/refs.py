"""References to likeable, editable and deletable documents."""

from __future__ import annotations

from dataclasses import dataclass

from jobhub.infrastructure.store import JOBS, POSTS


@dataclass(frozen=True)
class EntityRef:
    collection: str
    id: str

    @classmethod
    def post(cls, post_id: str) -> "EntityRef":
        return cls(POSTS, post_id)

    @classmethod
    def job(cls, job_id: str) -> "EntityRef":
        return cls(JOBS, job_id)


__all__ = ["EntityRef"]
