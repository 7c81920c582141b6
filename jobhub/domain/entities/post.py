"""Domain entities for community posts and their replies."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Final

POST_CATEGORY_QUESTION: Final[str] = "question"
POST_CATEGORY_SEARCH: Final[str] = "search"
POST_CATEGORY_TIP: Final[str] = "tip"
POST_CATEGORIES: Final[frozenset[str]] = frozenset(
    {POST_CATEGORY_QUESTION, POST_CATEGORY_SEARCH, POST_CATEGORY_TIP}
)

POST_CONTENT_MAX_LENGTH: Final[int] = 500
REPLY_CONTENT_MAX_LENGTH: Final[int] = 300


@dataclass
class Post:
    """Community post; ``reply_count`` caches the number of replies."""

    id: str | None
    author_id: str
    author_name: str
    category: str
    content: str
    created_at: datetime | None = None
    edited_at: datetime | None = None
    likes: frozenset[str] = field(default_factory=frozenset)
    reply_count: int = 0

    @property
    def owner_id(self) -> str:
        return self.author_id


@dataclass
class Reply:
    """Immutable answer attached to a post."""

    id: str | None
    post_id: str
    content: str
    author_id: str
    author_name: str
    created_at: datetime | None = None


__all__ = [
    "Post",
    "Reply",
    "POST_CATEGORIES",
    "POST_CATEGORY_QUESTION",
    "POST_CATEGORY_SEARCH",
    "POST_CATEGORY_TIP",
    "POST_CONTENT_MAX_LENGTH",
    "REPLY_CONTENT_MAX_LENGTH",
]
