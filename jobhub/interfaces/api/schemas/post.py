"""Schemas for community post endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class PostCreate(BaseModel):
    """Payload required to publish a post."""

    category: str
    content: str


class PostUpdate(BaseModel):
    content: str

    model_config = ConfigDict(extra="forbid")


class PostRead(BaseModel):
    id: str
    author_id: str
    author_name: str
    category: str
    content: str
    created_at: datetime | None
    edited_at: datetime | None
    likes: list[str]
    like_count: int
    reply_count: int


class ReplyCreate(BaseModel):
    content: str


class ReplyRead(BaseModel):
    id: str
    post_id: str
    content: str
    author_id: str
    author_name: str
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class LikeResult(BaseModel):
    """Outcome of a like toggle."""

    liked: bool
