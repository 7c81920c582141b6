"""Schemas for notification endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class NotificationRead(BaseModel):
    id: str
    kind: str
    message: str
    read: bool
    created_at: datetime | None = Field(default=None, serialization_alias="createdAt")

    model_config = ConfigDict(from_attributes=True)


class NotificationList(BaseModel):
    data: list[NotificationRead]
    unread: int
    badge: str | None


class MarkReadResult(BaseModel):
    marked: int
