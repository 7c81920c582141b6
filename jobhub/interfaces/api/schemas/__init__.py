"""Pydantic schemas for the HTTP API."""

from .job import (
    ApplicationCreate,
    ApplicationCreated,
    JobCreate,
    JobRead,
    JobUpdate,
)
from .notification import MarkReadResult, NotificationList, NotificationRead
from .post import LikeResult, PostCreate, PostRead, PostUpdate, ReplyCreate, ReplyRead

__all__ = [
    "ApplicationCreate",
    "ApplicationCreated",
    "JobCreate",
    "JobRead",
    "JobUpdate",
    "LikeResult",
    "MarkReadResult",
    "NotificationList",
    "NotificationRead",
    "PostCreate",
    "PostRead",
    "PostUpdate",
    "ReplyCreate",
    "ReplyRead",
]
