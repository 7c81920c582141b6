"""ORM models used by the application infrastructure."""

from .job import ApplicationModel, JobModel
from .like import LikeModel
from .notification import NotificationModel
from .post import PostModel, ReplyModel

__all__ = [
    "ApplicationModel",
    "JobModel",
    "LikeModel",
    "NotificationModel",
    "PostModel",
    "ReplyModel",
]
