"""Domain entities exposed by the application."""

from .actor import Actor
from .job import (
    EMPLOYMENT_TYPES,
    JOB_TYPE_OFFER,
    JOB_TYPE_SEEK,
    JOB_TYPES,
    WORKLOAD_BANDS,
    Application,
    Job,
)
from .notification import (
    NOTIFICATION_KIND_APPLICATION,
    NOTIFICATION_KIND_LIKE_JOB,
    NOTIFICATION_KIND_LIKE_POST,
    NOTIFICATION_KIND_REPLY,
    NOTIFICATION_KINDS,
    Notification,
)
from .post import (
    POST_CATEGORIES,
    POST_CATEGORY_QUESTION,
    POST_CATEGORY_SEARCH,
    POST_CATEGORY_TIP,
    POST_CONTENT_MAX_LENGTH,
    REPLY_CONTENT_MAX_LENGTH,
    Post,
    Reply,
)

__all__ = [
    "Actor",
    "Application",
    "Job",
    "Notification",
    "Post",
    "Reply",
    "EMPLOYMENT_TYPES",
    "JOB_TYPES",
    "JOB_TYPE_OFFER",
    "JOB_TYPE_SEEK",
    "WORKLOAD_BANDS",
    "NOTIFICATION_KINDS",
    "NOTIFICATION_KIND_APPLICATION",
    "NOTIFICATION_KIND_LIKE_JOB",
    "NOTIFICATION_KIND_LIKE_POST",
    "NOTIFICATION_KIND_REPLY",
    "POST_CATEGORIES",
    "POST_CATEGORY_QUESTION",
    "POST_CATEGORY_SEARCH",
    "POST_CATEGORY_TIP",
    "POST_CONTENT_MAX_LENGTH",
    "REPLY_CONTENT_MAX_LENGTH",
]
