"""Document store capability used by the realtime core."""

from .channel import (
    CHANGE_ADDED,
    CHANGE_MODIFIED,
    CHANGE_REMOVED,
    ChangeChannel,
    ChangeEvent,
)
from .document_store import DocumentStore
from .mutations import FieldMutation, Increment, SetAdd, SetField, SetRemove
from .registry import (
    APPLICATIONS,
    JOBS,
    NOTIFICATIONS,
    POSTS,
    REPLIES,
    CollectionSpec,
    get_collection,
)

__all__ = [
    "APPLICATIONS",
    "CHANGE_ADDED",
    "CHANGE_MODIFIED",
    "CHANGE_REMOVED",
    "ChangeChannel",
    "ChangeEvent",
    "CollectionSpec",
    "DocumentStore",
    "FieldMutation",
    "Increment",
    "JOBS",
    "NOTIFICATIONS",
    "POSTS",
    "REPLIES",
    "SetAdd",
    "SetField",
    "SetRemove",
    "get_collection",
]
