"""Realtime notification helpers for the infrastructure layer."""

from .manager import NotificationConnectionManager
from .publisher import NotificationPublisher, build_snapshot, serialize_notification

__all__ = [
    "NotificationConnectionManager",
    "NotificationPublisher",
    "build_snapshot",
    "serialize_notification",
]
