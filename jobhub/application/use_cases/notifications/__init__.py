"""Notification fan-out and read-state reconciliation."""

from .fan_out import fan_out, notify
from .read_state import BADGE_CAP, NotificationSession, format_badge
from .sessions import NotificationSessionRegistry
from .templates import NOTIFICATION_TEMPLATES, compose_message

__all__ = [
    "BADGE_CAP",
    "NOTIFICATION_TEMPLATES",
    "NotificationSession",
    "NotificationSessionRegistry",
    "compose_message",
    "fan_out",
    "format_badge",
    "notify",
]
