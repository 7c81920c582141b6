"""Live query projection over the document store."""

from .live_view import LiveView, Observer, QueryDescriptor
from .projector import SubscriptionProjector

__all__ = ["LiveView", "Observer", "QueryDescriptor", "SubscriptionProjector"]
