"""Background maintenance of denormalized fields."""

from .reconcile_reply_counts import ReplyCountSweeper, reconcile_reply_counts

__all__ = ["ReplyCountSweeper", "reconcile_reply_counts"]
