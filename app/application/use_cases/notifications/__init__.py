"""Public helpers for emitting and reading user notifications."""

from .events import (
    notify_comment_liked,
    notify_new_location,
    notify_new_product,
    notify_new_review,
    notify_review_liked,
    notify_review_reply,
)
from .history import list_notifications, mark_notifications_read

__all__ = [
    "list_notifications",
    "mark_notifications_read",
    "notify_comment_liked",
    "notify_new_location",
    "notify_new_product",
    "notify_new_review",
    "notify_review_liked",
    "notify_review_reply",
]
