"""Domain entities for user notifications."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

NOTIFICATION_NEW_LOCATION = "new_location"
NOTIFICATION_NEW_PRODUCT = "new_product"
NOTIFICATION_NEW_REVIEW = "new_review"
NOTIFICATION_NEW_LIKE = "new_like"
NOTIFICATION_NEW_REPLY = "new_reply"
NOTIFICATION_NEW_COMMENT_LIKE = "new_comment_like"

NOTIFICATION_TYPES = frozenset(
    {
        NOTIFICATION_NEW_LOCATION,
        NOTIFICATION_NEW_PRODUCT,
        NOTIFICATION_NEW_REVIEW,
        NOTIFICATION_NEW_LIKE,
        NOTIFICATION_NEW_REPLY,
        NOTIFICATION_NEW_COMMENT_LIKE,
    }
)


@dataclass
class Notification:
    """Durable notification delivered to a specific user."""

    id: str | None
    user_id: str
    actor_id: str | None
    actor_name: str | None
    actor_profile_image_url: str | None
    type: str
    payload: dict[str, Any] = field(default_factory=dict)
    is_read: bool = False
    created_at: datetime | None = None


@dataclass
class NotificationEvent:
    """Something a user did that other users may want to hear about.

    ``recipient_id`` targets a single user; ``None`` broadcasts the event to
    every user except the actor.
    """

    type: str
    actor_id: str
    actor_name: str | None
    actor_profile_image_url: str | None = None
    recipient_id: str | None = None
    payload: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.type not in NOTIFICATION_TYPES:
            raise ValueError(f"Unknown notification type: {self.type}")

    @property
    def is_broadcast(self) -> bool:
        return self.recipient_id is None


__all__ = [
    "NOTIFICATION_NEW_COMMENT_LIKE",
    "NOTIFICATION_NEW_LIKE",
    "NOTIFICATION_NEW_LOCATION",
    "NOTIFICATION_NEW_PRODUCT",
    "NOTIFICATION_NEW_REPLY",
    "NOTIFICATION_NEW_REVIEW",
    "NOTIFICATION_TYPES",
    "Notification",
    "NotificationEvent",
]
