"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: str
    user_id: str
    actor_id: str | None = None
    actor_name: str | None = None
    actor_profile_image_url: str | None = None
    type: str
    payload: dict[str, Any] = Field(default_factory=dict)
    is_read: bool
    created_at: datetime | None = None


class NotificationsReadResponse(BaseModel):
    message: str
    updated: int


__all__ = ["NotificationRead", "NotificationsReadResponse"]
