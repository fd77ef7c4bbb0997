"""Serialization of notifications into server-sent event frames."""

from __future__ import annotations

import copy
import json
from collections.abc import Iterable
from datetime import datetime
from typing import Any

from app.domain.entities import Notification

EVENT_CONNECTED = "connected"
EVENT_HISTORIC_NOTIFICATIONS = "historic_notifications"
EVENT_NOTIFICATION = "notification"

KEEP_ALIVE_FRAME = ":keep-alive\n\n"
INITIAL_CONNECTION_FRAME = ":initial-connection\n\n"


def encode_event(message: dict[str, Any]) -> str:
    """Return ``message`` as a single ``data:`` frame."""

    payload = copy.deepcopy(message)
    normalize_datetime_values(payload)
    body = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    return f"data: {body}\n\n"


def connected_message(connection_id: str) -> dict[str, Any]:
    return {"type": EVENT_CONNECTED, "clientId": connection_id}


def historic_message(notifications: Iterable[Notification]) -> dict[str, Any]:
    return {
        "type": EVENT_HISTORIC_NOTIFICATIONS,
        "data": [serialize_notification(n) for n in notifications],
    }


def serialize_notification(notification: Notification) -> dict[str, Any]:
    """Return the client representation of a stored notification."""

    return {
        "id": notification.id,
        "user_id": notification.user_id,
        "actor_id": notification.actor_id,
        "actor_name": notification.actor_name,
        "actor_profile_image_url": notification.actor_profile_image_url,
        "type": notification.type,
        "payload": notification.payload or {},
        "is_read": notification.is_read,
        "created_at": notification.created_at.isoformat()
        if notification.created_at
        else None,
    }


def normalize_datetime_values(data: dict[str, Any] | list[Any]) -> None:
    """Convert ``datetime`` instances nested inside ``data`` into ISO strings."""

    if isinstance(data, dict):
        for key, value in data.items():
            if isinstance(value, datetime):
                data[key] = value.isoformat()
            elif isinstance(value, (dict, list)):
                normalize_datetime_values(value)
    elif isinstance(data, list):
        for index, item in enumerate(data):
            if isinstance(item, datetime):
                data[index] = item.isoformat()
            elif isinstance(item, (dict, list)):
                normalize_datetime_values(item)


__all__ = [
    "EVENT_CONNECTED",
    "EVENT_HISTORIC_NOTIFICATIONS",
    "EVENT_NOTIFICATION",
    "INITIAL_CONNECTION_FRAME",
    "KEEP_ALIVE_FRAME",
    "connected_message",
    "encode_event",
    "historic_message",
    "normalize_datetime_values",
    "serialize_notification",
]
