"""Reading and acknowledging stored notifications."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.config import get_settings
from app.domain.entities import Notification
from app.infrastructure.repositories import NotificationRepository


def list_notifications(
    session: Session, user_id: str, *, limit: int | None = None
) -> Sequence[Notification]:
    """Return the most recent notifications of ``user_id``, newest first."""

    if limit is None:
        limit = get_settings().notification_history_limit
    return NotificationRepository(session).list_for_user(user_id, limit=limit)


def mark_notifications_read(session: Session, user_id: str) -> int:
    """Mark every unread notification of ``user_id`` as read.

    Returns how many were updated; zero when nothing was unread.
    """

    return NotificationRepository(session).mark_all_as_read(user_id)


__all__ = ["list_notifications", "mark_notifications_read"]
