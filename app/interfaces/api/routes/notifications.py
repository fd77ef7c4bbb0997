"""Endpoints and event stream for realtime notifications."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import StreamingResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    list_notifications,
    mark_notifications_read,
)
from app.domain.entities import Notification, User
from app.infrastructure.database import get_db
from app.infrastructure.notifications import NotificationStream
from app.interfaces.api.dependencies import get_current_user, get_notification_stream
from app.interfaces.api.schemas import NotificationRead, NotificationsReadResponse

router = APIRouter(prefix="/api", tags=["notifications"])
logger = logging.getLogger(__name__)

_STREAM_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead(
        id=notification.id,
        user_id=notification.user_id,
        actor_id=notification.actor_id,
        actor_name=notification.actor_name,
        actor_profile_image_url=notification.actor_profile_image_url,
        type=notification.type,
        payload=notification.payload or {},
        is_read=notification.is_read,
        created_at=notification.created_at,
    )


@router.get("/events")
async def notification_events(
    current_user: User = Depends(get_current_user),
    stream: NotificationStream = Depends(get_notification_stream),
) -> StreamingResponse:
    """Server-sent event stream with the user's notifications."""

    connection = await stream.open(current_user.id)
    return StreamingResponse(
        stream.frames(connection),
        media_type="text/event-stream",
        headers=_STREAM_HEADERS,
    )


@router.get("/notifications", response_model=list[NotificationRead])
def read_notifications(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[NotificationRead]:
    """Return the most recent notifications for the authenticated user."""

    notifications = list_notifications(db, current_user.id)
    return [_notification_to_schema(notification) for notification in notifications]


@router.post("/notifications/read", response_model=NotificationsReadResponse)
def mark_read(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> NotificationsReadResponse:
    """Mark every unread notification of the user as read."""

    try:
        updated = mark_notifications_read(db, current_user.id)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Could not mark notifications as read for %s", current_user.id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not mark notifications as read.",
        ) from exc
    return NotificationsReadResponse(message="Notifications marked as read.", updated=updated)
