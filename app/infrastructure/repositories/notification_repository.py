"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from uuid import uuid4

from sqlalchemy.orm import Session

from app.domain.entities import Notification
from app.infrastructure.models import NotificationModel
from app.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(
        self,
        user_id: str,
        *,
        limit: int | None = 20,
    ) -> Sequence[Notification]:
        query = self.session.query(NotificationModel)
        query = query.filter(NotificationModel.user_id == user_id)
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def create_many(self, notifications: Iterable[Notification]) -> int:
        """Insert ``notifications`` in one transaction; nothing is kept on failure."""

        models = []
        for notification in notifications:
            model = NotificationModel()
            self._apply_entity_to_model(model, notification)
            models.append(model)
        if not models:
            return 0
        try:
            self.session.add_all(models)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return len(models)

    def mark_all_as_read(self, user_id: str) -> int:
        """Flag every unread notification of ``user_id`` as read."""

        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.user_id == user_id,
                NotificationModel.is_read.is_(False),
            )
            .update({NotificationModel.is_read: True}, synchronize_session=False)
        )
        self.session.commit()
        return updated

    @staticmethod
    def _apply_entity_to_model(
        model: NotificationModel, notification: Notification
    ) -> None:
        model.id = notification.id or str(uuid4())
        model.user_id = notification.user_id
        model.actor_id = notification.actor_id
        model.actor_name = notification.actor_name
        model.actor_profile_image_url = notification.actor_profile_image_url
        model.type = notification.type
        model.payload = notification.payload or {}
        model.is_read = notification.is_read
        model.created_at = (
            ensure_app_naive_datetime(notification.created_at)
            or ensure_app_naive_datetime(now_in_app_timezone())
        )

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            actor_id=model.actor_id,
            actor_name=model.actor_name,
            actor_profile_image_url=model.actor_profile_image_url,
            type=model.type,
            payload=model.payload or {},
            is_read=bool(model.is_read),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["NotificationRepository"]
