"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Sequence
from uuid import uuid4

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.infrastructure.models import UserModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_timezone


class UserRepository:
    """Provide CRUD operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: str) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_username(self, username: str) -> User | None:
        model = (
            self.session.query(UserModel)
            .filter(UserModel.username == username)
            .one_or_none()
        )
        return self._to_entity(model) if model else None

    def list_ids_except(self, user_id: str) -> Sequence[str]:
        """Return the identifiers of every user other than ``user_id``."""

        rows = (
            self.session.query(UserModel.id)
            .filter(UserModel.id != user_id)
            .order_by(UserModel.created_at, UserModel.id)
            .all()
        )
        return [row.id for row in rows]

    def create(self, user: User) -> User:
        model = UserModel(
            id=user.id or str(uuid4()),
            username=user.username,
            display_name=user.display_name,
            password=user.password,
            profile_image_url=user.profile_image_url,
            role=user.role,
            created_at=ensure_app_naive_datetime(user.created_at or now_in_app_timezone()),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            username=model.username,
            display_name=model.display_name,
            password=model.password,
            profile_image_url=model.profile_image_url,
            role=model.role,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["UserRepository"]
