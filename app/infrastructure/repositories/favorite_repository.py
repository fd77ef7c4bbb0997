"""Persistence helpers for favorite locations."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.infrastructure.models import FavoriteModel


class FavoriteRepository:
    """Store which locations each user saved."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_location_ids(self, user_id: str) -> Sequence[str]:
        rows = (
            self.session.query(FavoriteModel.location_id)
            .filter(FavoriteModel.user_id == user_id)
            .order_by(FavoriteModel.created_at, FavoriteModel.location_id)
            .all()
        )
        return [row.location_id for row in rows]

    def toggle(self, user_id: str, location_id: str) -> bool:
        """Add the favorite or remove it; return ``True`` when it was added."""

        model = self.session.get(FavoriteModel, (user_id, location_id))
        if model is None:
            self.session.add(FavoriteModel(user_id=user_id, location_id=location_id))
            added = True
        else:
            self.session.delete(model)
            added = False
        self.session.commit()
        return added


__all__ = ["FavoriteRepository"]
