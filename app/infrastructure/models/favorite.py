"""SQLAlchemy model for locations saved as favorites."""

from sqlalchemy import Column, DateTime, ForeignKey, String

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class FavoriteModel(Base):
    """A location a user bookmarked."""

    __tablename__ = "favorites"

    user_id = Column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
    )
    location_id = Column(
        String(36), ForeignKey("locations.id", ondelete="CASCADE"), primary_key=True
    )
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["FavoriteModel"]
