"""SQLAlchemy model for attractions and food shops."""

from sqlalchemy import JSON, Column, DateTime, Float, ForeignKey, Integer, String, Text

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class LocationModel(Base):
    """Database representation of a place listed in the guide."""

    __tablename__ = "locations"

    id = Column(String(36), primary_key=True)
    kind = Column(String(20), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    category = Column(String(80), nullable=True)
    description = Column(Text, nullable=True)
    full_description = Column(Text, nullable=True)
    lat = Column(Float, nullable=True)
    lng = Column(Float, nullable=True)
    google_map_url = Column(String(500), nullable=True)
    image_url = Column(String(500), nullable=True)
    detail_images = Column(JSON, nullable=False, default=list)
    hours = Column(String(200), nullable=True)
    contact = Column(String(200), nullable=True)
    rating = Column(Float, nullable=False, default=0.0)
    review_count = Column(Integer, nullable=False, default=0)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=True, index=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["LocationModel"]
