"""SQLAlchemy model for famous products."""

from sqlalchemy import Column, DateTime, ForeignKey, String, Text

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class ProductModel(Base):
    """Database representation of a famous product."""

    __tablename__ = "famous_products"

    id = Column(String(36), primary_key=True)
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    image_url = Column(String(500), nullable=True)
    location_id = Column(
        String(36), ForeignKey("locations.id", ondelete="CASCADE"), nullable=True, index=True
    )
    user_id = Column(String(36), ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["ProductModel"]
