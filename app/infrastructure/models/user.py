"""SQLAlchemy model for the users table."""

from sqlalchemy import Column, DateTime, String

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class UserModel(Base):
    """Database representation of an application user."""

    __tablename__ = "users"

    id = Column(String(36), primary_key=True)
    username = Column(String(80), nullable=False, unique=True, index=True)
    display_name = Column(String(120), nullable=True)
    password = Column(String(255), nullable=False)
    profile_image_url = Column(String(500), nullable=True)
    role = Column(String(20), nullable=False, default="user")
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["UserModel"]
