"""SQLAlchemy models for reviews, review comments and their likes."""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String, Text

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class ReviewModel(Base):
    """Database representation of a location review."""

    __tablename__ = "reviews"

    id = Column(String(36), primary_key=True)
    location_id = Column(
        String(36), ForeignKey("locations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id = Column(String(36), ForeignKey("users.id"), nullable=True, index=True)
    author = Column(String(120), nullable=True)
    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=True)
    image_urls = Column(JSON, nullable=False, default=list)
    likes_count = Column(Integer, nullable=False, default=0)
    comments_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


class ReviewLikeModel(Base):
    """A user's like on a review."""

    __tablename__ = "review_likes"

    review_id = Column(
        String(36), ForeignKey("reviews.id", ondelete="CASCADE"), primary_key=True
    )
    user_id = Column(String(36), ForeignKey("users.id"), primary_key=True)


class ReviewCommentModel(Base):
    """Database representation of a reply under a review."""

    __tablename__ = "review_comments"

    id = Column(String(36), primary_key=True)
    review_id = Column(
        String(36), ForeignKey("reviews.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id = Column(String(36), ForeignKey("users.id"), nullable=True)
    author = Column(String(120), nullable=True)
    comment = Column(Text, nullable=False)
    likes_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


class CommentLikeModel(Base):
    """A user's like on a review comment."""

    __tablename__ = "comment_likes"

    comment_id = Column(
        String(36), ForeignKey("review_comments.id", ondelete="CASCADE"), primary_key=True
    )
    user_id = Column(String(36), ForeignKey("users.id"), primary_key=True)


__all__ = ["CommentLikeModel", "ReviewCommentModel", "ReviewLikeModel", "ReviewModel"]
