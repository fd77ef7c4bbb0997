"""Persistence layer for reviews, review comments and likes."""

from __future__ import annotations

from collections.abc import Sequence
from uuid import uuid4

from sqlalchemy.orm import Session

from app.domain.entities import Review, ReviewComment
from app.infrastructure.models import (
    CommentLikeModel,
    ReviewCommentModel,
    ReviewLikeModel,
    ReviewModel,
)
from app.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_timezone


class ReviewRepository:
    """Provide CRUD operations for reviews and everything attached to them."""

    def __init__(self, session: Session) -> None:
        self.session = session

    # Reviews -----------------------------------------------------------------

    def list_for_location(self, location_id: str) -> Sequence[Review]:
        query = (
            self.session.query(ReviewModel)
            .filter(ReviewModel.location_id == location_id)
            .order_by(ReviewModel.created_at.desc(), ReviewModel.id)
        )
        return [self._review_to_entity(model) for model in query.all()]

    def get(self, review_id: str) -> Review | None:
        model = self.session.get(ReviewModel, review_id)
        return self._review_to_entity(model) if model else None

    def create(self, review: Review) -> Review:
        model = ReviewModel(
            id=review.id or str(uuid4()),
            location_id=review.location_id,
            user_id=review.user_id,
            author=review.author,
            rating=review.rating,
            comment=review.comment,
            image_urls=list(review.image_urls),
            created_at=ensure_app_naive_datetime(
                review.created_at or now_in_app_timezone()
            ),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._review_to_entity(model)

    def toggle_like(self, review_id: str, user_id: str) -> tuple[bool, int]:
        """Like or unlike ``review_id``; return ``(liked, likes_count)``."""

        existing = self.session.get(ReviewLikeModel, (review_id, user_id))
        if existing is not None:
            self.session.delete(existing)
            liked = False
        else:
            self.session.add(ReviewLikeModel(review_id=review_id, user_id=user_id))
            liked = True
        self.session.flush()
        count = (
            self.session.query(ReviewLikeModel)
            .filter(ReviewLikeModel.review_id == review_id)
            .count()
        )
        review = self.session.get(ReviewModel, review_id)
        if review is not None:
            review.likes_count = count
        self.session.commit()
        return liked, count

    # Comments ----------------------------------------------------------------

    def list_comments(self, review_id: str) -> Sequence[ReviewComment]:
        query = (
            self.session.query(ReviewCommentModel)
            .filter(ReviewCommentModel.review_id == review_id)
            .order_by(ReviewCommentModel.created_at, ReviewCommentModel.id)
        )
        return [self._comment_to_entity(model) for model in query.all()]

    def get_comment(self, comment_id: str) -> ReviewComment | None:
        model = self.session.get(ReviewCommentModel, comment_id)
        return self._comment_to_entity(model) if model else None

    def create_comment(self, comment: ReviewComment) -> ReviewComment:
        model = ReviewCommentModel(
            id=comment.id or str(uuid4()),
            review_id=comment.review_id,
            user_id=comment.user_id,
            author=comment.author,
            comment=comment.comment,
            created_at=ensure_app_naive_datetime(
                comment.created_at or now_in_app_timezone()
            ),
        )
        self.session.add(model)
        self.session.flush()
        review = self.session.get(ReviewModel, comment.review_id)
        if review is not None:
            review.comments_count = (
                self.session.query(ReviewCommentModel)
                .filter(ReviewCommentModel.review_id == comment.review_id)
                .count()
            )
        self.session.commit()
        self.session.refresh(model)
        return self._comment_to_entity(model)

    def toggle_comment_like(self, comment_id: str, user_id: str) -> tuple[bool, int]:
        """Like or unlike ``comment_id``; return ``(liked, likes_count)``."""

        existing = self.session.get(CommentLikeModel, (comment_id, user_id))
        if existing is not None:
            self.session.delete(existing)
            liked = False
        else:
            self.session.add(CommentLikeModel(comment_id=comment_id, user_id=user_id))
            liked = True
        self.session.flush()
        count = (
            self.session.query(CommentLikeModel)
            .filter(CommentLikeModel.comment_id == comment_id)
            .count()
        )
        comment = self.session.get(ReviewCommentModel, comment_id)
        if comment is not None:
            comment.likes_count = count
        self.session.commit()
        return liked, count

    @staticmethod
    def _review_to_entity(model: ReviewModel) -> Review:
        return Review(
            id=model.id,
            location_id=model.location_id,
            user_id=model.user_id,
            author=model.author,
            rating=model.rating,
            comment=model.comment,
            image_urls=list(model.image_urls or []),
            likes_count=model.likes_count or 0,
            comments_count=model.comments_count or 0,
            created_at=ensure_app_timezone(model.created_at),
        )

    @staticmethod
    def _comment_to_entity(model: ReviewCommentModel) -> ReviewComment:
        return ReviewComment(
            id=model.id,
            review_id=model.review_id,
            user_id=model.user_id,
            author=model.author,
            comment=model.comment,
            likes_count=model.likes_count or 0,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["ReviewRepository"]
