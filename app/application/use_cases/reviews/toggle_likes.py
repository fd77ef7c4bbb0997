"""Use cases for liking and unliking reviews and comments."""

from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.application.use_cases.notifications import notify_comment_liked, notify_review_liked
from app.domain.entities import User
from app.infrastructure.notifications import NotificationDispatcher
from app.infrastructure.repositories import LocationRepository, ReviewRepository


@dataclass(frozen=True)
class LikeResult:
    liked: bool
    likes_count: int


def toggle_review_like(
    session: Session,
    *,
    actor: User,
    review_id: str,
    dispatcher: NotificationDispatcher | None = None,
) -> LikeResult:
    """Like ``review_id`` or take the like back.

    Only a new like notifies the review author; unliking and liking again
    produce a fresh notification each time the like is added.
    """

    repository = ReviewRepository(session)
    review = repository.get(review_id)
    if review is None:
        raise LookupError("Review not found")

    liked, count = repository.toggle_like(review.id, actor.id)
    if liked and dispatcher is not None and review.user_id:
        location = LocationRepository(session).get(review.location_id)
        if location is not None:
            notify_review_liked(dispatcher, actor=actor, review=review, location=location)
    return LikeResult(liked=liked, likes_count=count)


def toggle_comment_like(
    session: Session,
    *,
    actor: User,
    comment_id: str,
    dispatcher: NotificationDispatcher | None = None,
) -> LikeResult:
    """Like ``comment_id`` or take the like back; a new like notifies its author."""

    repository = ReviewRepository(session)
    comment = repository.get_comment(comment_id)
    if comment is None:
        raise LookupError("Comment not found")

    liked, count = repository.toggle_comment_like(comment.id, actor.id)
    if liked and dispatcher is not None and comment.user_id:
        review = repository.get(comment.review_id)
        location = LocationRepository(session).get(review.location_id) if review else None
        if review is not None and location is not None:
            notify_comment_liked(
                dispatcher, actor=actor, comment=comment, review=review, location=location
            )
    return LikeResult(liked=liked, likes_count=count)
