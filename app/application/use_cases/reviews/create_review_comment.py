"""Use case for replying to a review."""

from sqlalchemy.orm import Session

from app.application.use_cases.notifications import notify_review_reply
from app.domain.entities import ReviewComment, User
from app.infrastructure.notifications import NotificationDispatcher
from app.infrastructure.repositories import LocationRepository, ReviewRepository


def create_review_comment(
    session: Session,
    *,
    actor: User,
    review_id: str,
    comment: str,
    dispatcher: NotificationDispatcher | None = None,
) -> ReviewComment:
    """Post ``comment`` under ``review_id`` and notify the review author."""

    repository = ReviewRepository(session)
    review = repository.get(review_id)
    if review is None:
        raise LookupError("Review not found")
    text = comment.strip()
    if not text:
        raise ValueError("Comment must not be empty")

    saved = repository.create_comment(
        ReviewComment(
            id=None,
            review_id=review.id,
            user_id=actor.id,
            author=actor.public_name,
            comment=text,
        )
    )

    location = LocationRepository(session).get(review.location_id)
    if dispatcher is not None and location is not None and review.user_id:
        notify_review_reply(
            dispatcher, actor=actor, review=review, comment=saved, location=location
        )
    return saved
