"""Use cases for reading reviews and their replies."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.application.use_cases.locations import get_location
from app.domain.entities import Review, ReviewComment
from app.infrastructure.repositories import ReviewRepository


def list_reviews(session: Session, location_id: str) -> Sequence[Review]:
    get_location(session, location_id)
    return ReviewRepository(session).list_for_location(location_id)


def list_review_comments(session: Session, review_id: str) -> Sequence[ReviewComment]:
    repository = ReviewRepository(session)
    if repository.get(review_id) is None:
        raise LookupError("Review not found")
    return repository.list_comments(review_id)
