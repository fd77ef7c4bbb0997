"""Use case for reviewing a location."""

from sqlalchemy.orm import Session

from app.application.use_cases.locations import get_location
from app.application.use_cases.notifications import notify_new_review
from app.domain.entities import Review, User
from app.infrastructure.notifications import NotificationDispatcher
from app.infrastructure.repositories import LocationRepository, ReviewRepository


def create_review(
    session: Session,
    *,
    actor: User,
    location_id: str,
    rating: int,
    comment: str | None = None,
    image_urls: list[str] | None = None,
    dispatcher: NotificationDispatcher | None = None,
) -> Review:
    """Store a review, refresh the location rating and tell the location owner."""

    location = get_location(session, location_id)
    if not 1 <= rating <= 5:
        raise ValueError("Rating must be between 1 and 5")

    review = ReviewRepository(session).create(
        Review(
            id=None,
            location_id=location.id,
            user_id=actor.id,
            author=actor.public_name,
            rating=rating,
            comment=(comment or "").strip() or None,
            image_urls=list(image_urls or []),
        )
    )
    LocationRepository(session).refresh_rating(location.id)

    if dispatcher is not None and location.user_id:
        notify_new_review(dispatcher, actor=actor, review=review, location=location)
    return review
