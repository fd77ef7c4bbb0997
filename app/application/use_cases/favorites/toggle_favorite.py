"""Use case for adding or removing a favorite location."""

from sqlalchemy.orm import Session

from app.application.use_cases.locations import get_location
from app.infrastructure.repositories import FavoriteRepository


def toggle_favorite(session: Session, *, user_id: str, location_id: str) -> bool:
    """Flip the favorite flag of ``location_id``; ``True`` means it is now saved."""

    location = get_location(session, location_id)
    return FavoriteRepository(session).toggle(user_id, location.id)
