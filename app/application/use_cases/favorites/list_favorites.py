"""Use case for listing a user's favorite locations."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.infrastructure.repositories import FavoriteRepository


def list_favorites(session: Session, user_id: str) -> Sequence[str]:
    """Return the identifiers of the locations ``user_id`` saved, oldest first."""

    return FavoriteRepository(session).list_location_ids(user_id)
