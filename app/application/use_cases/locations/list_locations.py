"""Use case for listing locations."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import LOCATION_KINDS, Location
from app.infrastructure.repositories import LocationRepository


def list_locations(session: Session, *, kind: str | None = None) -> Sequence[Location]:
    """Return the locations of ``kind`` (or all of them), newest first."""

    if kind is not None and kind not in LOCATION_KINDS:
        raise ValueError(f"Unknown location kind: {kind!r}")
    return LocationRepository(session).list(kind=kind)
