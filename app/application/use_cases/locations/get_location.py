"""Use case for retrieving a location."""

from sqlalchemy.orm import Session

from app.domain.entities import Location
from app.infrastructure.repositories import LocationRepository


def get_location(session: Session, location_id: str) -> Location:
    location = LocationRepository(session).get(location_id)
    if location is None:
        raise LookupError("Location not found")
    return location
