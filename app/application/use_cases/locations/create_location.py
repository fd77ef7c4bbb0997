"""Use case for adding a location to the guide."""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from app.application.use_cases.notifications import notify_new_location
from app.domain.entities import LOCATION_KINDS, Location, User
from app.infrastructure.notifications import NotificationDispatcher
from app.infrastructure.repositories import LocationRepository


def create_location(
    session: Session,
    *,
    actor: User,
    data: dict[str, Any],
    dispatcher: NotificationDispatcher | None = None,
) -> Location:
    """Store a new location and announce it to every other user."""

    kind = data.get("kind")
    if kind not in LOCATION_KINDS:
        raise ValueError(f"Unknown location kind: {kind!r}")
    name = (data.get("name") or "").strip()
    if not name:
        raise ValueError("Location name is required")

    location = Location(
        id=None,
        kind=kind,
        name=name,
        category=data.get("category"),
        description=data.get("description"),
        full_description=data.get("full_description"),
        lat=data.get("lat"),
        lng=data.get("lng"),
        google_map_url=data.get("google_map_url"),
        image_url=data.get("image_url"),
        detail_images=list(data.get("detail_images") or []),
        hours=data.get("hours"),
        contact=data.get("contact"),
        user_id=actor.id,
    )
    saved = LocationRepository(session).create(location)

    if dispatcher is not None:
        notify_new_location(dispatcher, actor=actor, location=saved)
    return saved
