"""Domain entities for places listed in the guide."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

LOCATION_KIND_ATTRACTION = "attraction"
LOCATION_KIND_FOOD_SHOP = "food_shop"
LOCATION_KINDS = frozenset({LOCATION_KIND_ATTRACTION, LOCATION_KIND_FOOD_SHOP})


@dataclass
class Location:
    """A tourist attraction or food shop."""

    id: str | None
    kind: str
    name: str
    category: str | None = None
    description: str | None = None
    full_description: str | None = None
    lat: float | None = None
    lng: float | None = None
    google_map_url: str | None = None
    image_url: str | None = None
    detail_images: list[str] = field(default_factory=list)
    hours: str | None = None
    contact: str | None = None
    rating: float = 0.0
    review_count: int = 0
    user_id: str | None = None
    created_at: datetime | None = None
