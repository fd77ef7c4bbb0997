"""Domain entity for a famous product sold at a location."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Product:
    """Local speciality highlighted on a location page."""

    id: str | None
    name: str
    description: str | None
    image_url: str | None
    location_id: str | None
    user_id: str | None
    created_at: datetime | None = None
