"""Domain entities for reviews and the comments posted under them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Review:
    """A rated review of a location."""

    id: str | None
    location_id: str
    user_id: str | None
    author: str | None
    rating: int
    comment: str | None
    image_urls: list[str] = field(default_factory=list)
    likes_count: int = 0
    comments_count: int = 0
    created_at: datetime | None = None


@dataclass
class ReviewComment:
    """A reply posted under a review."""

    id: str | None
    review_id: str
    user_id: str | None
    author: str | None
    comment: str
    likes_count: int = 0
    created_at: datetime | None = None
