"""Location and product schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class LocationCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: str = Field(..., description="attraction or food_shop")
    name: str = Field(..., min_length=1, max_length=200)
    category: str | None = Field(default=None, max_length=80)
    description: str | None = None
    full_description: str | None = None
    lat: float | None = Field(default=None, ge=-90, le=90)
    lng: float | None = Field(default=None, ge=-180, le=180)
    google_map_url: str | None = None
    image_url: str | None = None
    detail_images: list[str] = Field(default_factory=list)
    hours: str | None = None
    contact: str | None = None


class LocationRead(BaseModel):
    id: str
    kind: str
    name: str
    category: str | None = None
    description: str | None = None
    full_description: str | None = None
    lat: float | None = None
    lng: float | None = None
    google_map_url: str | None = None
    image_url: str | None = None
    detail_images: list[str] = Field(default_factory=list)
    hours: str | None = None
    contact: str | None = None
    rating: float
    review_count: int
    user_id: str | None = None
    created_at: datetime | None = None


class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    image_url: str | None = None


class ProductRead(BaseModel):
    id: str
    name: str
    description: str | None = None
    image_url: str | None = None
    location_id: str | None = None
    user_id: str | None = None
    created_at: datetime | None = None
