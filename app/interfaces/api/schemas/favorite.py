"""Favorite schemas."""

from typing import Literal

from pydantic import BaseModel, Field


class FavoriteToggle(BaseModel):
    location_id: str = Field(..., min_length=1)


class FavoriteToggleRead(BaseModel):
    status: Literal["added", "removed"]
