"""Review, reply and like schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ReviewCreate(BaseModel):
    rating: int = Field(..., ge=1, le=5)
    comment: str | None = None
    image_urls: list[str] = Field(default_factory=list)


class ReviewRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    location_id: str
    user_id: str | None = None
    author: str | None = None
    rating: int
    comment: str | None = None
    image_urls: list[str] = Field(default_factory=list)
    likes_count: int
    comments_count: int
    created_at: datetime | None = None


class ReviewCommentCreate(BaseModel):
    comment: str = Field(..., min_length=1, max_length=2000)


class ReviewCommentRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    review_id: str
    user_id: str | None = None
    author: str | None = None
    comment: str
    likes_count: int
    created_at: datetime | None = None


class LikeRead(BaseModel):
    liked: bool
    likes_count: int
