"""Authentication related schemas."""

from pydantic import BaseModel, Field

from .user import UserRead


class Token(BaseModel):
    access_token: str
    token_type: str
    user: UserRead


class RegisterRequest(BaseModel):
    username: str = Field(..., min_length=3, max_length=80)
    password: str = Field(..., min_length=6)
    display_name: str | None = Field(default=None, max_length=120)
    profile_image_url: str | None = Field(default=None, max_length=500)
