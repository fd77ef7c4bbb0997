"""User schemas."""

from pydantic import BaseModel


class UserRead(BaseModel):
    id: str
    username: str
    display_name: str
    profile_image_url: str | None = None
    role: str
