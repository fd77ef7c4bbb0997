"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime

ROLE_USER = "user"
ROLE_ADMIN = "admin"


@dataclass
class User:
    """Core attributes describing an application user."""

    id: str | None
    username: str
    display_name: str | None
    password: str
    profile_image_url: str | None
    role: str
    created_at: datetime | None = None

    @property
    def public_name(self) -> str:
        """Name shown to other users next to the user's activity."""

        return self.display_name or self.username

    def is_admin(self) -> bool:
        """Return ``True`` when the user is an administrator."""

        return self.role.lower() == ROLE_ADMIN
