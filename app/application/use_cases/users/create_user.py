"""Use case for creating users."""

from sqlalchemy.orm import Session

from app.domain.entities import ROLE_USER, User
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import get_password_hash


class UsernameTakenError(ValueError):
    """Raised when the requested username already belongs to another account."""


def create_user(
    session: Session,
    *,
    username: str,
    password: str,
    display_name: str | None = None,
    profile_image_url: str | None = None,
    role: str = ROLE_USER,
) -> User:
    """Create a new user ensuring unique usernames."""

    username = username.strip()
    if not username:
        raise ValueError("Username is required")
    if not password:
        raise ValueError("Password is required")

    repository = UserRepository(session)
    if repository.get_by_username(username):
        raise UsernameTakenError("This username is already taken")

    user = User(
        id=None,
        username=username,
        display_name=(display_name or "").strip() or None,
        password=get_password_hash(password),
        profile_image_url=profile_image_url,
        role=role,
    )
    return repository.create(user)
