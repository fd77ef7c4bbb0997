"""Use case for retrieving a user."""

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.infrastructure.repositories import UserRepository


def get_user(session: Session, user_id: str) -> User:
    user = UserRepository(session).get(user_id)
    if user is None:
        raise LookupError("User not found")
    return user
