"""Use cases for managing users."""

from .authenticate_user import authenticate_user
from .create_user import UsernameTakenError, create_user
from .get_user import get_user

__all__ = [
    "UsernameTakenError",
    "authenticate_user",
    "create_user",
    "get_user",
]
