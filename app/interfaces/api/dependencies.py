"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, Query, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from app.domain.entities import User
from app.infrastructure.database import get_db
from app.infrastructure.notifications import NotificationDispatcher, NotificationStream
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/auth/token", auto_error=False)


def _credentials_error(detail: str = "Invalid credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_current_user(token: str, db: Session) -> User:
    """Resolve the authenticated user for the provided token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _credentials_error() from exc

    user_id = payload.get("sub")
    if not isinstance(user_id, str) or not user_id:
        raise _credentials_error()

    user = UserRepository(db).get(user_id)
    if user is None:
        raise _credentials_error("User not found")
    return user


def get_current_user(
    header_token: str | None = Depends(oauth2_scheme),
    token: str | None = Query(default=None, include_in_schema=False),
    db: Session = Depends(get_db),
) -> User:
    """Return the authenticated user.

    The bearer header is preferred; the ``token`` query parameter exists for
    ``EventSource`` clients, which cannot send headers.
    """

    raw_token = header_token or token
    if not raw_token:
        raise _credentials_error("Token is required")
    return resolve_current_user(raw_token, db)


def get_notification_dispatcher(request: Request) -> NotificationDispatcher:
    return request.app.state.notification_dispatcher


def get_notification_stream(request: Request) -> NotificationStream:
    return request.app.state.notification_stream
