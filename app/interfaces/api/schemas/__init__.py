from .auth import RegisterRequest, Token
from .favorite import FavoriteToggle, FavoriteToggleRead
from .location import LocationCreate, LocationRead, ProductCreate, ProductRead
from .notification import NotificationRead, NotificationsReadResponse
from .review import (
    LikeRead,
    ReviewCommentCreate,
    ReviewCommentRead,
    ReviewCreate,
    ReviewRead,
)
from .user import UserRead

__all__ = [
    "FavoriteToggle",
    "FavoriteToggleRead",
    "LikeRead",
    "LocationCreate",
    "LocationRead",
    "NotificationRead",
    "NotificationsReadResponse",
    "ProductCreate",
    "ProductRead",
    "RegisterRequest",
    "ReviewCommentCreate",
    "ReviewCommentRead",
    "ReviewCreate",
    "ReviewRead",
    "Token",
    "UserRead",
]
