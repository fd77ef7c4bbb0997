"""Domain entities exposed by the application."""

from .location import (
    LOCATION_KIND_ATTRACTION,
    LOCATION_KIND_FOOD_SHOP,
    LOCATION_KINDS,
    Location,
)
from .notification import (
    NOTIFICATION_NEW_COMMENT_LIKE,
    NOTIFICATION_NEW_LIKE,
    NOTIFICATION_NEW_LOCATION,
    NOTIFICATION_NEW_PRODUCT,
    NOTIFICATION_NEW_REPLY,
    NOTIFICATION_NEW_REVIEW,
    NOTIFICATION_TYPES,
    Notification,
    NotificationEvent,
)
from .product import Product
from .review import Review, ReviewComment
from .user import ROLE_ADMIN, ROLE_USER, User

__all__ = [
    "LOCATION_KIND_ATTRACTION",
    "LOCATION_KIND_FOOD_SHOP",
    "LOCATION_KINDS",
    "Location",
    "NOTIFICATION_NEW_COMMENT_LIKE",
    "NOTIFICATION_NEW_LIKE",
    "NOTIFICATION_NEW_LOCATION",
    "NOTIFICATION_NEW_PRODUCT",
    "NOTIFICATION_NEW_REPLY",
    "NOTIFICATION_NEW_REVIEW",
    "NOTIFICATION_TYPES",
    "Notification",
    "NotificationEvent",
    "Product",
    "Review",
    "ReviewComment",
    "ROLE_ADMIN",
    "ROLE_USER",
    "User",
]
