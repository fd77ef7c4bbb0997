"""Repository implementations for infrastructure layer."""

from .favorite_repository import FavoriteRepository
from .location_repository import LocationRepository
from .notification_repository import NotificationRepository
from .product_repository import ProductRepository
from .review_repository import ReviewRepository
from .user_repository import UserRepository

__all__ = [
    "FavoriteRepository",
    "LocationRepository",
    "NotificationRepository",
    "ProductRepository",
    "ReviewRepository",
    "UserRepository",
]
