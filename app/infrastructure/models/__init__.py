"""ORM models used by the application infrastructure."""

from .favorite import FavoriteModel
from .location import LocationModel
from .notification import NotificationModel
from .product import ProductModel
from .review import CommentLikeModel, ReviewCommentModel, ReviewLikeModel, ReviewModel
from .user import UserModel

__all__ = [
    "CommentLikeModel",
    "FavoriteModel",
    "LocationModel",
    "NotificationModel",
    "ProductModel",
    "ReviewCommentModel",
    "ReviewLikeModel",
    "ReviewModel",
    "UserModel",
]
