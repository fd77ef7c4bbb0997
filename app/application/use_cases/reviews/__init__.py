"""Use cases for reviews, replies and likes."""

from .create_review import create_review
from .create_review_comment import create_review_comment
from .list_reviews import list_review_comments, list_reviews
from .toggle_likes import LikeResult, toggle_comment_like, toggle_review_like

__all__ = [
    "LikeResult",
    "create_review",
    "create_review_comment",
    "list_review_comments",
    "list_reviews",
    "toggle_comment_like",
    "toggle_review_like",
]
