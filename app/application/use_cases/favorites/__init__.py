"""Use cases for saving locations as favorites."""

from .list_favorites import list_favorites
from .toggle_favorite import toggle_favorite

__all__ = ["list_favorites", "toggle_favorite"]
