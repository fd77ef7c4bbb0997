"""Use cases for browsing and adding locations."""

from .create_location import create_location
from .get_location import get_location
from .list_locations import list_locations

__all__ = ["create_location", "get_location", "list_locations"]
