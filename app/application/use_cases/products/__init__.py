"""Use cases for famous products."""

from .create_product import create_product
from .list_products import list_products

__all__ = ["create_product", "list_products"]
