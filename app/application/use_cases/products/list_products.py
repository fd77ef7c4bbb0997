"""Use case for listing the famous products of a location."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.application.use_cases.locations import get_location
from app.domain.entities import Product
from app.infrastructure.repositories import ProductRepository


def list_products(session: Session, location_id: str) -> Sequence[Product]:
    get_location(session, location_id)
    return ProductRepository(session).list_for_location(location_id)
