"""Persistence layer for famous products."""

from __future__ import annotations

from collections.abc import Sequence
from uuid import uuid4

from sqlalchemy.orm import Session

from app.domain.entities import Product
from app.infrastructure.models import ProductModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_timezone


class ProductRepository:
    """Provide CRUD operations for :class:`Product` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_location(self, location_id: str) -> Sequence[Product]:
        query = (
            self.session.query(ProductModel)
            .filter(ProductModel.location_id == location_id)
            .order_by(ProductModel.created_at.desc(), ProductModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, product: Product) -> Product:
        model = ProductModel(
            id=product.id or str(uuid4()),
            name=product.name,
            description=product.description,
            image_url=product.image_url,
            location_id=product.location_id,
            user_id=product.user_id,
            created_at=ensure_app_naive_datetime(
                product.created_at or now_in_app_timezone()
            ),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: ProductModel) -> Product:
        return Product(
            id=model.id,
            name=model.name,
            description=model.description,
            image_url=model.image_url,
            location_id=model.location_id,
            user_id=model.user_id,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["ProductRepository"]
