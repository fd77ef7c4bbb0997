"""Persistence layer for locations."""

from __future__ import annotations

from collections.abc import Sequence
from uuid import uuid4

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.domain.entities import Location
from app.infrastructure.models import LocationModel, ReviewModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_timezone


class LocationRepository:
    """Provide CRUD operations for :class:`Location` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, *, kind: str | None = None) -> Sequence[Location]:
        query = self.session.query(LocationModel)
        if kind is not None:
            query = query.filter(LocationModel.kind == kind)
        query = query.order_by(LocationModel.created_at.desc(), LocationModel.id)
        return [self._to_entity(model) for model in query.all()]

    def get(self, location_id: str) -> Location | None:
        model = self.session.get(LocationModel, location_id)
        return self._to_entity(model) if model else None

    def create(self, location: Location) -> Location:
        model = LocationModel(
            id=location.id or str(uuid4()),
            kind=location.kind,
            name=location.name,
            category=location.category,
            description=location.description,
            full_description=location.full_description,
            lat=location.lat,
            lng=location.lng,
            google_map_url=location.google_map_url,
            image_url=location.image_url,
            detail_images=list(location.detail_images),
            hours=location.hours,
            contact=location.contact,
            rating=location.rating,
            review_count=location.review_count,
            user_id=location.user_id,
            created_at=ensure_app_naive_datetime(
                location.created_at or now_in_app_timezone()
            ),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def refresh_rating(self, location_id: str) -> None:
        """Recompute the average rating and review count of ``location_id``."""

        average, count = (
            self.session.query(func.avg(ReviewModel.rating), func.count(ReviewModel.id))
            .filter(ReviewModel.location_id == location_id)
            .one()
        )
        model = self.session.get(LocationModel, location_id)
        if model is None:
            return
        model.rating = round(float(average or 0.0), 1)
        model.review_count = int(count or 0)
        self.session.commit()

    @staticmethod
    def _to_entity(model: LocationModel) -> Location:
        return Location(
            id=model.id,
            kind=model.kind,
            name=model.name,
            category=model.category,
            description=model.description,
            full_description=model.full_description,
            lat=model.lat,
            lng=model.lng,
            google_map_url=model.google_map_url,
            image_url=model.image_url,
            detail_images=list(model.detail_images or []),
            hours=model.hours,
            contact=model.contact,
            rating=model.rating or 0.0,
            review_count=model.review_count or 0,
            user_id=model.user_id,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["LocationRepository"]
