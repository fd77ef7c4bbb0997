"""Endpoints for locations and their famous products."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.application.use_cases.locations import create_location, get_location, list_locations
from app.application.use_cases.products import create_product, list_products
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.infrastructure.notifications import NotificationDispatcher
from app.interfaces.api.dependencies import get_current_user, get_notification_dispatcher
from app.interfaces.api.schemas import LocationCreate, LocationRead, ProductCreate, ProductRead

from .serializers import location_to_schema, product_to_schema

router = APIRouter(prefix="/api/locations", tags=["locations"])


@router.get("", response_model=list[LocationRead])
def read_locations(
    kind: str | None = Query(default=None),
    db: Session = Depends(get_db),
) -> list[LocationRead]:
    """List the locations in the guide, newest first."""

    try:
        locations = list_locations(db, kind=kind)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return [location_to_schema(location) for location in locations]


@router.get("/{location_id}", response_model=LocationRead)
def read_location(location_id: str, db: Session = Depends(get_db)) -> LocationRead:
    try:
        location = get_location(db, location_id)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return location_to_schema(location)


@router.post("", response_model=LocationRead, status_code=status.HTTP_201_CREATED)
def add_location(
    payload: LocationCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
) -> LocationRead:
    """Add a location and announce it to everybody else."""

    try:
        location = create_location(
            db, actor=current_user, data=payload.model_dump(), dispatcher=dispatcher
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return location_to_schema(location)


@router.get("/{location_id}/products", response_model=list[ProductRead])
def read_products(location_id: str, db: Session = Depends(get_db)) -> list[ProductRead]:
    try:
        products = list_products(db, location_id)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return [product_to_schema(product) for product in products]


@router.post(
    "/{location_id}/products",
    response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
)
def add_product(
    location_id: str,
    payload: ProductCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
) -> ProductRead:
    """Add a famous product to a location and announce it."""

    try:
        product = create_product(
            db,
            actor=current_user,
            location_id=location_id,
            name=payload.name,
            description=payload.description,
            image_url=payload.image_url,
            dispatcher=dispatcher,
        )
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return product_to_schema(product)
