"""Use case for adding a famous product to a location."""

from sqlalchemy.orm import Session

from app.application.use_cases.locations import get_location
from app.application.use_cases.notifications import notify_new_product
from app.domain.entities import Product, User
from app.infrastructure.notifications import NotificationDispatcher
from app.infrastructure.repositories import ProductRepository


def create_product(
    session: Session,
    *,
    actor: User,
    location_id: str,
    name: str,
    description: str | None = None,
    image_url: str | None = None,
    dispatcher: NotificationDispatcher | None = None,
) -> Product:
    """Attach a product to ``location_id`` and announce it to every other user."""

    location = get_location(session, location_id)
    name = name.strip()
    if not name:
        raise ValueError("Product name is required")

    product = ProductRepository(session).create(
        Product(
            id=None,
            name=name,
            description=description,
            image_url=image_url,
            location_id=location.id,
            user_id=actor.id,
        )
    )

    if dispatcher is not None:
        notify_new_product(dispatcher, actor=actor, product=product, location=location)
    return product
