"""Conversion of domain entities into response models."""

from app.domain.entities import Location, Product, Review, ReviewComment, User
from app.interfaces.api.schemas import (
    LocationRead,
    ProductRead,
    ReviewCommentRead,
    ReviewRead,
    UserRead,
)
from app.utils import absolute_url


def user_to_schema(user: User) -> UserRead:
    return UserRead(
        id=user.id,
        username=user.username,
        display_name=user.public_name,
        profile_image_url=absolute_url(user.profile_image_url),
        role=user.role,
    )


def location_to_schema(location: Location) -> LocationRead:
    return LocationRead(
        id=location.id,
        kind=location.kind,
        name=location.name,
        category=location.category,
        description=location.description,
        full_description=location.full_description,
        lat=location.lat,
        lng=location.lng,
        google_map_url=location.google_map_url,
        image_url=absolute_url(location.image_url),
        detail_images=[absolute_url(path) for path in location.detail_images],
        hours=location.hours,
        contact=location.contact,
        rating=location.rating,
        review_count=location.review_count,
        user_id=location.user_id,
        created_at=location.created_at,
    )


def product_to_schema(product: Product) -> ProductRead:
    return ProductRead(
        id=product.id,
        name=product.name,
        description=product.description,
        image_url=absolute_url(product.image_url),
        location_id=product.location_id,
        user_id=product.user_id,
        created_at=product.created_at,
    )


def review_to_schema(review: Review) -> ReviewRead:
    read = ReviewRead.model_validate(review)
    read.image_urls = [absolute_url(path) for path in review.image_urls]
    return read


def comment_to_schema(comment: ReviewComment) -> ReviewCommentRead:
    return ReviewCommentRead.model_validate(comment)
