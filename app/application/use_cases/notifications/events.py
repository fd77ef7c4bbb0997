"""Utility helpers to build and dispatch domain notifications."""

from __future__ import annotations

from typing import Any

from app.domain.entities import (
    NOTIFICATION_NEW_COMMENT_LIKE,
    NOTIFICATION_NEW_LIKE,
    NOTIFICATION_NEW_LOCATION,
    NOTIFICATION_NEW_PRODUCT,
    NOTIFICATION_NEW_REPLY,
    NOTIFICATION_NEW_REVIEW,
    Location,
    NotificationEvent,
    Product,
    Review,
    ReviewComment,
    User,
)
from app.infrastructure.notifications import NotificationDispatcher
from app.utils import absolute_url


def _event(
    event_type: str,
    *,
    actor: User,
    payload: dict[str, Any],
    recipient_id: str | None = None,
) -> NotificationEvent:
    return NotificationEvent(
        type=event_type,
        actor_id=actor.id,
        actor_name=actor.public_name,
        actor_profile_image_url=absolute_url(actor.profile_image_url),
        recipient_id=recipient_id,
        payload=payload,
    )


def notify_new_location(
    dispatcher: NotificationDispatcher, *, actor: User, location: Location
) -> None:
    """Announce a newly added location to every other user."""

    dispatcher.dispatch(
        _event(
            NOTIFICATION_NEW_LOCATION,
            actor=actor,
            payload={"location": _location_snapshot(location)},
        )
    )


def notify_new_product(
    dispatcher: NotificationDispatcher,
    *,
    actor: User,
    product: Product,
    location: Location,
) -> None:
    """Announce a new famous product to every other user."""

    dispatcher.dispatch(
        _event(
            NOTIFICATION_NEW_PRODUCT,
            actor=actor,
            payload={
                "product": _product_snapshot(product),
                "location": _location_snapshot(location),
            },
        )
    )


def notify_new_review(
    dispatcher: NotificationDispatcher,
    *,
    actor: User,
    review: Review,
    location: Location,
) -> None:
    """Tell the owner of ``location`` that it was reviewed."""

    dispatcher.dispatch(
        _event(
            NOTIFICATION_NEW_REVIEW,
            actor=actor,
            recipient_id=location.user_id,
            payload={
                "location": _location_snapshot(location),
                "review": _review_snapshot(review),
            },
        )
    )


def notify_review_liked(
    dispatcher: NotificationDispatcher,
    *,
    actor: User,
    review: Review,
    location: Location,
) -> None:
    """Tell the author of ``review`` that someone liked it."""

    dispatcher.dispatch(
        _event(
            NOTIFICATION_NEW_LIKE,
            actor=actor,
            recipient_id=review.user_id,
            payload={
                "location": _location_snapshot(location),
                "review": _review_snapshot(review),
            },
        )
    )


def notify_review_reply(
    dispatcher: NotificationDispatcher,
    *,
    actor: User,
    review: Review,
    comment: ReviewComment,
    location: Location,
) -> None:
    """Tell the author of ``review`` that someone replied to it."""

    dispatcher.dispatch(
        _event(
            NOTIFICATION_NEW_REPLY,
            actor=actor,
            recipient_id=review.user_id,
            payload={
                "location": _location_snapshot(location),
                "review": _review_snapshot(review),
                "comment": _comment_snapshot(comment),
            },
        )
    )


def notify_comment_liked(
    dispatcher: NotificationDispatcher,
    *,
    actor: User,
    comment: ReviewComment,
    review: Review,
    location: Location,
) -> None:
    """Tell the author of ``comment`` that someone liked it."""

    dispatcher.dispatch(
        _event(
            NOTIFICATION_NEW_COMMENT_LIKE,
            actor=actor,
            recipient_id=comment.user_id,
            payload={
                "location": _location_snapshot(location),
                "review": _review_snapshot(review),
                "comment": _comment_snapshot(comment),
            },
        )
    )


def _location_snapshot(location: Location) -> dict[str, Any]:
    return {
        "id": location.id,
        "kind": location.kind,
        "name": location.name,
        "category": location.category,
        "description": location.description,
        "image_url": absolute_url(location.image_url),
        "lat": location.lat,
        "lng": location.lng,
        "rating": location.rating,
        "user_id": location.user_id,
        "created_at": location.created_at,
    }


def _product_snapshot(product: Product) -> dict[str, Any]:
    return {
        "id": product.id,
        "name": product.name,
        "description": product.description,
        "image_url": absolute_url(product.image_url),
        "location_id": product.location_id,
    }


def _review_snapshot(review: Review) -> dict[str, Any]:
    return {
        "id": review.id,
        "location_id": review.location_id,
        "author": review.author,
        "rating": review.rating,
        "comment": review.comment,
    }


def _comment_snapshot(comment: ReviewComment) -> dict[str, Any]:
    return {
        "id": comment.id,
        "review_id": comment.review_id,
        "author": comment.author,
        "comment": comment.comment,
    }


__all__ = [
    "notify_comment_liked",
    "notify_new_location",
    "notify_new_product",
    "notify_new_review",
    "notify_review_liked",
    "notify_review_reply",
]
