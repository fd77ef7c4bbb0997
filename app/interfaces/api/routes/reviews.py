"""Endpoints for reviews, replies and likes."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.application.use_cases.reviews import (
    create_review,
    create_review_comment,
    list_review_comments,
    list_reviews,
    toggle_comment_like,
    toggle_review_like,
)
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.infrastructure.notifications import NotificationDispatcher
from app.interfaces.api.dependencies import get_current_user, get_notification_dispatcher
from app.interfaces.api.schemas import (
    LikeRead,
    ReviewCommentCreate,
    ReviewCommentRead,
    ReviewCreate,
    ReviewRead,
)

from .serializers import comment_to_schema, review_to_schema

router = APIRouter(prefix="/api", tags=["reviews"])


@router.get("/locations/{location_id}/reviews", response_model=list[ReviewRead])
def read_reviews(location_id: str, db: Session = Depends(get_db)) -> list[ReviewRead]:
    try:
        reviews = list_reviews(db, location_id)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return [review_to_schema(review) for review in reviews]


@router.post(
    "/locations/{location_id}/reviews",
    response_model=ReviewRead,
    status_code=status.HTTP_201_CREATED,
)
def add_review(
    location_id: str,
    payload: ReviewCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
) -> ReviewRead:
    try:
        review = create_review(
            db,
            actor=current_user,
            location_id=location_id,
            rating=payload.rating,
            comment=payload.comment,
            image_urls=payload.image_urls,
            dispatcher=dispatcher,
        )
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return review_to_schema(review)


@router.post("/reviews/{review_id}/like", response_model=LikeRead)
def like_review(
    review_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
) -> LikeRead:
    """Toggle the current user's like on a review."""

    try:
        result = toggle_review_like(
            db, actor=current_user, review_id=review_id, dispatcher=dispatcher
        )
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return LikeRead(liked=result.liked, likes_count=result.likes_count)


@router.get("/reviews/{review_id}/comments", response_model=list[ReviewCommentRead])
def read_review_comments(
    review_id: str, db: Session = Depends(get_db)
) -> list[ReviewCommentRead]:
    try:
        comments = list_review_comments(db, review_id)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return [comment_to_schema(comment) for comment in comments]


@router.post(
    "/reviews/{review_id}/comments",
    response_model=ReviewCommentRead,
    status_code=status.HTTP_201_CREATED,
)
def add_review_comment(
    review_id: str,
    payload: ReviewCommentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
) -> ReviewCommentRead:
    try:
        comment = create_review_comment(
            db,
            actor=current_user,
            review_id=review_id,
            comment=payload.comment,
            dispatcher=dispatcher,
        )
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return comment_to_schema(comment)


@router.post("/comments/{comment_id}/like", response_model=LikeRead)
def like_comment(
    comment_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
) -> LikeRead:
    """Toggle the current user's like on a review comment."""

    try:
        result = toggle_comment_like(
            db, actor=current_user, comment_id=comment_id, dispatcher=dispatcher
        )
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return LikeRead(liked=result.liked, likes_count=result.likes_count)
