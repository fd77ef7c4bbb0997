"""Endpoints for the authenticated user's favorite locations."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.application.use_cases.favorites import list_favorites, toggle_favorite
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_user
from app.interfaces.api.schemas import FavoriteToggle, FavoriteToggleRead

router = APIRouter(prefix="/api/favorites", tags=["favorites"])


@router.get("", response_model=list[str])
def read_favorites(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[str]:
    """Return the ids of the locations the user saved."""

    return list(list_favorites(db, current_user.id))


@router.post("/toggle", response_model=FavoriteToggleRead)
def toggle(
    payload: FavoriteToggle,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> FavoriteToggleRead:
    try:
        added = toggle_favorite(db, user_id=current_user.id, location_id=payload.location_id)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return FavoriteToggleRead(status="added" if added else "removed")
