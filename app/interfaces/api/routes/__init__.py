from fastapi import FastAPI

from .auth import router as auth_router
from .favorites import router as favorites_router
from .locations import router as locations_router
from .notifications import router as notifications_router
from .reviews import router as reviews_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(locations_router)
    app.include_router(reviews_router)
    app.include_router(favorites_router)
    app.include_router(notifications_router)
