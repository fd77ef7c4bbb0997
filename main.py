from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.infrastructure.database import SessionLocal, engine, initialize_database
from app.infrastructure.notifications import (
    ConnectionRegistry,
    NotificationDispatcher,
    NotificationHeartbeat,
    NotificationStream,
)
from app.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Prepare the database and the heartbeat; flush pending notifications on exit."""

    initialize_database()
    heartbeat: NotificationHeartbeat = app.state.notification_heartbeat
    heartbeat.start()
    try:
        yield
    finally:
        await heartbeat.stop()
        await app.state.notification_dispatcher.join()
        engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = get_settings()
    app = FastAPI(title="Travel Guide API", lifespan=lifespan)

    registry = ConnectionRegistry(max_pending_frames=settings.notification_channel_buffer)
    app.state.connection_registry = registry
    app.state.notification_dispatcher = NotificationDispatcher(
        registry,
        SessionLocal,
        snippet_length=settings.notification_snippet_length,
    )
    app.state.notification_stream = NotificationStream(
        registry,
        SessionLocal,
        history_limit=settings.notification_history_limit,
    )
    app.state.notification_heartbeat = NotificationHeartbeat(
        registry, interval=settings.notification_heartbeat_seconds
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/api/status", tags=["status"])
    def read_status() -> dict[str, object]:
        return {"status": "ok", "open_streams": len(registry)}

    register_routes(app)
    return app


app = create_app()
