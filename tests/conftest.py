"""Shared fixtures: environment, sqlite engines and seeded users."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "travel_guide_api_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["APP_TIMEZONE"] = "Asia/Bangkok"

from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.domain.entities import User  # noqa: E402
from app.infrastructure.database import initialize_database  # noqa: E402
from app.infrastructure.repositories import UserRepository  # noqa: E402


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def session_factory():
    """Sessions bound to a private in-memory database shared across threads."""

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    initialize_database(engine)
    yield sessionmaker(bind=engine, autocommit=False, autoflush=False)
    engine.dispose()


@pytest.fixture
def make_user(session_factory):
    """Insert a user directly, skipping the slow password hashing."""

    def _make(username: str, *, display_name: str | None = None) -> User:
        with session_factory() as session:
            return UserRepository(session).create(
                User(
                    id=None,
                    username=username,
                    display_name=display_name,
                    password="not-a-real-hash",
                    profile_image_url=None,
                    role="user",
                )
            )

    return _make
