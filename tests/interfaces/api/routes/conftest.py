"""Fixtures for exercising the HTTP API against a throwaway sqlite file."""

import pytest
from fastapi.testclient import TestClient

from app.infrastructure import database
from main import create_app


@pytest.fixture
def app():
    database.Base.metadata.drop_all(bind=database.engine)
    database.Base.metadata.create_all(bind=database.engine)
    return create_app()


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def signup(client):
    """Register a user and return ``(user_json, auth_headers)``."""

    def _signup(username: str, *, display_name: str | None = None):
        response = client.post(
            "/api/auth/register",
            json={
                "username": username,
                "password": "secret-password",
                "display_name": display_name,
            },
        )
        assert response.status_code == 201, response.text
        token_response = client.post(
            "/api/auth/token",
            data={"username": username, "password": "secret-password"},
        )
        assert token_response.status_code == 200, token_response.text
        body = token_response.json()
        return body["user"], {"Authorization": f"Bearer {body['access_token']}"}

    return _signup


@pytest.fixture
def flush(client, app):
    """Wait for every scheduled notification delivery to finish."""

    def _flush() -> None:
        client.portal.call(app.state.notification_dispatcher.join)

    return _flush
