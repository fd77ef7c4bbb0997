"""Tests for opening event streams and replaying past notifications."""

import json
from datetime import datetime, timedelta

import pytest
from anyio import from_thread
from sqlalchemy.exc import OperationalError

from app.domain.entities import NOTIFICATION_NEW_LIKE, Notification
from app.infrastructure.notifications import (
    INITIAL_CONNECTION_FRAME,
    ConnectionRegistry,
    NotificationStream,
)
from app.infrastructure.repositories import NotificationRepository


def _decode(frame: str) -> dict:
    return json.loads(frame[len("data: ") : -2])


def _seed(session_factory, user_id: str, count: int) -> None:
    start = datetime(2024, 1, 1, 8, 0)
    with session_factory() as session:
        NotificationRepository(session).create_many(
            Notification(
                id=None,
                user_id=user_id,
                actor_id="someone",
                actor_name="Someone",
                actor_profile_image_url=None,
                type=NOTIFICATION_NEW_LIKE,
                payload={"reviewId": f"r{index}"},
                is_read=index % 2 == 0,
                created_at=start + timedelta(minutes=index),
            )
            for index in range(count)
        )


@pytest.fixture
def registry() -> ConnectionRegistry:
    return ConnectionRegistry()


@pytest.fixture
def stream(registry, session_factory) -> NotificationStream:
    return NotificationStream(registry, session_factory)


@pytest.mark.anyio
async def test_open_sends_connected_frame_only_without_history(
    stream, registry
) -> None:
    connection = await stream.open("alice")

    frames = connection.channel.drain()
    assert len(frames) == 1
    assert _decode(frames[0]) == {"type": "connected", "clientId": connection.connection_id}
    assert registry.count_for_user("alice") == 1


@pytest.mark.anyio
async def test_open_replays_latest_notifications_newest_first(
    stream, session_factory
) -> None:
    _seed(session_factory, "alice", 25)
    _seed(session_factory, "bob", 3)

    connection = await stream.open("alice")

    connected, historic = connection.channel.drain()
    assert _decode(connected)["type"] == "connected"
    message = _decode(historic)
    assert message["type"] == "historic_notifications"
    items = message["data"]
    assert len(items) == 20
    assert [item["payload"]["reviewId"] for item in items] == [
        f"r{index}" for index in range(24, 4, -1)
    ]
    assert {item["user_id"] for item in items} == {"alice"}
    assert {item["is_read"] for item in items} == {True, False}


@pytest.mark.anyio
async def test_history_failure_keeps_the_stream_open(
    stream, registry, monkeypatch, caplog
) -> None:
    def fail(self, user_id, *, limit=20):
        raise OperationalError("SELECT", {}, Exception("no such table"))

    monkeypatch.setattr(NotificationRepository, "list_for_user", fail)

    connection = await stream.open("alice")

    assert registry.is_registered(connection.connection_id)
    assert len(connection.channel.drain()) == 1
    assert "past notifications" in caplog.text


@pytest.mark.anyio
async def test_history_is_not_sent_to_a_stream_closed_while_loading(
    stream, registry, session_factory, monkeypatch
) -> None:
    _seed(session_factory, "alice", 2)
    load_history = NotificationRepository.list_for_user

    def close_then_load(self, user_id, *, limit=20):
        from_thread.run_sync(
            registry.for_each, lambda c: registry.unregister(c.connection_id)
        )
        return load_history(self, user_id, limit=limit)

    monkeypatch.setattr(NotificationRepository, "list_for_user", close_then_load)

    connection = await stream.open("alice")

    assert not registry.is_registered(connection.connection_id)
    frames = connection.channel.drain()
    assert [_decode(frame)["type"] for frame in frames] == ["connected"]


@pytest.mark.anyio
async def test_frames_start_with_initial_comment_and_end_on_close(
    stream, registry
) -> None:
    connection = await stream.open("alice")
    iterator = stream.frames(connection)

    assert await iterator.__anext__() == INITIAL_CONNECTION_FRAME
    assert _decode(await iterator.__anext__())["type"] == "connected"

    registry.push(connection.connection_id, ":keep-alive\n\n")
    assert await iterator.__anext__() == ":keep-alive\n\n"

    stream.close(connection)
    with pytest.raises(StopAsyncIteration):
        await iterator.__anext__()
    assert registry.count_for_user("alice") == 0


@pytest.mark.anyio
async def test_abandoned_frames_generator_unregisters_the_stream(
    stream, registry
) -> None:
    connection = await stream.open("alice")
    iterator = stream.frames(connection)
    await iterator.__anext__()

    await iterator.aclose()

    assert not registry.is_registered(connection.connection_id)
