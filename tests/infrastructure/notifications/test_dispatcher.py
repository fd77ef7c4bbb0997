"""Tests for storing notifications and pushing them to open streams."""

import json
import logging

import pytest
from anyio import to_thread
from sqlalchemy.exc import OperationalError

from app.domain.entities import (
    NOTIFICATION_NEW_LIKE,
    NOTIFICATION_NEW_LOCATION,
    NOTIFICATION_NEW_REPLY,
    NotificationEvent,
)
from app.infrastructure.notifications import (
    ConnectionRegistry,
    NotificationDispatcher,
    build_compact_payload,
)
from app.infrastructure.repositories import NotificationRepository, UserRepository


def _decode(frame: str) -> dict:
    assert frame.startswith("data: ")
    assert frame.endswith("\n\n")
    return json.loads(frame[len("data: ") : -2])


def _stored(session_factory, user_id: str):
    with session_factory() as session:
        return NotificationRepository(session).list_for_user(user_id, limit=None)


@pytest.fixture
def registry() -> ConnectionRegistry:
    return ConnectionRegistry()


@pytest.fixture
def dispatcher(registry, session_factory) -> NotificationDispatcher:
    return NotificationDispatcher(registry, session_factory)


@pytest.mark.anyio
async def test_actor_notifying_themselves_is_a_no_op(
    dispatcher, registry, session_factory, make_user
) -> None:
    actor = make_user("alice")
    connection = registry.register(actor.id)
    event = NotificationEvent(
        type=NOTIFICATION_NEW_LIKE,
        actor_id=actor.id,
        actor_name="alice",
        recipient_id=actor.id,
        payload={"review": {"id": "r1", "comment": "Great"}},
    )

    result = await dispatcher.deliver(event)

    assert (result.records, result.pushes) == (0, 0)
    assert connection.channel.drain() == []
    assert _stored(session_factory, actor.id) == []


@pytest.mark.anyio
async def test_recipient_event_reaches_every_stream_of_the_recipient(
    dispatcher, registry, session_factory, make_user
) -> None:
    actor = make_user("alice")
    owner = make_user("bob")
    first = registry.register(owner.id)
    second = registry.register(owner.id)
    actor_connection = registry.register(actor.id)
    event = NotificationEvent(
        type=NOTIFICATION_NEW_REPLY,
        actor_id=actor.id,
        actor_name="Alice",
        actor_profile_image_url="http://img/alice.png",
        recipient_id=owner.id,
        payload={
            "review": {"id": "r1", "comment": "Lovely spot"},
            "comment": {"id": "c1", "comment": "I agree, the view is amazing"},
            "location": {"id": "l1", "name": "Doi Suthep", "image_url": "http://img/doi.png"},
        },
    )

    result = await dispatcher.deliver(event)

    assert (result.records, result.pushes) == (1, 2)
    assert actor_connection.channel.drain() == []

    frames = first.channel.drain()
    assert frames == second.channel.drain()
    message = _decode(frames[0])
    assert message["type"] == "notification"
    data = message["data"]
    assert data["type"] == NOTIFICATION_NEW_REPLY
    assert data["actor_name"] == "Alice"
    assert data["actor_profile_image_url"] == "http://img/alice.png"
    assert data["is_read"] is False
    assert data["id"]
    assert data["created_at"]
    assert data["payload"]["comment"]["comment"] == "I agree, the view is amazing"
    assert data["payload"]["commentId"] == "c1"
    assert data["payload"]["locationName"] == "Doi Suthep"

    [stored] = _stored(session_factory, owner.id)
    assert stored.actor_id == actor.id
    assert stored.is_read is False
    assert stored.payload == {
        "locationId": "l1",
        "locationName": "Doi Suthep",
        "locationImageUrl": "http://img/doi.png",
        "commentId": "c1",
        "reviewId": "r1",
        "commentSnippet": "I agree, the view is amazing",
    }


@pytest.mark.anyio
async def test_broadcast_stores_for_everyone_but_the_actor(
    dispatcher, registry, session_factory, make_user
) -> None:
    actor = make_user("alice")
    others = [make_user(name) for name in ("bob", "carol", "dave")]
    actor_connection = registry.register(actor.id)
    bob_first = registry.register(others[0].id)
    bob_second = registry.register(others[0].id)
    event = NotificationEvent(
        type=NOTIFICATION_NEW_LOCATION,
        actor_id=actor.id,
        actor_name="alice",
        payload={"location": {"id": "l1", "name": "Wat Pho", "image_url": None}},
    )

    result = await dispatcher.deliver(event)

    assert (result.records, result.pushes) == (3, 2)
    assert actor_connection.channel.drain() == []
    assert len(bob_first.channel.drain()) == 1
    assert len(bob_second.channel.drain()) == 1
    for user in others:
        [stored] = _stored(session_factory, user.id)
        assert stored.payload == {"locationId": "l1", "locationName": "Wat Pho"}
    assert _stored(session_factory, actor.id) == []


@pytest.mark.anyio
async def test_broadcast_without_other_users_does_nothing(
    dispatcher, registry, make_user
) -> None:
    actor = make_user("alice")
    registry.register(actor.id)
    event = NotificationEvent(
        type=NOTIFICATION_NEW_LOCATION,
        actor_id=actor.id,
        actor_name="alice",
        payload={"location": {"id": "l1", "name": "Wat Pho"}},
    )

    result = await dispatcher.deliver(event)

    assert (result.records, result.pushes) == (0, 0)


@pytest.mark.anyio
async def test_failed_recipient_lookup_abandons_the_broadcast(
    dispatcher, session_factory, make_user, monkeypatch, caplog
) -> None:
    actor = make_user("alice")
    other = make_user("bob")

    def fail(self, user_id):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(UserRepository, "list_ids_except", fail)
    event = NotificationEvent(
        type=NOTIFICATION_NEW_LOCATION,
        actor_id=actor.id,
        actor_name="alice",
        payload={"location": {"id": "l1", "name": "Wat Pho"}},
    )

    with caplog.at_level(logging.ERROR):
        result = await dispatcher.deliver(event)

    assert result.records == 0
    assert _stored(session_factory, other.id) == []
    assert "abandoned" in caplog.text


@pytest.mark.anyio
async def test_failed_write_drops_only_the_broken_stream(
    dispatcher, registry, make_user
) -> None:
    actor = make_user("alice")
    owner = make_user("bob")
    healthy = registry.register(owner.id)
    broken = registry.register(owner.id)
    broken.channel.close()
    event = NotificationEvent(
        type=NOTIFICATION_NEW_LIKE,
        actor_id=actor.id,
        actor_name="alice",
        recipient_id=owner.id,
        payload={"review": {"id": "r1", "comment": "Nice"}},
    )

    result = await dispatcher.deliver(event)

    assert (result.records, result.pushes) == (1, 1)
    assert len(healthy.channel.drain()) == 1
    assert not registry.is_registered(broken.connection_id)
    assert registry.count_for_user(owner.id) == 1


@pytest.mark.anyio
async def test_dispatch_returns_before_delivery_and_join_waits(
    dispatcher, registry, session_factory, make_user
) -> None:
    actor = make_user("alice")
    owner = make_user("bob")
    connection = registry.register(owner.id)
    event = NotificationEvent(
        type=NOTIFICATION_NEW_LIKE,
        actor_id=actor.id,
        actor_name="alice",
        recipient_id=owner.id,
        payload={"reviewId": "r1"},
    )

    dispatcher.dispatch(event)
    assert connection.channel.drain() == []

    await dispatcher.join()

    assert len(connection.channel.drain()) == 1
    assert len(_stored(session_factory, owner.id)) == 1


@pytest.mark.anyio
async def test_dispatch_from_worker_thread(
    dispatcher, registry, session_factory, make_user
) -> None:
    actor = make_user("alice")
    owner = make_user("bob")
    connection = registry.register(owner.id)
    event = NotificationEvent(
        type=NOTIFICATION_NEW_LIKE,
        actor_id=actor.id,
        actor_name="alice",
        recipient_id=owner.id,
        payload={"reviewId": "r1"},
    )

    await to_thread.run_sync(dispatcher.dispatch, event)
    await dispatcher.join()

    assert len(connection.channel.drain()) == 1
    assert len(_stored(session_factory, owner.id)) == 1


def test_dispatch_without_event_loop_is_dropped_with_a_warning(
    dispatcher, caplog
) -> None:
    event = NotificationEvent(
        type=NOTIFICATION_NEW_LIKE,
        actor_id="alice",
        actor_name="alice",
        recipient_id="bob",
    )

    with caplog.at_level(logging.WARNING):
        dispatcher.dispatch(event)

    assert "dropped" in caplog.text


def test_compact_payload_truncates_long_comments() -> None:
    text = "สวัสดีครับ " * 10 + "😀" * 20

    compact = build_compact_payload({"comment": text, "reviewId": "r9"}, snippet_length=50)

    assert compact["reviewId"] == "r9"
    assert len(compact["commentSnippet"]) <= 50
    assert "  " not in compact["commentSnippet"]


def test_compact_payload_prefers_comment_over_review_text() -> None:
    compact = build_compact_payload(
        {
            "review": {"id": "r1", "comment": "Review body"},
            "comment": {"id": "c1", "comment": "Reply body"},
            "product": {"id": "p1", "name": "Silk", "imageUrl": "http://img/silk.png"},
        }
    )

    assert compact == {
        "productId": "p1",
        "productName": "Silk",
        "productImageUrl": "http://img/silk.png",
        "commentId": "c1",
        "reviewId": "r1",
        "commentSnippet": "Reply body",
    }


def test_compact_payload_uses_review_text_when_no_comment() -> None:
    compact = build_compact_payload({"review": {"id": "r1", "comment": "  Great\n food  "}})

    assert compact == {"reviewId": "r1", "commentSnippet": "Great food"}


def test_unknown_event_type_is_rejected() -> None:
    with pytest.raises(ValueError):
        NotificationEvent(type="mention", actor_id="alice", actor_name="alice")
