"""Persist notifications and push them to open event streams."""

from __future__ import annotations

import asyncio
import copy
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import uuid4

from anyio import from_thread, to_thread
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import Notification, NotificationEvent
from app.infrastructure.repositories import NotificationRepository, UserRepository
from app.utils import now_in_app_timezone, truncate_snippet

from .frames import EVENT_NOTIFICATION, encode_event
from .registry import Connection, ConnectionRegistry

logger = logging.getLogger(__name__)

_ENTITY_KEYS = ("location", "product")
_PASSTHROUGH_KEYS = ("locationId", "productId", "reviewId", "commentId")


@dataclass(frozen=True)
class DispatchResult:
    """How many notifications were stored and pushed for one event."""

    records: int
    pushes: int


class NotificationDispatcher:
    """Store an event for its recipients and push it to their open streams.

    :meth:`dispatch` is fire-and-forget: it schedules :meth:`deliver` on the
    event loop and returns immediately, also when called from the worker
    threads that run synchronous route handlers. Storage and delivery errors
    are logged and never reach the caller.
    """

    def __init__(
        self,
        registry: ConnectionRegistry,
        session_factory: Callable[[], Session],
        *,
        snippet_length: int = 50,
    ) -> None:
        self._registry = registry
        self._session_factory = session_factory
        self._snippet_length = snippet_length
        self._pending: set[asyncio.Task[None]] = set()

    def dispatch(self, event: NotificationEvent) -> None:
        """Schedule delivery of ``event`` without waiting for it."""

        try:
            asyncio.get_running_loop()
        except RuntimeError:
            try:
                from_thread.run_sync(self._schedule, event)
            except RuntimeError:
                logger.warning(
                    "No event loop available; %s notification from %s dropped",
                    event.type,
                    event.actor_id,
                )
        else:
            self._schedule(event)

    async def join(self) -> None:
        """Wait until every scheduled delivery has finished."""

        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def deliver(self, event: NotificationEvent) -> DispatchResult:
        """Store ``event`` for its recipients, then push it to their streams."""

        if event.recipient_id is not None and event.recipient_id == event.actor_id:
            return DispatchResult(records=0, pushes=0)

        compact = build_compact_payload(event.payload, snippet_length=self._snippet_length)
        created_at = now_in_app_timezone()
        records = await self._persist(event, compact, created_at)
        pushes = self._push(event, compact, created_at)
        logger.debug(
            "%s from %s: %d stored, %d pushed", event.type, event.actor_id, records, pushes
        )
        return DispatchResult(records=records, pushes=pushes)

    def _schedule(self, event: NotificationEvent) -> None:
        task = asyncio.get_running_loop().create_task(self._run(event))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _run(self, event: NotificationEvent) -> None:
        try:
            await self.deliver(event)
        except Exception:
            logger.exception(
                "Delivery of %s notification from %s failed", event.type, event.actor_id
            )

    async def _persist(
        self, event: NotificationEvent, compact: dict[str, Any], created_at: datetime
    ) -> int:
        try:
            return await to_thread.run_sync(self._store, event, compact, created_at)
        except SQLAlchemyError:
            if event.is_broadcast:
                logger.exception(
                    "Broadcast of %s from %s abandoned; no notifications stored",
                    event.type,
                    event.actor_id,
                )
            else:
                logger.exception(
                    "Could not store %s notification for %s",
                    event.type,
                    event.recipient_id,
                )
            return 0

    def _store(
        self, event: NotificationEvent, compact: dict[str, Any], created_at: datetime
    ) -> int:
        with self._session_factory() as session:
            if event.is_broadcast:
                recipients = UserRepository(session).list_ids_except(event.actor_id)
            else:
                recipients = [event.recipient_id]
            notifications = [
                Notification(
                    id=None,
                    user_id=recipient_id,
                    actor_id=event.actor_id,
                    actor_name=event.actor_name,
                    actor_profile_image_url=event.actor_profile_image_url,
                    type=event.type,
                    payload=dict(compact),
                    created_at=created_at,
                )
                for recipient_id in recipients
            ]
            return NotificationRepository(session).create_many(notifications)

    def _push(
        self, event: NotificationEvent, compact: dict[str, Any], created_at: datetime
    ) -> int:
        payload = {**compact, **copy.deepcopy(event.payload)}
        frame = encode_event(
            {
                "type": EVENT_NOTIFICATION,
                "data": {
                    "id": str(uuid4()),
                    "user_id": event.recipient_id,
                    "actor_id": event.actor_id,
                    "actor_name": event.actor_name,
                    "actor_profile_image_url": event.actor_profile_image_url,
                    "type": event.type,
                    "payload": payload,
                    "is_read": False,
                    "created_at": created_at,
                },
            }
        )
        delivered = 0

        def send(connection: Connection) -> None:
            nonlocal delivered
            if not _should_receive(event, connection.user_id):
                return
            connection.channel.write(frame)
            delivered += 1

        self._registry.for_each(send)
        return delivered


def _should_receive(event: NotificationEvent, user_id: str) -> bool:
    if user_id == event.actor_id:
        return False
    return event.is_broadcast or user_id == event.recipient_id


def build_compact_payload(
    payload: Mapping[str, Any], *, snippet_length: int = 50
) -> dict[str, Any]:
    """Keep only what is needed to describe ``payload`` in a notification list.

    Entity snapshots are reduced to their id, name and image; free text from a
    comment or review becomes ``commentSnippet`` capped at ``snippet_length``
    characters.
    """

    compact: dict[str, Any] = {}
    for key in _ENTITY_KEYS:
        entity = payload.get(key)
        if isinstance(entity, Mapping):
            compact[f"{key}Id"] = entity.get("id")
            compact[f"{key}Name"] = entity.get("name")
            compact[f"{key}ImageUrl"] = entity.get("image_url") or entity.get("imageUrl")

    text: Any = None
    comment = payload.get("comment")
    if isinstance(comment, Mapping):
        compact["commentId"] = comment.get("id")
        text = comment.get("comment") or comment.get("text")
    elif isinstance(comment, str):
        text = comment

    review = payload.get("review")
    if isinstance(review, Mapping):
        compact["reviewId"] = review.get("id")
        if text is None:
            text = review.get("comment")

    for key in _PASSTHROUGH_KEYS:
        if compact.get(key) is None and payload.get(key) is not None:
            compact[key] = payload[key]

    if text is None:
        text = payload.get("text")
    if text:
        compact["commentSnippet"] = truncate_snippet(text, snippet_length)

    return {key: value for key, value in compact.items() if value is not None}


__all__ = ["DispatchResult", "NotificationDispatcher", "build_compact_payload"]
