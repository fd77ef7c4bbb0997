"""Opening event streams and replaying recent notifications."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable, Sequence

from anyio import to_thread
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import Notification
from app.infrastructure.repositories import NotificationRepository

from .frames import (
    INITIAL_CONNECTION_FRAME,
    connected_message,
    encode_event,
    historic_message,
)
from .registry import Connection, ConnectionRegistry

logger = logging.getLogger(__name__)


class NotificationStream:
    """Open, feed and close the event stream of one client."""

    def __init__(
        self,
        registry: ConnectionRegistry,
        session_factory: Callable[[], Session],
        *,
        history_limit: int = 20,
    ) -> None:
        self._registry = registry
        self._session_factory = session_factory
        self._history_limit = history_limit

    async def open(self, user_id: str) -> Connection:
        """Register a stream for ``user_id`` and queue its bootstrap frames.

        The ``connected`` frame is always first. The ``historic_notifications``
        frame follows only when the user has notifications and the stream is
        still open after loading them.
        """

        connection = self._registry.register(user_id)
        self._registry.push(
            connection.connection_id, encode_event(connected_message(connection.connection_id))
        )

        try:
            history = await to_thread.run_sync(self._load_history, user_id)
        except SQLAlchemyError:
            logger.exception("Could not load past notifications for user %s", user_id)
            return connection

        if history and self._registry.is_registered(connection.connection_id):
            self._registry.push(connection.connection_id, encode_event(historic_message(history)))
        return connection

    def close(self, connection: Connection) -> None:
        self._registry.unregister(connection.connection_id)

    async def frames(self, connection: Connection) -> AsyncIterator[str]:
        """Yield what the client should receive, unregistering when it goes away."""

        try:
            yield INITIAL_CONNECTION_FRAME
            async for chunk in connection.channel:
                yield chunk
        finally:
            self.close(connection)

    def _load_history(self, user_id: str) -> Sequence[Notification]:
        with self._session_factory() as session:
            return NotificationRepository(session).list_for_user(
                user_id, limit=self._history_limit
            )


__all__ = ["NotificationStream"]
