"""Registry of the event streams currently open in this process."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

from app.utils import now_in_app_timezone

from .channel import EventChannel

logger = logging.getLogger(__name__)


@dataclass
class Connection:
    """An open event stream owned by one user."""

    connection_id: str
    user_id: str
    channel: EventChannel
    opened_at: datetime = field(default_factory=now_in_app_timezone)


class ConnectionRegistry:
    """Track open event streams and deliver frames to them.

    Every mutation is a single synchronous step on the event loop, so callers
    never observe a half-updated registry. A connection whose channel fails a
    write is dropped on the spot; failures never reach the caller.
    """

    def __init__(self, *, max_pending_frames: int = 100) -> None:
        self._connections: dict[str, Connection] = {}
        self._max_pending_frames = max_pending_frames

    def register(self, user_id: str) -> Connection:
        """Open a new channel for ``user_id`` and start tracking it."""

        connection_id = uuid4().hex
        while connection_id in self._connections:  # pragma: no cover - uuid clash
            connection_id = uuid4().hex
        connection = Connection(
            connection_id=connection_id,
            user_id=user_id,
            channel=EventChannel(self._max_pending_frames),
        )
        self._connections[connection_id] = connection
        logger.info(
            "Event stream %s opened for user %s (%d open)",
            connection_id,
            user_id,
            len(self._connections),
        )
        return connection

    def unregister(self, connection_id: str) -> bool:
        """Stop tracking ``connection_id``; return ``False`` if it was already gone."""

        connection = self._connections.pop(connection_id, None)
        if connection is None:
            return False
        connection.channel.close()
        logger.info(
            "Event stream %s closed for user %s (%d open)",
            connection_id,
            connection.user_id,
            len(self._connections),
        )
        return True

    def is_registered(self, connection_id: str) -> bool:
        return connection_id in self._connections

    def count_for_user(self, user_id: str) -> int:
        return sum(1 for c in self._connections.values() if c.user_id == user_id)

    def for_each(self, callback: Callable[[Connection], None]) -> None:
        """Invoke ``callback`` for every open connection.

        Iterates over a snapshot. Connections removed while iterating are
        skipped, and a connection whose callback raises is unregistered
        without interrupting the others.
        """

        for connection in list(self._connections.values()):
            if connection.connection_id not in self._connections:
                continue
            try:
                callback(connection)
            except Exception as exc:
                logger.warning(
                    "Dropping event stream %s of user %s: %s",
                    connection.connection_id,
                    connection.user_id,
                    exc,
                )
                self.unregister(connection.connection_id)

    def push(self, connection_id: str, chunk: str) -> bool:
        """Write ``chunk`` to a single connection; return whether it was written."""

        connection = self._connections.get(connection_id)
        if connection is None:
            return False
        try:
            connection.channel.write(chunk)
        except Exception as exc:
            logger.warning(
                "Dropping event stream %s of user %s: %s",
                connection_id,
                connection.user_id,
                exc,
            )
            self.unregister(connection_id)
            return False
        return True

    def __len__(self) -> int:
        return len(self._connections)


__all__ = ["Connection", "ConnectionRegistry"]
