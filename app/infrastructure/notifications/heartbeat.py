"""Periodic keep-alive writes that weed out dead event streams."""

from __future__ import annotations

import asyncio
import contextlib
import logging

from .frames import KEEP_ALIVE_FRAME
from .registry import Connection, ConnectionRegistry

logger = logging.getLogger(__name__)


class NotificationHeartbeat:
    """Write a keep-alive comment to every open stream every ``interval`` seconds.

    A stream that read nothing since the previous keep-alive fails the next and
    is unregistered by the registry, so a stalled client is dropped within two
    intervals.
    """

    def __init__(self, registry: ConnectionRegistry, *, interval: float = 15.0) -> None:
        self._registry = registry
        self._interval = interval
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def beat(self) -> None:
        self._registry.for_each(_send_keep_alive)

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.info("Notification heartbeat started (every %ss)", self._interval)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            self.beat()


def _send_keep_alive(connection: Connection) -> None:
    connection.channel.ping(KEEP_ALIVE_FRAME)


__all__ = ["NotificationHeartbeat"]
