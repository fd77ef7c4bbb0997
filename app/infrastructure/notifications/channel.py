"""Output side of a server-sent event stream."""

from __future__ import annotations

import asyncio


class ChannelError(Exception):
    """Raised when a frame cannot be written to an event channel."""


class ChannelClosedError(ChannelError):
    """The channel was closed and accepts no more frames."""


class ChannelOverflowError(ChannelError):
    """The client stopped draining the channel and its buffer is full."""


class ChannelStalledError(ChannelError):
    """The client has read nothing since the previous keep-alive."""


class EventChannel:
    """Bounded buffer between notification producers and one HTTP response.

    Producers call :meth:`write` synchronously from the event loop; the
    streaming response consumes frames with ``async for``. Iteration stops once
    the channel is closed.
    """

    def __init__(self, max_pending: int = 100) -> None:
        self._queue: asyncio.Queue[str | None] = asyncio.Queue(maxsize=max_pending + 1)
        self._max_pending = max_pending
        self._closed = False
        self._keep_alive_pending = False

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, chunk: str) -> None:
        """Queue ``chunk`` for the client or raise :class:`ChannelError`."""

        if self._closed:
            raise ChannelClosedError("event channel is closed")
        if self._queue.qsize() >= self._max_pending:
            raise ChannelOverflowError(
                f"event channel buffer full ({self._max_pending} frames pending)"
            )
        self._queue.put_nowait(chunk)

    def ping(self, chunk: str) -> None:
        """Queue a keep-alive ``chunk``.

        Raises :class:`ChannelStalledError` when the reader took nothing from
        the channel since the previous ping, so a client that stopped
        consuming is detected within two pings.
        """

        if self._keep_alive_pending and not self._closed:
            raise ChannelStalledError("previous keep-alive was never read")
        self.write(chunk)
        self._keep_alive_pending = True

    def close(self) -> None:
        """Close the channel and wake up the reader. Safe to call repeatedly."""

        if self._closed:
            return
        self._closed = True
        # One slot is reserved for the end-of-stream marker.
        self._queue.put_nowait(None)

    def drain(self) -> list[str]:
        """Return every frame queued so far without waiting."""

        self._keep_alive_pending = False
        frames: list[str] = []
        while not self._queue.empty():
            chunk = self._queue.get_nowait()
            if chunk is None:
                self._queue.put_nowait(None)
                break
            frames.append(chunk)
        return frames

    def __aiter__(self) -> "EventChannel":
        return self

    async def __anext__(self) -> str:
        chunk = await self._queue.get()
        if chunk is None:
            self._queue.put_nowait(None)
            raise StopAsyncIteration
        self._keep_alive_pending = False
        return chunk


__all__ = [
    "ChannelClosedError",
    "ChannelError",
    "ChannelOverflowError",
    "ChannelStalledError",
    "EventChannel",
]
