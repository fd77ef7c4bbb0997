"""Realtime notification delivery over server-sent events."""

from .channel import (
    ChannelClosedError,
    ChannelError,
    ChannelOverflowError,
    ChannelStalledError,
    EventChannel,
)
from .dispatcher import DispatchResult, NotificationDispatcher, build_compact_payload
from .frames import (
    INITIAL_CONNECTION_FRAME,
    KEEP_ALIVE_FRAME,
    encode_event,
    serialize_notification,
)
from .heartbeat import NotificationHeartbeat
from .registry import Connection, ConnectionRegistry
from .stream import NotificationStream

__all__ = [
    "ChannelClosedError",
    "ChannelError",
    "ChannelOverflowError",
    "ChannelStalledError",
    "Connection",
    "ConnectionRegistry",
    "DispatchResult",
    "EventChannel",
    "INITIAL_CONNECTION_FRAME",
    "KEEP_ALIVE_FRAME",
    "NotificationDispatcher",
    "NotificationHeartbeat",
    "NotificationStream",
    "build_compact_payload",
    "encode_event",
    "serialize_notification",
]
