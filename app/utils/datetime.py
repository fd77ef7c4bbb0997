"""Clock helpers bound to the guide's local timezone.

Timestamps are stored naive in the database (SQLite drops offsets) and read
back as aware values in the configured ``APP_TIMEZONE``.
"""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from functools import lru_cache

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.config import get_settings

FALLBACK_TIMEZONE = "Asia/Bangkok"


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Resolve ``APP_TIMEZONE``.

    IANA names (``Asia/Bangkok``) and plain offsets (``+07:00``, ``UTC+0700``)
    are accepted; anything else falls back to Bangkok time.
    """

    name = (get_settings().app_timezone or "").strip() or FALLBACK_TIMEZONE
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        pass

    offset = name.upper().removeprefix("UTC").removeprefix("GMT")
    try:
        return datetime.strptime(offset, "%z").tzinfo or timezone.utc
    except ValueError:
        return ZoneInfo(FALLBACK_TIMEZONE)


def now_in_app_timezone() -> datetime:
    return datetime.now(tz=get_app_timezone())


def now_in_app_naive_datetime() -> datetime:
    """Local wall-clock time as stored in ``DATETIME`` columns."""

    return now_in_app_timezone().replace(tzinfo=None)


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Attach or convert ``value`` to the app timezone; naive values are local."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=get_app_timezone())
    return value.astimezone(get_app_timezone())


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    """Inverse of :func:`ensure_app_timezone`, ready to be written to a column."""

    if value is None:
        return None
    return ensure_app_timezone(value).replace(tzinfo=None)
