"""Small text helpers shared by notifications and serializers."""

from __future__ import annotations

import regex

from app.config import get_settings

_GRAPHEME = regex.compile(r"\X")


def truncate_snippet(text: str | None, limit: int) -> str | None:
    """Collapse whitespace in ``text`` and cut it to at most ``limit`` characters.

    Length is counted in code points, but the cut only falls between grapheme
    clusters, so Thai vowel and tone marks stay attached to their consonant.
    """

    if text is None:
        return None
    collapsed = " ".join(str(text).split())
    if len(collapsed) <= limit:
        return collapsed

    kept: list[str] = []
    size = 0
    for grapheme in _GRAPHEME.findall(collapsed):
        size += len(grapheme)
        if size > limit:
            break
        kept.append(grapheme)
    return "".join(kept).rstrip()


def absolute_url(path: str | None) -> str | None:
    """Prefix relative upload paths with the configured public base URL."""

    if not path or path.startswith(("http://", "https://")):
        return path
    base = get_settings().public_base_url.rstrip("/")
    if not path.startswith("/"):
        path = f"/{path}"
    return f"{base}{path}"


__all__ = ["absolute_url", "truncate_snippet"]
