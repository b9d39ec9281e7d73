"""Helpers for showing configuration content in logs."""

from __future__ import annotations

SHOW_CONTENT_SIZE = 100


def truncate_content(content: str) -> str:
    """Return at most the first SHOW_CONTENT_SIZE bytes of ``content``.

    A multi-byte character cut by the limit is dropped.
    """
    if not content:
        return ""
    encoded = content.encode("utf-8")
    if len(encoded) <= SHOW_CONTENT_SIZE:
        return content
    return encoded[:SHOW_CONTENT_SIZE].decode("utf-8", errors="ignore")