"""Content digests."""

from __future__ import annotations

import hashlib


def md5(content: str) -> str:
    """Return the lower-case hex MD5 digest of ``content`` encoded as UTF-8."""
    return hashlib.md5(content.encode("utf-8")).hexdigest()