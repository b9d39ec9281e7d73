"""Conversions between UUIDs and database column values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from nacoskit.rfcuuid import NIL, SIZE, UUID, UUIDError, from_bytes, from_string


def to_sql_value(u: UUID) -> str:
    """Return the value stored in a database column for ``u``."""
    return str(u)


def scan(src: Any) -> UUID:
    """Build a UUID from a database value.

    Sixteen bytes are taken as raw bytes; other byte strings and text are
    parsed as UUID text.
    """
    if isinstance(src, (bytes, bytearray, memoryview)):
        data = bytes(src)
        if len(data) == SIZE:
            return from_bytes(data)
        try:
            text = data.decode("ascii")
        except UnicodeDecodeError as exc:
            raise UUIDError(f"uuid: incorrect UUID format: {data!r}") from exc
        return from_string(text)
    if isinstance(src, str):
        return from_string(src)
    raise UUIDError(f"uuid: cannot convert {type(src).__name__} to UUID")


@dataclass(frozen=True)
class NullUUID:
    """A UUID column value that may be NULL."""

    uuid: UUID = NIL
    valid: bool = False

    def value(self) -> str | None:
        """Return the database value, or None when NULL."""
        if not self.valid:
            return None
        return to_sql_value(self.uuid)

    @classmethod
    def scan(cls, src: Any) -> NullUUID:
        """Build a NullUUID from a database value, treating None as NULL."""
        if src is None:
            return cls(NIL, False)
        return cls(scan(src), True)