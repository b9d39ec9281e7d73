"""UUID values as described by RFC 4122 and DCE 1.1, with text and binary codecs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable

SIZE = 16

_URN_PREFIX = "urn:uuid:"
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class UUIDError(ValueError):
    """Raised when a UUID cannot be built from the given input."""


class Version(IntEnum):
    """UUID algorithm versions."""

    V1 = 1
    V2 = 2
    V3 = 3
    V4 = 4
    V5 = 5


class Variant(IntEnum):
    """UUID layout variants."""

    NCS = 0
    RFC4122 = 1
    MICROSOFT = 2
    FUTURE = 3


class Domain(IntEnum):
    """DCE security domains used by version 2 UUIDs."""

    PERSON = 0
    GROUP = 1
    ORG = 2


@dataclass(frozen=True)
class UUID:
    """An immutable 16-byte universally unique identifier."""

    raw: bytes = bytes(SIZE)

    def __post_init__(self) -> None:
        data = bytes(self.raw)
        if len(data) != SIZE:
            raise UUIDError(
                f"uuid: UUID must be exactly {SIZE} bytes long, got {len(data)} bytes"
            )
        object.__setattr__(self, "raw", data)

    def version(self) -> int:
        """Return the algorithm version stored in the UUID."""
        return self.raw[6] >> 4

    def variant(self) -> Variant:
        """Return the layout variant stored in the UUID."""
        octet = self.raw[8]
        if octet >> 7 == 0x00:
            return Variant.NCS
        if octet >> 6 == 0x02:
            return Variant.RFC4122
        if octet >> 5 == 0x06:
            return Variant.MICROSOFT
        return Variant.FUTURE

    def with_version(self, version: int) -> UUID:
        """Return a copy with the version bits set to ``version``."""
        data = bytearray(self.raw)
        data[6] = (data[6] & 0x0F) | ((int(version) << 4) & 0xFF)
        return UUID(bytes(data))

    def with_variant(self, variant: int) -> UUID:
        """Return a copy with the variant bits set to ``variant``."""
        data = bytearray(self.raw)
        octet = data[8]
        if variant == Variant.NCS:
            octet = octet & (0xFF >> 1)
        elif variant == Variant.RFC4122:
            octet = (octet & (0xFF >> 2)) | (0x02 << 6)
        elif variant == Variant.MICROSOFT:
            octet = (octet & (0xFF >> 3)) | (0x06 << 5)
        else:
            octet = (octet & (0xFF >> 3)) | (0x07 << 5)
        data[8] = octet & 0xFF
        return UUID(bytes(data))

    def to_bytes(self) -> bytes:
        """Return the 16 raw bytes."""
        return self.raw

    def to_text(self) -> bytes:
        """Return the canonical text form encoded as ASCII bytes."""
        return str(self).encode("ascii")

    def __bytes__(self) -> bytes:
        return self.raw

    def __str__(self) -> str:
        h = self.raw.hex()
        return f"{h[0:8]}-{h[8:12]}-{h[12:16]}-{h[16:20]}-{h[20:32]}"


def _decode_hex(text: str, original: str) -> bytes:
    if len(text) % 2 or not set(text) <= _HEX_DIGITS:
        raise UUIDError(f"uuid: invalid hex in UUID {original}")
    return bytes.fromhex(text)


def _decode_canonical(text: str, original: str) -> bytes:
    if any(text[i] != "-" for i in (8, 13, 18, 23)):
        raise UUIDError(f"uuid: incorrect UUID format {original}")
    groups = (text[0:8], text[9:13], text[14:18], text[19:23], text[24:36])
    return _decode_hex("".join(groups), original)


def _decode_plain(text: str, original: str) -> bytes:
    if len(text) == 32:
        return _decode_hex(text, original)
    if len(text) == 36:
        return _decode_canonical(text, original)
    raise UUIDError(f"uuid: incorrect UUID length: {original}")


def _parse_text(text: str) -> bytes:
    length = len(text)
    if length == 32:
        return _decode_hex(text, text)
    if length == 36:
        return _decode_canonical(text, text)
    if length == 38:
        if text[0] != "{" or text[-1] != "}":
            raise UUIDError(f"uuid: incorrect UUID format {text}")
        return _decode_plain(text[1:-1], text)
    if length in (41, 45):
        if text[:9] != _URN_PREFIX:
            raise UUIDError(f"uuid: incorrect UUID format: {text}")
        return _decode_plain(text[9:], text)
    raise UUIDError(f"uuid: incorrect UUID length: {text}")


def from_bytes(data: bytes) -> UUID:
    """Build a UUID from exactly 16 raw bytes."""
    return UUID(bytes(data))


def from_bytes_or_nil(data: bytes) -> UUID:
    """Like :func:`from_bytes`, but return :data:`NIL` on bad input."""
    try:
        return from_bytes(data)
    except UUIDError:
        return NIL


def from_string(text: str) -> UUID:
    """Parse canonical, hash-like, braced or URN text into a UUID."""
    return UUID(_parse_text(text))


def from_string_or_nil(text: str) -> UUID:
    """Like :func:`from_string`, but return :data:`NIL` on bad input."""
    try:
        return from_string(text)
    except UUIDError:
        return NIL


def equal(u1: UUID, u2: UUID) -> bool:
    """Return whether two UUIDs hold the same bytes."""
    return u1.raw == u2.raw


def must(factory: Callable[[], UUID]) -> UUID:
    """Call ``factory`` and turn any failure into a RuntimeError."""
    try:
        return factory()
    except Exception as exc:
        raise RuntimeError(str(exc)) from exc


NIL = UUID()

NAMESPACE_DNS = must(lambda: from_string("6ba7b810-9dad-11d1-80b4-00c04fd430c8"))
NAMESPACE_URL = must(lambda: from_string("6ba7b811-9dad-11d1-80b4-00c04fd430c8"))
NAMESPACE_OID = must(lambda: from_string("6ba7b812-9dad-11d1-80b4-00c04fd430c8"))
NAMESPACE_X500 = must(lambda: from_string("6ba7b814-9dad-11d1-80b4-00c04fd430c8"))