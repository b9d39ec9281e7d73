"""Generation of RFC 4122 UUIDs (versions 1 to 5)."""

from __future__ import annotations

import hashlib
import os
import struct
import threading
import time
from typing import Callable

import psutil

from nacoskit.rfcuuid import UUID, UUIDError, Domain, Variant, Version

# 100-nanosecond intervals between the UUID epoch (1582-10-15) and the Unix epoch.
EPOCH_START = 122192928000000000

_POSIX_UID = (os.getuid() if hasattr(os, "getuid") else -1) & 0xFFFFFFFF
_POSIX_GID = (os.getgid() if hasattr(os, "getgid") else -1) & 0xFFFFFFFF


def default_hw_addr() -> bytes:
    """Return the first hardware address of at least six bytes found on the host."""
    for addresses in psutil.net_if_addrs().values():
        for address in addresses:
            if address.family != psutil.AF_LINK or not address.address:
                continue
            parts = address.address.replace("-", ":").split(":")
            try:
                raw = bytes(int(part, 16) for part in parts)
            except ValueError:
                continue
            if len(raw) >= 6 and any(raw):
                return raw
    raise UUIDError("uuid: no HW address found")


class RFC4122Generator:
    """Thread-safe UUID generator.

    ``epoch_func`` returns the current time in nanoseconds since the Unix
    epoch, ``hw_addr_func`` returns the hardware address or raises, and
    ``rand`` takes a byte count and returns up to that many random bytes.
    """

    def __init__(
        self,
        epoch_func: Callable[[], int] = time.time_ns,
        hw_addr_func: Callable[[], bytes] = default_hw_addr,
        rand: Callable[[int], bytes] = os.urandom,
    ) -> None:
        self._epoch_func = epoch_func
        self._hw_addr_func = hw_addr_func
        self._rand = rand
        self._lock = threading.Lock()
        self._last_time = 0
        self._clock_sequence = 0
        self._clock_sequence_ready = False
        self._hardware_addr = bytes(6)
        self._hardware_addr_ready = False

    def new_v1(self) -> UUID:
        """Return a UUID built from the current time and the hardware address."""
        now, clock_seq = self._next_clock_sequence()
        head = struct.pack(
            ">IHHH",
            now & 0xFFFFFFFF,
            (now >> 32) & 0xFFFF,
            (now >> 48) & 0xFFFF,
            clock_seq,
        )
        hardware_addr = self._get_hardware_addr()
        return UUID(head + hardware_addr).with_version(Version.V1).with_variant(
            Variant.RFC4122
        )

    def new_v2(self, domain: int) -> UUID:
        """Return a DCE security UUID for the POSIX UID or GID."""
        data = bytearray(self.new_v1().raw)
        if domain == Domain.PERSON:
            data[0:4] = struct.pack(">I", _POSIX_UID)
        elif domain == Domain.GROUP:
            data[0:4] = struct.pack(">I", _POSIX_GID)
        data[9] = int(domain) & 0xFF
        return UUID(bytes(data)).with_version(Version.V2).with_variant(Variant.RFC4122)

    def new_v3(self, namespace: UUID, name: str) -> UUID:
        """Return a UUID from the MD5 hash of a namespace and a name."""
        return _from_hash(hashlib.md5(), namespace, name).with_version(
            Version.V3
        ).with_variant(Variant.RFC4122)

    def new_v4(self) -> UUID:
        """Return a randomly generated UUID."""
        return UUID(self._read_full(16)).with_version(Version.V4).with_variant(
            Variant.RFC4122
        )

    def new_v5(self, namespace: UUID, name: str) -> UUID:
        """Return a UUID from the SHA-1 hash of a namespace and a name."""
        return _from_hash(hashlib.sha1(), namespace, name).with_version(
            Version.V5
        ).with_variant(Variant.RFC4122)

    def _read_full(self, count: int) -> bytes:
        collected = bytearray()
        while len(collected) < count:
            piece = self._rand(count - len(collected))
            if not piece:
                raise UUIDError("uuid: unexpected EOF while reading random bytes")
            collected += piece
        return bytes(collected[:count])

    def _epoch(self) -> int:
        return EPOCH_START + self._epoch_func() // 100

    def _next_clock_sequence(self) -> tuple[int, int]:
        with self._lock:
            if not self._clock_sequence_ready:
                self._clock_sequence_ready = True
                self._clock_sequence = int.from_bytes(self._read_full(2), "big")
            now = self._epoch()
            # The clock has not moved since the last UUID: bump the sequence.
            if now <= self._last_time:
                self._clock_sequence = (self._clock_sequence + 1) & 0xFFFF
            self._last_time = now
            return now, self._clock_sequence

    def _get_hardware_addr(self) -> bytes:
        with self._lock:
            if not self._hardware_addr_ready:
                self._hardware_addr_ready = True
                try:
                    address = bytes(self._hw_addr_func())
                except Exception:
                    random_addr = bytearray(self._read_full(6))
                    # Multicast bit marks a randomly chosen node id.
                    random_addr[0] |= 0x01
                    self._hardware_addr = bytes(random_addr)
                else:
                    self._hardware_addr = (address + bytes(6))[:6]
            return self._hardware_addr


def _from_hash(digest, namespace: UUID, name: str) -> UUID:
    digest.update(namespace.raw)
    digest.update(name.encode("utf-8"))
    return UUID(digest.digest()[:16])


_GLOBAL = RFC4122Generator()


def new_v1() -> UUID:
    """Return a time and hardware-address based UUID."""
    return _GLOBAL.new_v1()


def new_v2(domain: int) -> UUID:
    """Return a DCE security UUID."""
    return _GLOBAL.new_v2(domain)


def new_v3(namespace: UUID, name: str) -> UUID:
    """Return an MD5 name-based UUID."""
    return _GLOBAL.new_v3(namespace, name)


def new_v4() -> UUID:
    """Return a random UUID."""
    return _GLOBAL.new_v4()


def new_v5(namespace: UUID, name: str) -> UUID:
    """Return a SHA-1 name-based UUID."""
    return _GLOBAL.new_v5(namespace, name)