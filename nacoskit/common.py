"""Small shared helpers: JSON, cache keys, local address and request maps."""

from __future__ import annotations

import dataclasses
import ipaddress
import json
import logging
import re
import socket
import time
from collections.abc import Mapping
from datetime import timedelta
from typing import Any
from urllib.parse import urlencode

import psutil

from nacoskit.model_service import Service

_log = logging.getLogger(__name__)

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_DECIMAL = re.compile(r"[+-]?[0-9]+")
_HTML_ESCAPES = (
    ("<", "\\u003c"),
    (">", "\\u003e"),
    ("&", "\\u0026"),
    ("\u2028", "\\u2028"),
    ("\u2029", "\\u2029"),
)

_local_ip_cache: dict[str, str] = {}


def current_millis() -> int:
    """Return the current time in milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


def json_to_service(result: str) -> Service | None:
    """Decode a service from JSON text, or return None if it cannot be decoded."""
    try:
        data = json.loads(result)
        service = Service() if data is None else Service.from_dict(data)
    except (ValueError, TypeError) as exc:
        _log.error("failed to unmarshal json string:%s err:%s", result, exc)
        return None
    if not service.hosts:
        _log.warning("instance list is empty,json string:%s", result)
    return service


def _normalise(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return int(value)
    if isinstance(value, Mapping):
        return {key: _normalise(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_normalise(item) for item in value]
    return value


def to_json_string(obj: Any) -> str:
    """Return compact JSON for ``obj``, or an empty string if it cannot be encoded.

    Objects with a ``to_dict`` method are encoded through it; mapping keys
    are sorted.
    """
    sort_keys = isinstance(obj, Mapping)
    if hasattr(obj, "to_dict"):
        obj = obj.to_dict()
    elif dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        obj = dataclasses.asdict(obj)
    try:
        text = json.dumps(
            _normalise(obj),
            separators=(",", ":"),
            ensure_ascii=False,
            sort_keys=sort_keys,
            allow_nan=False,
        )
    except (TypeError, ValueError):
        return ""
    for char, escaped in _HTML_ESCAPES:
        text = text.replace(char, escaped)
    return text


def local_ip() -> str:
    """Return an IPv4 address of an up, non-loopback interface, or "" if none.

    A found address is remembered for later calls.
    """
    cached = _local_ip_cache.get("ip", "")
    if cached:
        return cached
    try:
        interfaces = psutil.net_if_addrs()
        stats = psutil.net_if_stats()
    except (OSError, psutil.Error) as exc:
        _log.error("get Interfaces failed,err:%s", exc)
        return ""
    found = ""
    for name, addresses in interfaces.items():
        state = stats.get(name)
        if state is None or not state.isup:
            continue
        if "loopback" in str(getattr(state, "flags", "")).split(","):
            continue
        for address in addresses:
            if address.family != socket.AF_INET:
                continue
            try:
                ip = ipaddress.IPv4Address(address.address)
            except ValueError:
                continue
            if not ip.is_loopback:
                found = str(ip)
                break
    if found:
        _local_ip_cache["ip"] = found
        _log.info("Local IP:%s", found)
    return found


def get_duration_with_default(
    metadata: Mapping[str, str], key: str, default: timedelta
) -> timedelta:
    """Read a duration in nanoseconds from ``metadata[key]``, else return ``default``."""
    if key not in metadata:
        return default
    data = metadata[key]
    if not isinstance(data, str) or not _DECIMAL.fullmatch(data):
        _log.error("key:%s is not a number", key)
        return default
    value = int(data)
    if not _INT64_MIN <= value <= _INT64_MAX:
        _log.error("key:%s is not a number", key)
        return default
    return timedelta(microseconds=value / 1000)


def get_url_formed_map(source: Mapping[str, str]) -> str:
    """Return ``source`` as a URL query string, sorted by key."""
    return urlencode(sorted(source.items()))


def get_status_code(response: Any) -> str:
    """Return the HTTP status code of ``response`` as text, or "NA" without one."""
    if response is None:
        return "NA"
    code = getattr(response, "status_code", None)
    if code is None:
        code = getattr(response, "status", None)
    return "NA" if code is None else str(code)


def deep_copy_map(params: Mapping[str, str]) -> dict[str, str]:
    """Return an independent copy of a string map."""
    return dict(params)