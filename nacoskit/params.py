"""Turning parameter dataclasses into flat string maps for requests."""

from __future__ import annotations

import dataclasses
import json
import math
from decimal import Decimal
from typing import Any

_PARAM_KEY = "param"


def param_field(name: str, **kwargs: Any) -> Any:
    """Return a dataclass field sent as request parameter ``name``."""
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[_PARAM_KEY] = name
    return dataclasses.field(metadata=metadata, **kwargs)


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return format(Decimal(repr(value)).normalize(), "f")


def _to_json(value: Any) -> str:
    text = json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    for char, escaped in (
        ("<", "\\u003c"),
        (">", "\\u003e"),
        ("&", "\\u0026"),
        ("\u2028", "\\u2028"),
        ("\u2029", "\\u2029"),
    ):
        text = text.replace(char, escaped)
    return text


def _format_value(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, str):
        return value or None
    if isinstance(value, dict):
        return _to_json(value)
    if isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value):
        return ",".join(value) or None
    return None


def transform_object_to_param(obj: Any) -> dict[str, str]:
    """Return the request parameters of a dataclass built with :func:`param_field`.

    Numbers and booleans are always sent, strings and string lists only when
    non-empty, and mappings as JSON when present.
    """
    params: dict[str, str] = {}
    if obj is None:
        return params
    if not dataclasses.is_dataclass(obj) or isinstance(obj, type):
        raise TypeError(f"expected a dataclass instance, got {type(obj).__name__}")
    for field in dataclasses.fields(obj):
        tag = field.metadata.get(_PARAM_KEY, "")
        if not tag or tag == "-":
            continue
        formatted = _format_value(getattr(obj, field.name))
        if formatted is not None:
            params[tag] = formatted
    return params