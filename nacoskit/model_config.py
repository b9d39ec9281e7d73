"""Configuration records exchanged with the configuration service."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

_JSON_NUMBER = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")


def _get(data: Mapping[str, Any], key: str, kinds: Any, default: Any) -> Any:
    """Fetch ``key`` (matched case-insensitively) and check its JSON type."""
    if not isinstance(data, Mapping):
        raise TypeError(f"expected a JSON object, got {type(data).__name__}")
    value = data.get(key)
    if value is None:
        value = next(
            (v for k, v in data.items() if isinstance(k, str) and k.lower() == key.lower()),
            None,
        )
    if value is None:
        return default
    if not isinstance(value, kinds) or (isinstance(value, bool) and kinds is not bool):
        raise TypeError(f"field {key!r} has the wrong type: {type(value).__name__}")
    return value


@dataclass
class ConfigItem:
    """One configuration entry as returned by a search."""

    id: str = ""
    data_id: str = ""
    group: str = ""
    content: str = ""
    md5: str = ""
    tenant: str = ""
    appname: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ConfigItem:
        """Build an item from decoded JSON; raises TypeError or ValueError on bad fields."""
        number = _get(data, "id", (int, float, str), "")
        if isinstance(number, str) and number and not _JSON_NUMBER.fullmatch(number):
            raise ValueError(f"field 'id' is not a valid number: {number!r}")
        return cls(
            id=repr(number) if isinstance(number, float) else str(number),
            **{
                attr: _get(data, key, str, "")
                for attr, key in (
                    ("data_id", "dataId"),
                    ("group", "group"),
                    ("content", "content"),
                    ("md5", "md5"),
                    ("tenant", "tenant"),
                    ("appname", "appname"),
                )
            },
        )


@dataclass
class ConfigPage:
    """One page of configuration search results."""

    total_count: int = 0
    page_number: int = 0
    pages_available: int = 0
    page_items: list[ConfigItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ConfigPage:
        """Build a page from decoded JSON; raises TypeError or ValueError on bad fields."""
        return cls(
            total_count=_get(data, "totalCount", int, 0),
            page_number=_get(data, "pageNumber", int, 0),
            pages_available=_get(data, "pagesAvailable", int, 0),
            page_items=[ConfigItem.from_dict(item) for item in _get(data, "pageItems", list, [])],
        )


@dataclass
class ConfigListenContext:
    """A configuration being listened to, with the digest last seen."""

    group: str = ""
    md5: str = ""
    data_id: str = ""
    tenant: str = ""

    def to_dict(self) -> dict[str, str]:
        """Return the JSON form."""
        return {"group": self.group, "md5": self.md5, "dataId": self.data_id, "tenant": self.tenant}


@dataclass
class ConfigContext:
    """Identifies one configuration."""

    group: str = ""
    data_id: str = ""
    tenant: str = ""

    def to_dict(self) -> dict[str, str]:
        """Return the JSON form."""
        return {"group": self.group, "dataId": self.data_id, "tenant": self.tenant}