"""Request parameters for configuration operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from nacoskit.params import param_field, transform_object_to_param

Listener = Callable[[str, str, str, str], None]


@dataclass
class ConfigParam:
    """Parameters for publishing, reading or listening to a configuration.

    ``on_change`` is called with namespace, group, data id and data.
    """

    data_id: str = param_field("dataId", default="")
    group: str = param_field("group", default="")
    content: str = param_field("content", default="")
    tag: str = param_field("tag", default="")
    app_name: str = param_field("appName", default="")
    beta_ips: str = param_field("betaIps", default="")
    cas_md5: str = param_field("casMd5", default="")
    type: str = param_field("type", default="")
    encrypted_data_key: str = param_field("encryptedDataKey", default="")
    on_change: Optional[Listener] = field(default=None, compare=False)

    def to_params(self) -> dict[str, str]:
        """Return the request parameters."""
        return transform_object_to_param(self)


@dataclass
class SearchConfigParam:
    """Parameters for searching configurations page by page."""

    search: str = param_field("search", default="")
    data_id: str = param_field("dataId", default="")
    group: str = param_field("group", default="")
    tag: str = param_field("tag", default="")
    app_name: str = param_field("appName", default="")
    page_no: int = param_field("pageNo", default=0)
    page_size: int = param_field("pageSize", default=0)

    def to_params(self) -> dict[str, str]:
        """Return the request parameters."""
        return transform_object_to_param(self)