"""Request parameters for service discovery operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from nacoskit.model_service import Instance
from nacoskit.params import param_field, transform_object_to_param

SubscribeCallback = Callable[[list[Instance], Optional[BaseException]], None]


@dataclass
class RegisterInstanceParam:
    """Parameters for registering an instance."""

    ip: str = param_field("ip", default="")
    port: int = param_field("port", default=0)
    weight: float = param_field("weight", default=0.0)
    enable: bool = param_field("enabled", default=False)
    healthy: bool = param_field("healthy", default=False)
    metadata: Optional[dict[str, str]] = param_field("metadata", default=None)
    cluster_name: str = param_field("clusterName", default="")
    service_name: str = param_field("serviceName", default="")
    group_name: str = param_field("groupName", default="")
    ephemeral: bool = param_field("ephemeral", default=False)

    def to_params(self) -> dict[str, str]:
        """Return the request parameters."""
        return transform_object_to_param(self)


@dataclass
class DeregisterInstanceParam:
    """Parameters for removing an instance."""

    ip: str = param_field("ip", default="")
    port: int = param_field("port", default=0)
    cluster: str = param_field("cluster", default="")
    service_name: str = param_field("serviceName", default="")
    group_name: str = param_field("groupName", default="")
    ephemeral: bool = param_field("ephemeral", default=False)

    def to_params(self) -> dict[str, str]:
        """Return the request parameters."""
        return transform_object_to_param(self)


@dataclass
class UpdateInstanceParam:
    """Parameters for updating an instance."""

    ip: str = param_field("ip", default="")
    port: int = param_field("port", default=0)
    weight: float = param_field("weight", default=0.0)
    enable: bool = param_field("enabled", default=False)
    healthy: bool = param_field("healthy", default=False)
    metadata: Optional[dict[str, str]] = param_field("metadata", default=None)
    cluster_name: str = param_field("clusterName", default="")
    service_name: str = param_field("serviceName", default="")
    group_name: str = param_field("groupName", default="")
    ephemeral: bool = param_field("ephemeral", default=False)

    def to_params(self) -> dict[str, str]:
        """Return the request parameters."""
        return transform_object_to_param(self)


@dataclass
class GetServiceParam:
    """Parameters for fetching one service."""

    clusters: list[str] = param_field("clusters", default_factory=list)
    service_name: str = param_field("serviceName", default="")
    group_name: str = param_field("groupName", default="")

    def to_params(self) -> dict[str, str]:
        """Return the request parameters."""
        return transform_object_to_param(self)


@dataclass
class GetAllServiceInfoParam:
    """Parameters for listing the services of a namespace."""

    namespace: str = param_field("nameSpace", default="")
    group_name: str = param_field("groupName", default="")
    page_no: int = param_field("pageNo", default=0)
    page_size: int = param_field("pageSize", default=0)

    def to_params(self) -> dict[str, str]:
        """Return the request parameters."""
        return transform_object_to_param(self)


@dataclass
class SubscribeParam:
    """Parameters for subscribing to instance changes of a service."""

    service_name: str = param_field("serviceName", default="")
    clusters: list[str] = param_field("clusters", default_factory=list)
    group_name: str = param_field("groupName", default="")
    subscribe_callback: Optional[SubscribeCallback] = field(default=None, compare=False)

    def to_params(self) -> dict[str, str]:
        """Return the request parameters."""
        return transform_object_to_param(self)


@dataclass
class SelectAllInstancesParam:
    """Parameters for listing every instance of a service."""

    clusters: list[str] = param_field("clusters", default_factory=list)
    service_name: str = param_field("serviceName", default="")
    group_name: str = param_field("groupName", default="")

    def to_params(self) -> dict[str, str]:
        """Return the request parameters."""
        return transform_object_to_param(self)


@dataclass
class SelectInstancesParam:
    """Parameters for listing instances, optionally only healthy ones."""

    clusters: list[str] = param_field("clusters", default_factory=list)
    service_name: str = param_field("serviceName", default="")
    group_name: str = param_field("groupName", default="")
    healthy_only: bool = param_field("healthyOnly", default=False)

    def to_params(self) -> dict[str, str]:
        """Return the request parameters."""
        return transform_object_to_param(self)


@dataclass
class SelectOneHealthInstanceParam:
    """Parameters for choosing one healthy instance."""

    clusters: list[str] = param_field("clusters", default_factory=list)
    service_name: str = param_field("serviceName", default="")
    group_name: str = param_field("groupName", default="")

    def to_params(self) -> dict[str, str]:
        """Return the request parameters."""
        return transform_object_to_param(self)