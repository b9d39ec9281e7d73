"""Service discovery records: instances, services, clusters and heartbeats."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from enum import IntEnum
from typing import Any

_NUMBER = (int, float)
_UINT64_MAX = 0xFFFFFFFFFFFFFFFF


class State(IntEnum):
    """Running state of a heartbeat task."""

    RUNNING = 0
    SHUTDOWN = 1


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


def _uint(data: Mapping[str, Any], key: str) -> int:
    value = _get(data, key, int, 0)
    if not 0 <= value <= _UINT64_MAX:
        raise ValueError(f"field {key!r} out of range for an unsigned integer: {value}")
    return value


def _str_map(data: Mapping[str, Any], key: str) -> dict[str, str] | None:
    value = _get(data, key, Mapping, None)
    if value is not None and not all(isinstance(v, str) for v in value.values()):
        raise TypeError(f"field {key!r} must map strings to strings")
    return None if value is None else dict(value)


def _sorted_map(metadata: dict[str, str] | None) -> dict[str, str] | None:
    return None if metadata is None else dict(sorted(metadata.items()))


@dataclass
class Instance:
    """One registered instance of a service."""

    instance_id: str = ""
    ip: str = ""
    port: int = 0
    weight: float = 0.0
    healthy: bool = False
    enable: bool = False
    ephemeral: bool = False
    cluster_name: str = ""
    service_name: str = ""
    metadata: dict[str, str] | None = None
    instance_heart_beat_interval: int = 0
    ip_delete_timeout: int = 0
    instance_heart_beat_time_out: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Instance:
        """Build an instance from decoded JSON; raises TypeError or ValueError on bad fields."""
        return cls(
            instance_id=_get(data, "instanceId", str, ""),
            ip=_get(data, "ip", str, ""),
            port=_uint(data, "port"),
            weight=float(_get(data, "weight", _NUMBER, 0.0)),
            healthy=_get(data, "healthy", bool, False),
            enable=_get(data, "enabled", bool, False),
            ephemeral=_get(data, "ephemeral", bool, False),
            cluster_name=_get(data, "clusterName", str, ""),
            service_name=_get(data, "serviceName", str, ""),
            metadata=_str_map(data, "metadata"),
            instance_heart_beat_interval=_get(data, "instanceHeartBeatInterval", int, 0),
            ip_delete_timeout=_get(data, "ipDeleteTimeout", int, 0),
            instance_heart_beat_time_out=_get(data, "instanceHeartBeatTimeOut", int, 0),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form."""
        return {
            "instanceId": self.instance_id,
            "ip": self.ip,
            "port": self.port,
            "weight": self.weight,
            "healthy": self.healthy,
            "enabled": self.enable,
            "ephemeral": self.ephemeral,
            "clusterName": self.cluster_name,
            "serviceName": self.service_name,
            "metadata": _sorted_map(self.metadata),
            "instanceHeartBeatInterval": self.instance_heart_beat_interval,
            "ipDeleteTimeout": self.ip_delete_timeout,
            "instanceHeartBeatTimeOut": self.instance_heart_beat_time_out,
        }


@dataclass
class Service:
    """A service together with its current instances."""

    cache_millis: int = 0
    hosts: list[Instance] = field(default_factory=list)
    checksum: str = ""
    last_ref_time: int = 0
    clusters: str = ""
    name: str = ""
    group_name: str = ""
    valid: bool = False
    all_ips: bool = False
    reach_protection_threshold: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Service:
        """Build a service from decoded JSON; raises TypeError or ValueError on bad fields."""
        return cls(
            cache_millis=_uint(data, "cacheMillis"),
            hosts=[Instance.from_dict(host) for host in _get(data, "hosts", list, [])],
            checksum=_get(data, "checksum", str, ""),
            last_ref_time=_uint(data, "lastRefTime"),
            clusters=_get(data, "clusters", str, ""),
            name=_get(data, "name", str, ""),
            group_name=_get(data, "groupName", str, ""),
            valid=_get(data, "valid", bool, False),
            all_ips=_get(data, "allIPs", bool, False),
            reach_protection_threshold=_get(data, "reachProtectionThreshold", bool, False),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form."""
        return {
            "cacheMillis": self.cache_millis,
            "hosts": [host.to_dict() for host in self.hosts],
            "checksum": self.checksum,
            "lastRefTime": self.last_ref_time,
            "clusters": self.clusters,
            "name": self.name,
            "groupName": self.group_name,
            "valid": self.valid,
            "allIPs": self.all_ips,
            "reachProtectionThreshold": self.reach_protection_threshold,
        }


@dataclass
class ServiceSelector:
    """Selector expression attached to a service."""

    selector: str = ""


@dataclass
class ServiceInfo:
    """Descriptive information about a service."""

    app: str = ""
    group: str = ""
    health_check_mode: str = ""
    metadata: dict[str, str] | None = None
    name: str = ""
    protect_threshold: float = 0.0
    selector: ServiceSelector = field(default_factory=ServiceSelector)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ServiceInfo:
        """Build service information from decoded JSON."""
        raw_selector = _get(data, "selector", Mapping, {})
        return cls(
            app=_get(data, "app", str, ""),
            group=_get(data, "group", str, ""),
            health_check_mode=_get(data, "healthCheckMode", str, ""),
            metadata=_str_map(data, "metadata"),
            name=_get(data, "name", str, ""),
            protect_threshold=float(_get(data, "protectThreshold", _NUMBER, 0.0)),
            selector=ServiceSelector(_get(raw_selector, "Selector", str, "")),
        )


@dataclass
class ClusterHealthChecker:
    """The kind of health check a cluster uses."""

    type: str = ""


@dataclass
class Cluster:
    """A cluster of instances within a service."""

    service_name: str = ""
    name: str = ""
    healthy_checker: ClusterHealthChecker = field(default_factory=ClusterHealthChecker)
    default_port: int = 0
    default_check_port: int = 0
    use_ip_port_for_check: bool = False
    metadata: dict[str, str] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Cluster:
        """Build a cluster from decoded JSON."""
        raw_checker = _get(data, "healthyChecker", Mapping, {})
        return cls(
            service_name=_get(data, "serviceName", str, ""),
            name=_get(data, "name", str, ""),
            healthy_checker=ClusterHealthChecker(_get(raw_checker, "type", str, "")),
            default_port=_uint(data, "defaultPort"),
            default_check_port=_uint(data, "defaultCheckPort"),
            use_ip_port_for_check=_get(data, "useIpPort4Check", bool, False),
            metadata=_str_map(data, "metadata"),
        )


@dataclass
class ServiceDetail:
    """A service with its clusters."""

    service: ServiceInfo = field(default_factory=ServiceInfo)
    clusters: list[Cluster] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ServiceDetail:
        """Build a service detail from decoded JSON."""
        return cls(
            service=ServiceInfo.from_dict(_get(data, "service", Mapping, {})),
            clusters=[Cluster.from_dict(item) for item in _get(data, "clusters", list, [])],
        )


@dataclass
class BeatInfo:
    """Heartbeat payload for an ephemeral instance."""

    ip: str = ""
    port: int = 0
    weight: float = 0.0
    service_name: str = ""
    cluster: str = ""
    metadata: dict[str, str] | None = None
    scheduled: bool = False
    period: timedelta = timedelta(0)
    state: State = State.RUNNING

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form; period and state are not sent."""
        return {
            "ip": self.ip,
            "port": self.port,
            "weight": self.weight,
            "serviceName": self.service_name,
            "cluster": self.cluster,
            "metadata": _sorted_map(self.metadata),
            "scheduled": self.scheduled,
        }


@dataclass
class ExpressionSelector:
    """A selector given by a type and an expression."""

    type: str = ""
    expression: str = ""

    def to_dict(self) -> dict[str, str]:
        """Return the JSON form."""
        return {"type": self.type, "expression": self.expression}


@dataclass
class ServiceList:
    """A page of service names."""

    count: int = 0
    doms: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ServiceList:
        """Build a service list from decoded JSON."""
        doms = _get(data, "doms", list, [])
        if not all(isinstance(name, str) for name in doms):
            raise TypeError("field 'doms' must be a list of strings")
        return cls(count=_get(data, "count", int, 0), doms=list(doms))