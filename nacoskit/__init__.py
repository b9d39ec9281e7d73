"""RFC 4122 UUIDs, request parameter mapping, models and helpers for service-discovery and configuration clients."""

__version__ = "0.1.0"