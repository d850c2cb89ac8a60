"""
Turns raw query parameters into a ConnectionDescriptor.

The url parameter may appear once (single host) or several times
(seed list). Its shape is resolved here so later stages only see a
tuple of hosts.
"""
from typing import Optional, Protocol

from storage_stats.core.exceptions import InvalidParameterError
from storage_stats.models.connection import ConnectionDescriptor

INVALID_URL_MESSAGE = "Invalid URL parameter"
INVALID_POOL_SIZE_MESSAGE = "Invalid maxPoolSize parameter"


class QueryParamBag(Protocol):
    """Multi-valued parameter mapping, e.g. starlette QueryParams."""

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]: ...

    def getlist(self, key: str) -> list[str]: ...


def _resolve_hosts(values: list[str]) -> tuple[str, ...]:
    if not values or any(not value for value in values):
        raise InvalidParameterError(INVALID_URL_MESSAGE)
    return tuple(values)


def _parse_pool_size(raw: Optional[str]) -> Optional[int]:
    # Absent or empty means "driver default"
    if not raw:
        return None
    try:
        pool_size = int(raw, 10)
    except ValueError as e:
        raise InvalidParameterError(INVALID_POOL_SIZE_MESSAGE, e) from e
    if pool_size <= 0:
        raise InvalidParameterError(INVALID_POOL_SIZE_MESSAGE)
    return pool_size


def _parse_flag(raw: Optional[str]) -> bool:
    return raw == "true"


def build_connection_descriptor(params: QueryParamBag) -> ConnectionDescriptor:
    """
    Validate request parameters and build a connection descriptor.

    Args:
        params: Raw query parameters (url, replicaSet, maxPoolSize, ssl, tls)

    Returns:
        Immutable ConnectionDescriptor

    Raises:
        InvalidParameterError: If url is missing or empty, or maxPoolSize is
            not a positive integer
    """
    hosts = _resolve_hosts(params.getlist("url"))

    return ConnectionDescriptor(
        hosts=hosts,
        replica_set=params.get("replicaSet") or None,
        max_pool_size=_parse_pool_size(params.get("maxPoolSize")),
        ssl=_parse_flag(params.get("ssl")),
        tls=_parse_flag(params.get("tls")),
    )
