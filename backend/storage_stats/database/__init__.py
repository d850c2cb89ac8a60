"""
Database module - per-request MongoDB client lifecycle.
"""
from storage_stats.database.connections import (
    CONNECT_ERROR_MESSAGE,
    close_client,
    create_client,
    ping,
)

__all__ = [
    "CONNECT_ERROR_MESSAGE",
    "close_client",
    "create_client",
    "ping",
]
