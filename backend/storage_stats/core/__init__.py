"""
Core module - Exceptions and logging setup.
"""
from storage_stats.core.exceptions import (
    StatsServiceError,
    InvalidParameterError,
    MongoConnectionError,
    EnumerationError,
    CollectionStatsError,
    CloseError,
)
from storage_stats.core.logging import configure_logging

__all__ = [
    "StatsServiceError",
    "InvalidParameterError",
    "MongoConnectionError",
    "EnumerationError",
    "CollectionStatsError",
    "CloseError",
    "configure_logging",
]
