"""
Data structures that live for the duration of one request.
"""
from storage_stats.models.connection import ConnectionDescriptor
from storage_stats.models.scan import (
    CollectionRecord,
    DatabaseRecord,
    RequestState,
    ScanOutcome,
    ScanReport,
)

__all__ = [
    "ConnectionDescriptor",
    "CollectionRecord",
    "DatabaseRecord",
    "RequestState",
    "ScanOutcome",
    "ScanReport",
]
