"""
Exception hierarchy for the storage stats service.

Only InvalidParameterError and MongoConnectionError abort a request.
The remaining errors are absorbed during a scan and only logged.
"""
from typing import Optional


class StatsServiceError(Exception):
    """Base exception for all storage stats errors."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        """
        Args:
            message: Human-readable error description
            original_error: Underlying exception, if any
        """
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class InvalidParameterError(StatsServiceError):
    """Bad or missing request parameter (HTTP 400)."""


class MongoConnectionError(StatsServiceError):
    """Upstream connection could not be established (HTTP 500)."""


class EnumerationError(StatsServiceError):
    """Listing the collections of one database failed."""

    def __init__(self, database: str, original_error: Optional[Exception] = None):
        super().__init__(
            f"Error fetching list of collections from database {database}",
            original_error,
        )
        self.database = database


class CollectionStatsError(StatsServiceError):
    """Fetching the storage size of one collection failed."""

    def __init__(
        self,
        database: str,
        collection: str,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(
            f"Error fetching storage size of collection {collection} from database {database}",
            original_error,
        )
        self.database = database
        self.collection = collection


class CloseError(StatsServiceError):
    """Closing the upstream connection failed."""
