"""
Request and response schemas for API endpoints.
"""
from storage_stats.schemas.stats import ErrorResponse, StatsResult

__all__ = [
    "ErrorResponse",
    "StatsResult",
]
