"""
API Routers module.
"""
from storage_stats.routers import stats

__all__ = ["stats"]
