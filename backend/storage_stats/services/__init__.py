"""
Service layer for the stats scan.
"""
from storage_stats.services.connection_builder import build_connection_descriptor
from storage_stats.services.metadata_walker import MetadataWalker
from storage_stats.services.stats_collector import StatsCollector
from storage_stats.services.stats_service import StatsRequestHandler

__all__ = [
    "build_connection_descriptor",
    "MetadataWalker",
    "StatsCollector",
    "StatsRequestHandler",
]
