"""
Per-collection storage size lookup.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from storage_stats.core.exceptions import CollectionStatsError
from storage_stats.models.scan import ScanOutcome
from storage_stats.schemas.stats import StatsResult

logger = logging.getLogger(__name__)


class StatsCollector:
    """Issues one collStats command per collection."""

    async def collect(
        self,
        db: AsyncIOMotorDatabase,
        collection_name: str,
    ) -> ScanOutcome[StatsResult]:
        """
        Fetch the storage size of a collection.

        Args:
            db: Database handle the collection belongs to
            collection_name: Collection to inspect

        Returns:
            Outcome holding a StatsResult, or the CollectionStatsError that
            caused the collection to be skipped
        """
        logger.info(
            f"Fetching storage size of collection {collection_name} from database {db.name}"
        )
        try:
            stats = await db.command("collStats", collection_name)
            result = StatsResult(
                database=db.name,
                collection=collection_name,
                storage_size=int(stats["storageSize"]),
            )
        except Exception as e:
            error = CollectionStatsError(db.name, collection_name, e)
            logger.error(f"{error.message}: {e!r}")
            return ScanOutcome.skip(error)

        return ScanOutcome.ok(result)
