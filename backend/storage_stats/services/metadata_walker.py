"""
Lazy enumeration of databases and collections on an open connection.
"""
import logging
from typing import AsyncIterator, Optional

from motor.motor_asyncio import AsyncIOMotorClient

from storage_stats.core.exceptions import EnumerationError, MongoConnectionError
from storage_stats.database.connections import CONNECT_ERROR_MESSAGE
from storage_stats.models.scan import CollectionRecord, DatabaseRecord, ScanOutcome

logger = logging.getLogger(__name__)


class MetadataWalker:
    """
    Walks the databases of a cluster and the collections inside them.

    Databases whose name does not start with db_prefix are skipped before
    their collections are listed. The comparison is exact and case-sensitive.
    """

    def __init__(self, client: AsyncIOMotorClient, db_prefix: Optional[str] = None):
        self.client = client
        self.db_prefix = db_prefix

    def matches(self, db_name: str) -> bool:
        """Whether a database passes the prefix filter."""
        if not self.db_prefix:
            return True
        return db_name.startswith(self.db_prefix)

    async def list_databases(self) -> AsyncIterator[DatabaseRecord]:
        """
        Yield databases in the order the cluster reports them.

        Raises:
            MongoConnectionError: If the database list cannot be fetched
        """
        logger.info("Fetching list of databases...")
        try:
            names = await self.client.list_database_names()
        except Exception as e:
            raise MongoConnectionError(CONNECT_ERROR_MESSAGE, e) from e

        for name in names:
            if not self.matches(name):
                logger.debug(f"Skipping database {name} (prefix {self.db_prefix!r})")
                continue
            yield DatabaseRecord(name=name)

    async def list_collections(self, db_name: str) -> ScanOutcome[list[CollectionRecord]]:
        """
        List the collections of one database.

        A failure is logged and returned as a skipped outcome so the rest
        of the scan carries on.
        """
        logger.info(f"Fetching list of collections from database {db_name}")
        try:
            names = await self.client[db_name].list_collection_names()
        except Exception as e:
            error = EnumerationError(db_name, e)
            logger.error(f"{error.message}: {e}")
            return ScanOutcome.skip(error)

        return ScanOutcome.ok(
            [CollectionRecord(name=name, database=db_name) for name in names]
        )

    async def walk(
        self,
    ) -> AsyncIterator[tuple[DatabaseRecord, ScanOutcome[list[CollectionRecord]]]]:
        """Yield each matching database with the outcome of listing its collections."""
        async for database in self.list_databases():
            yield database, await self.list_collections(database.name)
