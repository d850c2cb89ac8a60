"""
Request handler for GET /stats.

Drives one request through its states:
    idle -> validating -> connecting -> scanning -> closing_connection -> responding
with an exit to responding_error when validation or connection fails.
Scanning is strictly sequential and owns its client from open to close.
"""
import logging
from typing import Optional

from storage_stats.config import Settings, get_settings
from storage_stats.database.connections import close_client, create_client, ping
from storage_stats.models.connection import ConnectionDescriptor
from storage_stats.models.scan import RequestState, ScanReport
from storage_stats.services.connection_builder import QueryParamBag, build_connection_descriptor
from storage_stats.services.metadata_walker import MetadataWalker
from storage_stats.services.stats_collector import StatsCollector

logger = logging.getLogger(__name__)


class StatsRequestHandler:
    """Handles a single stats request. Create one instance per request."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        collector: Optional[StatsCollector] = None,
    ):
        self.settings = settings or get_settings()
        self.collector = collector or StatsCollector()
        self.state = RequestState.IDLE

    def _transition(self, state: RequestState) -> None:
        logger.debug(f"Stats request: {self.state.value} -> {state.value}")
        self.state = state

    async def handle(self, params: QueryParamBag) -> ScanReport:
        """
        Validate parameters, scan the cluster and return the report.

        Raises:
            InvalidParameterError: Bad or missing parameters, no connection attempted
            MongoConnectionError: The cluster could not be reached
        """
        self._transition(RequestState.VALIDATING)
        try:
            descriptor = build_connection_descriptor(params)
        except Exception:
            self._transition(RequestState.RESPONDING_ERROR)
            raise

        try:
            report = await self.scan(descriptor, db_prefix=params.get("dbPrefix"))
        except Exception:
            self._transition(RequestState.RESPONDING_ERROR)
            raise

        self._transition(RequestState.RESPONDING)
        return report

    async def scan(
        self,
        descriptor: ConnectionDescriptor,
        db_prefix: Optional[str] = None,
    ) -> ScanReport:
        """
        Open a connection, collect storage sizes and close the connection.

        The client is closed exactly once whether the scan succeeded,
        partially failed or never got past the ping.
        """
        self._transition(RequestState.CONNECTING)
        logger.info("Connecting to MongoDB...")
        client = create_client(descriptor, self.settings)

        try:
            await ping(client)
            logger.info("Connection established successfully")

            self._transition(RequestState.SCANNING)
            report = await self._scan(MetadataWalker(client, db_prefix))
        finally:
            self._transition(RequestState.CLOSING_CONNECTION)
            close_error = close_client(client)

        if close_error is not None:
            report.skip(close_error)

        if report.skipped:
            logger.warning(
                f"Scan finished with {len(report.skipped)} skipped step(s), "
                f"{len(report.results)} collection(s) reported"
            )
        return report

    async def _scan(self, walker: MetadataWalker) -> ScanReport:
        report = ScanReport()

        logger.info("Processing databases...")
        async for database, listing in walker.walk():
            if listing.skipped:
                report.skip(listing.error)
                continue

            db = walker.client[database.name]
            for collection in listing.value:
                report.add(await self.collector.collect(db, collection.name))

        return report
