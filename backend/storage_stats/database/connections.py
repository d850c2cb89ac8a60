"""
MongoDB connection management.

Every request opens its own client and closes it before responding.
Nothing is pooled or reused across requests.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from storage_stats.config import Settings, get_settings
from storage_stats.core.exceptions import CloseError, MongoConnectionError
from storage_stats.models.connection import ConnectionDescriptor

logger = logging.getLogger(__name__)

CONNECT_ERROR_MESSAGE = "Error connecting to MongoDB"


def create_client(
    descriptor: ConnectionDescriptor,
    settings: Optional[Settings] = None,
) -> AsyncIOMotorClient:
    """
    Create a MongoDB client for the descriptor.

    The driver connects lazily, so only malformed connection strings and
    option errors surface here. Use ping() to force the connection.

    Raises:
        MongoConnectionError: If the driver rejects the connection string or options
    """
    settings = settings or get_settings()
    options = descriptor.client_options()
    if settings.mongo_server_selection_timeout_ms is not None:
        options["serverSelectionTimeoutMS"] = settings.mongo_server_selection_timeout_ms

    try:
        return AsyncIOMotorClient(descriptor.connection_string, **options)
    except (PyMongoError, ValueError, TypeError) as e:
        raise MongoConnectionError(CONNECT_ERROR_MESSAGE, e) from e


async def ping(client: AsyncIOMotorClient) -> None:
    """
    Round-trip to the admin database to verify the connection.

    Raises:
        MongoConnectionError: On timeout, auth failure or unreachable hosts
    """
    try:
        await client.admin.command("ping")
    except Exception as e:
        raise MongoConnectionError(CONNECT_ERROR_MESSAGE, e) from e


def close_client(client: AsyncIOMotorClient) -> Optional[CloseError]:
    """
    Close the client.

    A failure is logged and returned, never raised, so it cannot alter
    the response being built.
    """
    try:
        client.close()
    except Exception as e:
        error = CloseError("Error closing MongoDB connection", e)
        logger.error(f"{error.message}: {e}")
        return error
    logger.info("Connection closed successfully")
    return None
