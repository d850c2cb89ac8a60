"""
Stats router: per-collection storage size of a MongoDB cluster.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from storage_stats.config import get_settings
from storage_stats.core.exceptions import InvalidParameterError, MongoConnectionError
from storage_stats.schemas.stats import ErrorResponse, StatsResult
from storage_stats.services.stats_service import StatsRequestHandler

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Stats"])


async def get_stats_handler() -> StatsRequestHandler:
    """Dependency to get a fresh StatsRequestHandler for each request."""
    return StatsRequestHandler(get_settings())


@router.get(
    "/stats",
    response_model=list[StatsResult],
    status_code=status.HTTP_200_OK,
    summary="Storage size of every collection",
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def get_stats(
    request: Request,
    handler: StatsRequestHandler = Depends(get_stats_handler),
):
    """
    Connect to the cluster described by the query string and report the
    storage size of each collection.

    Query parameters:
    - `url`: host[:port], repeat for a seed list (required)
    - `replicaSet`: replica set name
    - `maxPoolSize`: positive integer
    - `ssl` / `tls`: `true` to enable TLS
    - `dbPrefix`: only scan databases whose name starts with this prefix

    Collections or databases that fail to load are left out of the result.
    """
    try:
        report = await handler.handle(request.query_params)
    except InvalidParameterError as e:
        logger.error(e.message)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
    except MongoConnectionError as e:
        logger.error(f"{e.message}: {e.original_error}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=e.message,
        )

    logger.info("Processing completed. Returning results...")
    return report.results
