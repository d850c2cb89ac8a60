"""
Storage Stats Backend - FastAPI Application

Reports the on-disk storage size of every collection in a MongoDB cluster.
"""
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from storage_stats.config import get_settings
from storage_stats.core.logging import configure_logging
from storage_stats.routers import stats

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Endpoint not found"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    No connection is opened here: every request owns its own client.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(f"Server started on port {settings.port}")

    yield

    logger.info("Shutting down Storage Stats Backend...")


settings = get_settings()

# Docs routes and trailing-slash redirects are disabled: every path except /stats answers 404
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
    redirect_slashes=False,
)

app.include_router(stats.router)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render errors as {"error": message}; unknown routes and methods are 404."""
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        logger.error(f"{NOT_FOUND_MESSAGE}: {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": NOT_FOUND_MESSAGE},
        )

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    configure_logging(settings.log_level)
    uvicorn.run(
        "storage_stats.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
