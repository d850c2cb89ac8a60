"""
Global test fixtures for Storage Stats.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- A scripted fake cluster for collStats replies and failures
- FastAPI test clients
"""

import sys
from pathlib import Path
from typing import Generator, Optional, Union
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# Fake Cluster
# =============================================================================

# collection name -> storageSize in bytes, or the exception collStats raises
CollectionSizes = dict[str, Union[int, Exception]]
# database name -> collections, or the exception listing them raises
ClusterLayout = dict[str, Union[CollectionSizes, Exception]]


class FakeDatabase:
    """Motor-like database answering list_collection_names and collStats."""

    def __init__(
        self,
        name: str,
        collections: Union[CollectionSizes, Exception],
        calls: Optional[list[tuple]] = None,
    ):
        self.name = name
        self._collections = collections
        self.commands: list[tuple] = []
        self.calls = calls if calls is not None else []

    async def list_collection_names(self) -> list[str]:
        if isinstance(self._collections, Exception):
            raise self._collections
        return list(self._collections)

    async def command(self, command: str, value=None, **kwargs) -> dict:
        self.commands.append((command, value))
        self.calls.append((command, self.name, value))
        size = self._collections[value]
        if isinstance(size, Exception):
            raise size
        return {"ns": f"{self.name}.{value}", "storageSize": size, "ok": 1.0}


class FakeMongoClient:
    """
    Motor-like client over a scripted cluster.

    Databases are reported in the insertion order of the cluster dict.
    """

    def __init__(
        self,
        cluster: ClusterLayout,
        ping_error: Optional[Exception] = None,
        list_databases_error: Optional[Exception] = None,
        close_error: Optional[Exception] = None,
    ):
        self._cluster = cluster
        self._list_databases_error = list_databases_error
        self._databases: dict[str, FakeDatabase] = {}
        self._close_error = close_error
        # Shared, ordered log of collStats and close calls
        self.calls: list[tuple] = []

        self.admin = MagicMock()
        self.admin.command = AsyncMock(
            return_value={"ok": 1.0},
            side_effect=ping_error,
        )
        self.close = MagicMock(side_effect=self._record_close)

    async def list_database_names(self) -> list[str]:
        if self._list_databases_error is not None:
            raise self._list_databases_error
        return list(self._cluster)

    def _record_close(self) -> None:
        self.calls.append(("close",))
        if self._close_error is not None:
            raise self._close_error

    def __getitem__(self, name: str) -> FakeDatabase:
        if name not in self._databases:
            self._databases[name] = FakeDatabase(
                name, self._cluster.get(name, {}), self.calls
            )
        return self._databases[name]


@pytest.fixture
def sample_cluster() -> ClusterLayout:
    """Two application databases sharing a prefix."""
    return {
        "app_prod": {"users": 1024, "sessions": 512},
        "app_test": {"users": 256},
    }


@pytest.fixture
def fake_mongo_client(sample_cluster) -> FakeMongoClient:
    """Fake client over the sample cluster."""
    return FakeMongoClient(sample_cluster)


@pytest.fixture
def make_fake_client():
    """Factory for fake clients with custom clusters or failures."""
    return FakeMongoClient


# =============================================================================
# MongoDB Fixtures (mongomock)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    try:
        from mongomock_motor import AsyncMongoMockClient
        client = AsyncMongoMockClient()
        yield client
        client.close()
    except ImportError:
        pytest.skip("mongomock-motor not installed")


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app():
    """
    Create FastAPI app for testing.

    Note: This imports the actual app and should be used with mocked
    database connections.
    """
    from storage_stats.main import app
    return app


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    Use this for synchronous endpoint testing.
    """
    with TestClient(app) as c:
        yield c


@pytest_asyncio.fixture
async def async_client(app):
    """
    Create an async test client.

    Use this for testing async endpoints.
    """
    from httpx import AsyncClient, ASGITransport

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac
