"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with helpers for routing
requests to a fake cluster instead of a real MongoDB deployment.
"""

import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Connection Override Fixtures
# =============================================================================

@pytest.fixture
def use_fake_client():
    """
    Route create_client to a fake client.

    Usage in tests:
        def test_something(client, fake_mongo_client, use_fake_client):
            with use_fake_client(fake_mongo_client) as create_client:
                response = client.get("/stats?url=localhost")
    """
    def _use(fake_client):
        return patch(
            "storage_stats.services.stats_service.create_client",
            return_value=fake_client,
        )
    return _use


@pytest.fixture
def override_settings(app):
    """
    Serve requests with custom settings.

    Usage:
        def test_something(client, override_settings):
            override_settings(mongo_server_selection_timeout_ms=100)
    """
    from storage_stats.config import Settings
    from storage_stats.routers.stats import get_stats_handler
    from storage_stats.services.stats_service import StatsRequestHandler

    def _override(**values):
        settings = Settings(**values)
        app.dependency_overrides[get_stats_handler] = lambda: StatsRequestHandler(settings)
        return settings

    yield _override
    app.dependency_overrides.pop(get_stats_handler, None)


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, message: str):
        assert response.status_code == status_code
        assert response.headers["content-type"].startswith("application/json")
        assert response.json() == {"error": message}
    return _assert
