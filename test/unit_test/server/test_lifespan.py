"""
Unit tests for FastAPI application lifespan management.

Tests verify that startup creates the database tables, that a failing
database does not prevent startup and that shutdown closes the shared
HTTP client.
"""

from unittest.mock import AsyncMock, patch

from juicebox_factory.server.main import app, lifespan

MAIN_MODULE = "juicebox_factory.server.main"


class TestLifespan:
    """Test startup and shutdown."""

    async def test_startup_and_shutdown(self):
        with patch(f"{MAIN_MODULE}.init_db", new_callable=AsyncMock) as init_db:
            with patch(f"{MAIN_MODULE}.close_http_client", new_callable=AsyncMock) as close_http_client:
                async with lifespan(app):
                    init_db.assert_awaited_once()
                    close_http_client.assert_not_awaited()

        close_http_client.assert_awaited_once()

    async def test_database_failure_is_logged(self):
        with patch(f"{MAIN_MODULE}.init_db", new_callable=AsyncMock, side_effect=ConnectionError("db down")):
            with patch(f"{MAIN_MODULE}.close_http_client", new_callable=AsyncMock) as close_http_client:
                with patch(f"{MAIN_MODULE}.logger") as mock_logger:
                    async with lifespan(app):
                        pass

        assert "Database initialization failed: db down" in mock_logger.error.call_args[0][0]
        close_http_client.assert_awaited_once()


def test_routers_are_mounted():
    paths = {route.path for route in app.routes}

    for path in (
        "/api/v1/health",
        "/api/v1/categories",
        "/api/v1/tools",
        "/api/v1/tools/compare",
        "/api/v1/scores/recompute-all",
        "/api/v1/reviews",
        "/api/v1/search",
        "/api/v1/recommendations/personalized",
        "/api/v1/ai/categorize",
        "/api/v1/discovery/run",
        "/api/v1/notifications/stream",
    ):
        assert path in paths
