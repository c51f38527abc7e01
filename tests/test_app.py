"""
Tests for the application factory and its lifespan
"""

from unittest.mock import AsyncMock, patch

import pytest

from foodgraph.api.app import create_app
from foodgraph.config import Settings


def test_routes(settings):
    app = create_app(settings, client=AsyncMock())

    paths = {route.path for route in app.routes}
    assert "/graphql" in paths


def test_debug_follows_environment():
    development = create_app(Settings(node_env="development", _env_file=None), client=AsyncMock())
    production = create_app(Settings(node_env="production", _env_file=None), client=AsyncMock())

    assert development.debug is True
    assert production.debug is False


@pytest.mark.asyncio
async def test_lifespan_checks_injected_client(settings, data_client):
    app = create_app(settings, client=data_client)

    with patch("foodgraph.api.app.reset_client", new_callable=AsyncMock) as reset:
        async with app.router.lifespan_context(app):
            pass

    reset.assert_not_awaited()


@pytest.mark.asyncio
async def test_lifespan_tolerates_unreachable_store(settings):
    app = create_app(settings)

    with (
        patch("foodgraph.api.app.get_client") as get_client,
        patch(
            "foodgraph.api.app.check_database_connection",
            new_callable=AsyncMock,
            return_value=(False, "Cannot connect to database server"),
        ) as check,
        patch("foodgraph.api.app.reset_client", new_callable=AsyncMock) as reset,
    ):
        async with app.router.lifespan_context(app):
            check.assert_awaited_once_with(get_client.return_value)

    reset.assert_awaited_once()
