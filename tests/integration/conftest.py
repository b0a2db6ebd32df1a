"""Integration test fixtures for the HTTP API."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from labor_cost_engine.api.app import create_app
from labor_cost_engine.calculators.parameters import AnnualParameters
from labor_cost_engine.config import Settings

TEST_SETTINGS = Settings(
    engine_version="test",
    host="127.0.0.1",
    port=8000,
    debug=False,
    log_level="WARNING",
)


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API testing."""
    app = create_app(settings=TEST_SETTINGS, parameters=AnnualParameters())
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def client_for():
    """Factory for a client over an app built on a given parameter table."""

    def _client_for(parameters: AnnualParameters) -> AsyncClient:
        app = create_app(settings=TEST_SETTINGS, parameters=parameters)
        return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")

    return _client_for
