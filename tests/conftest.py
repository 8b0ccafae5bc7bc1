"""Pytest fixtures for all tests."""

import pytest
from httpx import AsyncClient, ASGITransport

from pksuid.config import Config, IdsConfig
from pksuid.core.identifier import PKSUID, Prefix
from pksuid.ui.app import create_app


@pytest.fixture
def prefix():
    """Create a test prefix."""
    return Prefix("baz")


@pytest.fixture
def pksuid(prefix):
    """Create a freshly generated identifier."""
    return PKSUID.new(prefix)


@pytest.fixture
def app_config():
    """Create test app config."""
    return Config(ids=IdsConfig(default_prefix="test_"))


@pytest.fixture
async def app(app_config):
    """Create test FastAPI app."""
    return create_app(app_config)


@pytest.fixture
async def client(app):
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
