"""
Pytest configuration and fixtures.
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from prompt_relay.infra.config.settings import Settings, get_settings
from prompt_relay.main import create_app
from tests._helpers.fakes import FakeTextGenerator

ALLOCATOR_TEMPLATE = "You are a memory allocator. Request: {prompt}"


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Settings built explicitly so the host environment does not leak in."""
    return Settings(
        _env_file=None,
        GOOGLE_API_KEY="test-google-key",
        PROMPT=ALLOCATOR_TEMPLATE,
        LLM_PROVIDER="mock",
        LOG_FORMAT="console",
    )


@pytest.fixture
def fake_generator() -> FakeTextGenerator:
    return FakeTextGenerator(reply="16")


@pytest.fixture
def app(settings, fake_generator):
    """FastAPI application instance for testing."""
    return create_app(settings=settings, generator=fake_generator)


@pytest.fixture
def client(app):
    """FastAPI test client."""
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def async_client(app):
    """Async FastAPI test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://testserver"
    ) as ac:
        yield ac
