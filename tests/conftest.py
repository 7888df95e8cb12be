import pytest
from httpx import AsyncClient, ASGITransport
from typer.testing import CliRunner

from anthropic_docs.main import app
from anthropic_docs.config import settings


@pytest.fixture
async def client():
    """Create an async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def cli_runner():
    """Typer CLI runner."""
    return CliRunner()


@pytest.fixture
def character_limit():
    """Temporarily lower the response character limit."""
    original = settings.CHARACTER_LIMIT

    def set_limit(limit: int):
        settings.CHARACTER_LIMIT = limit

    yield set_limit
    settings.CHARACTER_LIMIT = original


@pytest.fixture
def env_url(monkeypatch):
    """Point the CLI at a fake server."""
    monkeypatch.setenv("ANTHROPIC_DOCS_URL", "http://docs.test")
    return "http://docs.test"


@pytest.fixture
def mock_health_response():
    return {
        "status": "healthy",
        "service": "anthropic-docs-server",
        "version": "1.0.0",
        "tools": 9,
    }
