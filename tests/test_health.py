"""Tests for the health endpoint and the health and version commands."""
import json
from unittest.mock import patch, MagicMock

from docs_cli.cli import app as cli_app


def make_response(payload: dict):
    mock_response = MagicMock()
    mock_response.read.return_value = json.dumps(payload).encode()
    mock_response.__enter__ = lambda s: mock_response
    mock_response.__exit__ = MagicMock(return_value=False)
    return mock_response


class TestHealthEndpoint:
    """Tests for GET /health."""

    async def test_health(self, client):
        """Test health reports service, version and tool count."""
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {
            "status": "healthy",
            "service": "anthropic-docs-server",
            "version": "1.0.0",
            "tools": 9,
        }


class TestHealthCommand:
    """Tests for 'anthropic-docs health' command."""

    def test_health_healthy(self, cli_runner, env_url, mock_health_response):
        """Test healthy service response."""
        with patch("docs_cli.cli.urlopen", return_value=make_response(mock_health_response)) as mock_urlopen:
            result = cli_runner.invoke(cli_app, ["health"])

        assert result.exit_code == 0
        assert "healthy" in result.output
        assert "anthropic-docs-server" in result.output
        assert mock_urlopen.call_args[0][0].full_url == "http://docs.test/health"

    def test_health_verbose(self, cli_runner, env_url, mock_health_response):
        """Test verbose health output."""
        with patch("docs_cli.cli.urlopen", return_value=make_response(mock_health_response)):
            result = cli_runner.invoke(cli_app, ["health", "--verbose"])

        assert result.exit_code == 0
        assert '"tools": 9' in result.output

    def test_health_unhealthy(self, cli_runner, env_url):
        """Test unhealthy service response."""
        payload = {"status": "degraded", "service": "anthropic-docs-server", "version": "1.0.0"}
        with patch("docs_cli.cli.urlopen", return_value=make_response(payload)):
            result = cli_runner.invoke(cli_app, ["health"])

        assert result.exit_code == 0
        assert "degraded" in result.output

    def test_health_connection_error(self, cli_runner, env_url):
        """Test connection error handling."""
        from urllib.error import URLError

        with patch("docs_cli.cli.urlopen", side_effect=URLError("Connection refused")):
            result = cli_runner.invoke(cli_app, ["health"])

        assert result.exit_code == 1
        assert "Error" in result.output


class TestVersion:
    """Tests for 'anthropic-docs version' command."""

    def test_version(self, cli_runner):
        """Test version output."""
        result = cli_runner.invoke(cli_app, ["version"])

        assert result.exit_code == 0
        assert "anthropic-docs" in result.output
        assert "v1.0.0" in result.output
        assert "Typer" in result.output
