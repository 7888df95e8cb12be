"""Tests for the documentation commands."""
import io
import json
from unittest.mock import MagicMock, patch
from urllib.error import HTTPError, URLError

import pytest

from docs_cli.api import APIError, ConnectionError, api_request
from docs_cli.cli import app


class TestDocumentationCommands:
    """Tests for commands that run tools in-process."""

    def test_models(self, cli_runner):
        result = cli_runner.invoke(app, ["models", "opus_4_5"])

        assert result.exit_code == 0
        assert "## Claude Opus 4.5" in result.output
        assert "Claude Sonnet 4.5" not in result.output

    def test_models_unknown(self, cli_runner):
        """Unknown model keys fail validation and exit 1."""
        result = cli_runner.invoke(app, ["models", "claude_3"])

        assert result.exit_code == 1
        assert "Invalid model" in result.output

    def test_pricing_no_discounts(self, cli_runner):
        result = cli_runner.invoke(app, ["pricing", "--no-discounts"])

        assert result.exit_code == 0
        assert "# Claude 4.5 Pricing" in result.output
        assert "Discount Multipliers" not in result.output

    def test_limits_json(self, cli_runner):
        result = cli_runner.invoke(app, ["limits", "sonnet_4_5", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["models"]["sonnet_4_5"]["context_window_extended"] == 1_000_000

    def test_thinking_without_rules(self, cli_runner):
        result = cli_runner.invoke(app, ["thinking", "--no-rules"])

        assert result.exit_code == 0
        assert "## Budget Limits" in result.output
        assert "## Rules" not in result.output

    def test_beta_headers(self, cli_runner):
        result = cli_runner.invoke(app, ["beta-headers"])

        assert result.exit_code == 0
        assert "context-management-2025-06-27" in result.output

    def test_search(self, cli_runner):
        result = cli_runner.invoke(app, ["search", "budget tokens"])

        assert result.exit_code == 0
        assert '# Search Results for: "budget tokens"' in result.output

    def test_search_no_results(self, cli_runner):
        """An empty search is not an error."""
        result = cli_runner.invoke(app, ["search", "zz"])

        assert result.exit_code == 0
        assert "No results found" in result.output

    def test_search_query_too_short(self, cli_runner):
        result = cli_runner.invoke(app, ["search", "a"])

        assert result.exit_code == 1
        assert "Invalid query" in result.output

    def test_practices_unknown_topic(self, cli_runner):
        result = cli_runner.invoke(app, ["practices", "security"])

        assert result.exit_code == 1

    def test_full_docs_json(self, cli_runner):
        result = cli_runner.invoke(app, ["full-docs", "--json"])

        assert result.exit_code == 0
        assert "doc_urls" in json.loads(result.output)


class TestCostCommand:
    """Tests for 'anthropic-docs cost' command."""

    def test_cost_with_thinking(self, cli_runner):
        result = cli_runner.invoke(app, ["cost", "sonnet_4_5", "-i", "10000", "-o", "2000", "-t", "5000"])

        assert result.exit_code == 0
        assert "## Final Cost: **$0.135000**" in result.output

    def test_cost_cache_and_batch(self, cli_runner):
        result = cli_runner.invoke(app, [
            "cost", "sonnet_4_5", "-i", "100000", "-o", "0", "--cache", "--batch",
        ])

        assert result.exit_code == 0
        assert "Cache Savings" in result.output
        assert "Batch Savings" in result.output

    def test_cost_json(self, cli_runner):
        result = cli_runner.invoke(app, ["cost", "haiku_4_5", "-i", "1000000", "-o", "0", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.output)["final_cost"] == 1.0

    def test_cost_unknown_model(self, cli_runner):
        result = cli_runner.invoke(app, ["cost", "gpt_4", "-i", "1", "-o", "1"])

        assert result.exit_code == 1
        assert "Invalid model" in result.output

    def test_cost_ratio_out_of_range(self, cli_runner):
        result = cli_runner.invoke(app, ["cost", "opus_4_5", "-i", "1", "-o", "1", "--cache-hit-ratio", "2"])

        assert result.exit_code == 1
        assert "Invalid cache_hit_ratio" in result.output


class TestToolCommands:
    """Tests for 'tools' and 'call' commands."""

    def test_tools_table(self, cli_runner):
        result = cli_runner.invoke(app, ["tools"])

        assert result.exit_code == 0
        assert "anthropic_calculate_cost" in result.output

    def test_tools_json(self, cli_runner):
        result = cli_runner.invoke(app, ["tools", "--json"])

        assert result.exit_code == 0
        assert len(json.loads(result.output)) == 9

    def test_call_local(self, cli_runner):
        result = cli_runner.invoke(app, [
            "call", "anthropic_search_docs", "--args", '{"query": "opus", "response_format": "json"}',
        ])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["results"][0]["relevance"] == 1.0

    def test_call_unknown_tool(self, cli_runner):
        result = cli_runner.invoke(app, ["call", "anthropic_nope"])

        assert result.exit_code == 1
        assert "Unknown tool" in result.output

    def test_call_invalid_json(self, cli_runner):
        result = cli_runner.invoke(app, ["call", "anthropic_get_pricing", "--args", "{not json"])

        assert result.exit_code == 1
        assert "not valid JSON" in result.output

    def test_call_args_not_object(self, cli_runner):
        result = cli_runner.invoke(app, ["call", "anthropic_get_pricing", "--args", "[1, 2]"])

        assert result.exit_code == 1
        assert "must be a JSON object" in result.output

    def test_call_remote(self, cli_runner, env_url):
        """--remote posts the arguments to the running server."""
        payload = {"content": [{"type": "text", "text": "# Beta Headers"}]}
        with patch("docs_cli.cli._api_request", return_value=payload) as mock_request:
            result = cli_runner.invoke(app, ["call", "anthropic_get_beta_headers", "--remote"])

        assert result.exit_code == 0
        assert "# Beta Headers" in result.output
        mock_request.assert_called_once_with("POST", "/v1/tools/anthropic_get_beta_headers", {}, 30)

    def test_call_remote_api_error(self, cli_runner, env_url):
        with patch("docs_cli.cli._api_request", side_effect=APIError(404, "Unknown tool: x")):
            result = cli_runner.invoke(app, ["call", "x", "--remote"])

        assert result.exit_code == 1
        assert "Error 404" in result.output

    def test_call_remote_connection_error(self, cli_runner, env_url):
        with patch("docs_cli.cli._api_request", side_effect=ConnectionError("Connection error: refused")):
            result = cli_runner.invoke(app, ["call", "anthropic_get_pricing", "--remote"])

        assert result.exit_code == 1
        assert "Connection error" in result.output


class TestServeCommand:
    def test_serve_runs_uvicorn(self, cli_runner):
        with patch("uvicorn.run") as mock_run:
            result = cli_runner.invoke(app, ["serve", "--port", "3100"])

        assert result.exit_code == 0
        mock_run.assert_called_once()
        assert mock_run.call_args[0][0] == "anthropic_docs.main:app"
        assert mock_run.call_args[1]["port"] == 3100


class TestApiClient:
    """Tests for the remote HTTP client."""

    def test_posts_json_to_server(self, env_url):
        response = MagicMock()
        response.read.return_value = b'{"content": []}'
        response.__enter__ = lambda s: response
        response.__exit__ = MagicMock(return_value=False)

        with patch("docs_cli.api.urlopen", return_value=response) as mock_urlopen:
            result = api_request("POST", "/v1/tools/anthropic_get_pricing", {"model": "all"})

        assert result == {"content": []}
        req = mock_urlopen.call_args[0][0]
        assert req.full_url == "http://docs.test/v1/tools/anthropic_get_pricing"
        assert req.get_method() == "POST"
        assert json.loads(req.data) == {"model": "all"}

    def test_http_error_detail(self, env_url):
        error = HTTPError("http://docs.test", 404, "Not Found", {}, io.BytesIO(b'{"detail": "Unknown tool: x"}'))

        with patch("docs_cli.api.urlopen", side_effect=error):
            with pytest.raises(APIError) as exc_info:
                api_request("POST", "/v1/tools/x", {})

        assert exc_info.value.status_code == 404
        assert exc_info.value.detail == "Unknown tool: x"

    def test_http_error_without_json(self, env_url):
        error = HTTPError("http://docs.test", 502, "Bad Gateway", {}, io.BytesIO(b"<html>"))

        with patch("docs_cli.api.urlopen", side_effect=error):
            with pytest.raises(APIError) as exc_info:
                api_request("GET", "/v1/tools")

        assert exc_info.value.detail == "HTTP 502"

    def test_unreachable_server(self, env_url):
        with patch("docs_cli.api.urlopen", side_effect=URLError("refused")):
            with pytest.raises(ConnectionError) as exc_info:
                api_request("GET", "/v1/tools")

        assert "refused" in str(exc_info.value)
