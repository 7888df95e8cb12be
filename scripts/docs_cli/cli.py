#!/usr/bin/env python3
"""
Anthropic Docs CLI - Claude 4.5 reference from the terminal.

Commands:
    models        Model specifications
    pricing       Pricing tables
    limits        Token limits
    thinking      Extended thinking configuration
    beta-headers  Beta headers
    search        Search the documentation
    cost          Calculate the cost of a request
    practices     Best practices
    full-docs     Everything in one document
    tools         List available tools
    call          Call any tool (locally or on a running server)
    serve         Run the HTTP server
    health        Check a running server
"""
import json
import logging
from typing import Optional
from urllib.request import Request, urlopen

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from anthropic_docs.config import settings
from anthropic_docs.tools import TOOLS, UnknownToolError, call_tool
from docs_cli.api import (
    api_request as _api_request,
    get_url,
    APIError,
    ConnectionError,
)

CLI_VERSION = "1.0.0"

app = typer.Typer(
    name="anthropic-docs",
    help="Anthropic Docs CLI - Claude 4.5 models, pricing and documentation",
    no_args_is_help=True,
)

# Rich console for colored output
console = Console()
err_console = Console(stderr=True)


def emit(text: str):
    """Print tool output verbatim (no markup, no wrapping)."""
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def fmt(as_json: bool) -> str:
    return "json" if as_json else "markdown"


def run_tool(name: str, arguments: dict):
    """Run a tool in-process and print its output, exiting 1 on errors."""
    try:
        text = call_tool(name, arguments)
    except UnknownToolError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except ValidationError as e:
        for error in e.errors(include_url=False):
            field = ".".join(str(loc) for loc in error["loc"]) or "arguments"
            err_console.print(f"[red]Invalid {field}:[/red] {error['msg']}")
        raise typer.Exit(1)

    if text.startswith("Error:"):
        err_console.print(text, markup=False, highlight=False)
        raise typer.Exit(1)

    emit(text)


def api_request(method: str, endpoint: str, data: dict = None, timeout: int = 30) -> dict:
    """Make API request with CLI error handling."""
    try:
        return _api_request(method, endpoint, data, timeout)
    except APIError as e:
        err_console.print(f"[red]Error {e.status_code}:[/red] {e.detail}")
        raise typer.Exit(1)
    except ConnectionError as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


# =============================================================================
# Documentation Commands
# =============================================================================

@app.command("models")
def models_cmd(
    model: str = typer.Argument("all", help="opus_4_5, sonnet_4_5, haiku_4_5 or all"),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Show model specifications.

    Example: anthropic-docs models sonnet_4_5
    """
    run_tool("anthropic_get_model_info", {"model": model, "response_format": fmt(as_json)})


@app.command("pricing")
def pricing_cmd(
    model: str = typer.Argument("all", help="opus_4_5, sonnet_4_5, haiku_4_5 or all"),
    discounts: bool = typer.Option(True, "--discounts/--no-discounts", help="Include discount multipliers"),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Show pricing per million tokens.

    Example: anthropic-docs pricing --no-discounts
    """
    run_tool("anthropic_get_pricing", {
        "model": model,
        "include_discounts": discounts,
        "response_format": fmt(as_json),
    })


@app.command("limits")
def limits_cmd(
    model: str = typer.Argument("all", help="opus_4_5, sonnet_4_5, haiku_4_5 or all"),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Show context window and output limits."""
    run_tool("anthropic_get_token_limits", {"model": model, "response_format": fmt(as_json)})


@app.command("thinking")
def thinking_cmd(
    rules: bool = typer.Option(True, "--rules/--no-rules", help="Include budget rules"),
    api_modes: bool = typer.Option(True, "--api-modes/--no-api-modes", help="Include API modes"),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Show extended thinking configuration."""
    run_tool("anthropic_get_thinking_config", {
        "include_rules": rules,
        "include_api_modes": api_modes,
        "response_format": fmt(as_json),
    })


@app.command("beta-headers")
def beta_headers_cmd(
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Show beta headers and usage examples."""
    run_tool("anthropic_get_beta_headers", {"response_format": fmt(as_json)})


@app.command("search")
def search_cmd(
    query: str = typer.Argument(..., help="Search query (2-200 characters)"),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON (all matches)"),
):
    """Search the documentation.

    Example: anthropic-docs search "budget tokens"
    """
    run_tool("anthropic_search_docs", {"query": query, "response_format": fmt(as_json)})


@app.command("cost")
def cost_cmd(
    model: str = typer.Argument(..., help="opus_4_5, sonnet_4_5 or haiku_4_5"),
    input_tokens: int = typer.Option(..., "--input", "-i", help="Input tokens"),
    output_tokens: int = typer.Option(..., "--output", "-o", help="Output tokens"),
    thinking_tokens: int = typer.Option(0, "--thinking", "-t", help="Thinking tokens (billed as output)"),
    use_cache: bool = typer.Option(False, "--cache", help="Use prompt caching"),
    cache_hit_ratio: float = typer.Option(0.9, "--cache-hit-ratio", help="Cache hit ratio (0-1)"),
    use_batch: bool = typer.Option(False, "--batch", help="Use the batch API"),
    long_context: bool = typer.Option(False, "--long-context", help="Request exceeds 200K tokens"),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Calculate the cost of a request.

    Example: anthropic-docs cost sonnet_4_5 -i 10000 -o 2000 -t 5000
    Example: anthropic-docs cost opus_4_5 -i 50000 -o 1000 --cache --batch
    """
    run_tool("anthropic_calculate_cost", {
        "model": model,
        "input_tokens": input_tokens,
        "output_tokens": output_tokens,
        "thinking_tokens": thinking_tokens,
        "use_cache": use_cache,
        "cache_hit_ratio": cache_hit_ratio,
        "use_batch": use_batch,
        "long_context": long_context,
        "response_format": fmt(as_json),
    })


@app.command("practices")
def practices_cmd(
    topic: str = typer.Argument("all", help="thinking, model_selection, cost_optimization, context_management or all"),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Show best practices."""
    run_tool("anthropic_get_best_practices", {"topic": topic, "response_format": fmt(as_json)})


@app.command("full-docs")
def full_docs_cmd(
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Show the complete documentation."""
    run_tool("anthropic_get_full_docs", {"response_format": fmt(as_json)})


# =============================================================================
# Tool Commands
# =============================================================================

@app.command("tools")
def tools_cmd(
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """List available tools."""
    if as_json:
        emit(json.dumps([tool.to_dict() for tool in TOOLS.values()], indent=2))
        return

    table = Table()
    table.add_column("Tool", style="cyan")
    table.add_column("Title")

    for tool in TOOLS.values():
        table.add_row(tool.name, tool.title)

    console.print(table)


@app.command("call")
def call_cmd(
    name: str = typer.Argument(..., help="Tool name (see: anthropic-docs tools)"),
    arguments: str = typer.Option("{}", "--args", "-a", help="Tool arguments as a JSON object"),
    remote: bool = typer.Option(False, "--remote", help="Call a running server instead of running locally"),
):
    """Call a tool with JSON arguments.

    Example: anthropic-docs call anthropic_search_docs -a '{"query": "pricing"}'
    Example: anthropic-docs call anthropic_get_pricing --remote
    """
    try:
        parsed = json.loads(arguments)
    except ValueError as e:
        err_console.print(f"[red]Error:[/red] --args is not valid JSON: {e}")
        raise typer.Exit(1)
    if not isinstance(parsed, dict):
        err_console.print("[red]Error:[/red] --args must be a JSON object")
        raise typer.Exit(1)

    if not remote:
        run_tool(name, parsed)
        return

    result = api_request("POST", f"/v1/tools/{name}", parsed)
    for item in result.get("content", []):
        emit(item.get("text", ""))


# =============================================================================
# Server Commands
# =============================================================================

@app.command("serve")
def serve(
    host: str = typer.Option(settings.DEFAULT_HOST, "--host", help="Bind address"),
    port: int = typer.Option(settings.DEFAULT_PORT, "--port", "-p", help="Port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Run the HTTP server.

    Example: anthropic-docs serve --port 3000
    """
    import uvicorn

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    console.print(f"[green]Starting {settings.SERVER_NAME} at http://{host}:{port}[/green]")
    console.print(f"[dim]Tools: http://{host}:{port}/v1/tools  JSON-RPC: http://{host}:{port}/mcp[/dim]")
    uvicorn.run(
        "anthropic_docs.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.LOG_LEVEL.lower(),
    )


@app.command("health")
def health(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show full response"),
):
    """Check a running docs server.

    Example: anthropic-docs health
    """
    url = f"{get_url().rstrip('/')}/health"
    req = Request(url)

    try:
        with urlopen(req, timeout=10) as resp:
            result = json.loads(resp.read().decode())
    except Exception as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    status = result.get("status", "unknown")
    service = result.get("service", settings.SERVER_NAME)
    version = result.get("version", "?")

    if status == "healthy":
        console.print(f"[green]✓[/green] {service} v{version}: [green]{status}[/green]")
    else:
        console.print(f"[yellow]⚠[/yellow] {service} v{version}: [yellow]{status}[/yellow]")

    if verbose:
        emit(json.dumps(result, indent=2))


@app.command("version")
def version():
    """Show CLI version."""
    console.print(f"anthropic-docs [cyan]v{CLI_VERSION}[/cyan] (Typer)")


# =============================================================================
# Main
# =============================================================================

def main():
    app()


if __name__ == "__main__":
    main()
