"""tsk-docs serve command - run the MCP server."""

from pathlib import Path

import click

from tskdocs.cli.utils import config_option, load_cli_config


@click.command()
@click.option(
    "--transport",
    type=click.Choice(["stdio", "http"]),
    default=None,
    help="MCP transport (default: from config, stdio)",
)
@click.option("--port", type=int, default=None, help="Port for the http transport")
@click.option(
    "--no-refresh",
    is_flag=True,
    help="Skip fetching the site docs at startup",
)
@config_option
@click.pass_context
def serve_command(
    ctx: click.Context,
    transport: str | None,
    port: int | None,
    no_refresh: bool,
    config_path: Path | None,
) -> None:
    """Run the tsk documentation MCP server.

    Site docs are fetched once before serving. A failed fetch is logged
    and the server starts anyway.
    """
    from tskdocs.mcp.server import run_server

    server_overrides: dict[str, object] = {}
    if transport:
        server_overrides["transport"] = transport
    if port is not None:
        server_overrides["port"] = port

    overrides: dict[str, object] = {}
    if server_overrides:
        overrides["server"] = server_overrides
    if ctx.obj and ctx.obj.get("verbose"):
        overrides["logging"] = {"level": "DEBUG"}

    config = load_cli_config(config_path, **overrides)
    run_server(config, refresh=False if no_refresh else None)
