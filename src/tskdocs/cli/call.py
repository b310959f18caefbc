"""tsk-docs call / tools commands - invoke tools locally without a client."""

import asyncio
from pathlib import Path

import click

from tskdocs.cli.utils import config_option, load_cli_config, parse_arguments
from tskdocs.mcp.context import AppContext
from tskdocs.mcp.dispatch import Dispatcher, ToolResult
from tskdocs.mcp.registry import registry


@click.command()
@click.argument("tool")
@click.option(
    "-a",
    "--arg",
    "args",
    multiple=True,
    help="Tool argument as key=value (repeatable)",
)
@click.option(
    "--fetch/--no-fetch",
    default=False,
    help="Fetch the site docs before calling the tool",
)
@config_option
def call_command(tool: str, args: tuple[str, ...], fetch: bool, config_path: Path | None) -> None:
    """Call TOOL through the dispatcher and print its text payload.

    Example: tsk-docs call lookup-command -a command=run
    """
    arguments = parse_arguments(args)
    config = load_cli_config(config_path)
    context = AppContext.create(config)
    dispatcher = Dispatcher(context)

    async def _run() -> ToolResult:
        if fetch:
            await context.cache.refresh_all()
        return await dispatcher.dispatch(tool, arguments)

    result = asyncio.run(_run())
    click.echo(result.text)
    if result.is_error:
        raise SystemExit(1)


@click.command()
def tools_command() -> None:
    """List the available tools."""
    from tskdocs.mcp import tools as _tools  # noqa: F401

    for spec in registry.get_all():
        click.echo(f"{spec.name}: {spec.description}")
