"""tskdocs CLI - tsk-docs command."""

import click

from tskdocs import __version__
from tskdocs.cli.call import call_command, tools_command
from tskdocs.cli.fetch import fetch_command
from tskdocs.cli.serve import serve_command
from tskdocs.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="tsk-docs")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """tskdocs - tsk task runner reference server for AI coding agents."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "INFO")


cli.add_command(serve_command, name="serve")
cli.add_command(fetch_command, name="fetch")
cli.add_command(call_command, name="call")
cli.add_command(tools_command, name="tools")


if __name__ == "__main__":
    cli()
