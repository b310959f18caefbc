"""tsk-docs fetch command - fetch site docs and report their state."""

import asyncio
import time
from pathlib import Path

import click

from tskdocs.cli.utils import config_option, load_cli_config
from tskdocs.core.errors import NotFoundError
from tskdocs.mcp.context import AppContext
from tskdocs.reference.models import SiteDoc
from tskdocs.sitedocs.cache import SiteDocCache, is_error_content


def _echo_doc(doc: SiteDoc) -> None:
    click.echo(f"- {doc.title or doc.url}:")
    click.echo(f"  URL: {doc.url}")
    size = f"{len(doc.content)} characters" if doc.content is not None else "No content"
    click.echo(f"  Content: {size}")
    fetched = doc.last_fetched.isoformat() if doc.last_fetched else "Never"
    click.echo(f"  Last fetched: {fetched}")
    if is_error_content(doc.content):
        click.echo(f"  Error: {doc.content}")


async def _fetch_one(cache: SiteDocCache, url: str) -> str | None:
    try:
        return await cache.get_content(url)
    except NotFoundError as e:
        raise click.ClickException(e.message) from e


@click.command()
@click.option("--url", default=None, help="Fetch a single doc by URL (uses the cache)")
@config_option
def fetch_command(url: str | None, config_path: Path | None) -> None:
    """Fetch the tsk site docs and print what was retrieved."""
    config = load_cli_config(config_path)
    context = AppContext.create(config)
    cache = context.cache

    if url is not None:
        content = asyncio.run(_fetch_one(cache, url))
        if content is None:
            raise click.ClickException(f"Could not fetch {url}")
        click.echo(content)
        return

    click.echo("Initial state:")
    for doc in cache.docs:
        click.echo(f"- {doc.title}: {'Has content' if doc.content is not None else 'No content'}")

    click.echo("\nFetching documentation...")
    start = time.perf_counter()
    asyncio.run(cache.refresh_all())
    elapsed_ms = int((time.perf_counter() - start) * 1000)
    click.echo(f"\nFetch completed in {elapsed_ms}ms\n")

    click.echo("Updated state:")
    for doc in cache.docs:
        _echo_doc(doc)
