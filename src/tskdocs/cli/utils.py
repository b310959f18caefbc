"""CLI utilities."""

from pathlib import Path

import click

from tskdocs.config.loader import load_config
from tskdocs.config.models import TskDocsConfig
from tskdocs.core.errors import ConfigError

config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML config file (default: ~/.config/tskdocs/config.yaml if present)",
)


def load_cli_config(config_path: Path | None, **overrides: object) -> TskDocsConfig:
    """Load config, turning ConfigError into a clean CLI failure."""
    try:
        return load_config(config_path, **overrides)
    except ConfigError as e:
        raise click.ClickException(e.message) from e


def parse_arguments(pairs: tuple[str, ...]) -> dict[str, str]:
    """Parse repeated ``key=value`` options into a dict.

    Raises:
        click.BadParameter: If an item has no ``=``.
    """
    arguments: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"Expected key=value, got '{pair}'", param_hint="--arg")
        arguments[key] = value
    return arguments
