"""Entry point for ``python -m tskdocs``."""

from tskdocs.cli.main import cli

if __name__ == "__main__":
    cli()
