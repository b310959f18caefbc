"""Config module exports."""

from tskdocs.config.loader import load_config
from tskdocs.config.models import (
    DocsConfig,
    FetchConfig,
    LoggingConfig,
    ServerConfig,
    SiteDocSource,
    TskDocsConfig,
)

__all__ = [
    "load_config",
    "DocsConfig",
    "FetchConfig",
    "LoggingConfig",
    "ServerConfig",
    "SiteDocSource",
    "TskDocsConfig",
]
