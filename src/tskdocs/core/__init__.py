"""Core module exports."""

from tskdocs.core.errors import (
    ConfigError,
    ErrorCode,
    FetchError,
    NotFoundError,
    TskDocsError,
)
from tskdocs.core.logging import (
    clear_request_id,
    configure_logging,
    get_logger,
    get_request_id,
    set_request_id,
)

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "FetchError",
    "NotFoundError",
    "TskDocsError",
    # Logging
    "clear_request_id",
    "configure_logging",
    "get_logger",
    "get_request_id",
    "set_request_id",
]
