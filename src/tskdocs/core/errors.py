"""tskdocs error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Not found
- 4xxx: Fetch
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2004

    # Not found (3xxx)
    COMMAND_NOT_FOUND = 3001
    SYNTAX_NOT_FOUND = 3002
    SITE_DOC_NOT_FOUND = 3003

    # Fetch (4xxx)
    FETCH_TRANSPORT_ERROR = 4001
    FETCH_HTTP_ERROR = 4002


@dataclass(frozen=True, slots=True)
class TskDocsError(Exception):
    """Base error with structured context for tool responses."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'SITE_DOC_NOT_FOUND')."""
        return self.code.name

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(TskDocsError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class NotFoundError(TskDocsError):
    """Lookup misses for commands, syntax keys and site docs."""

    @classmethod
    def command(cls, name: str, available: list[str]) -> "NotFoundError":
        return cls(
            code=ErrorCode.COMMAND_NOT_FOUND,
            message=f'Command "{name}" not found. Available commands: {", ".join(available)}',
            details={"name": name, "available": available},
        )

    @classmethod
    def syntax(cls, key: str, available: list[str]) -> "NotFoundError":
        return cls(
            code=ErrorCode.SYNTAX_NOT_FOUND,
            message=f'No syntax found for key "{key}". Available keys: {", ".join(available)}',
            details={"key": key, "available": available},
        )

    @classmethod
    def site_doc(cls, url: str) -> "NotFoundError":
        return cls(
            code=ErrorCode.SITE_DOC_NOT_FOUND,
            message=f"Site doc not found for URL: {url}",
            details={"url": url},
        )


class FetchError(TskDocsError):
    """A single remote document fetch failed."""

    @classmethod
    def transport(cls, url: str, reason: str) -> "FetchError":
        return cls(
            code=ErrorCode.FETCH_TRANSPORT_ERROR,
            message=reason,
            details={"url": url},
        )

    @classmethod
    def http_status(cls, url: str, status: int) -> "FetchError":
        return cls(
            code=ErrorCode.FETCH_HTTP_ERROR,
            message=f"Failed to fetch {url}: {status}",
            details={"url": url, "status": status},
        )
