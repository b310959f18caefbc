"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (TSKDOCS__SECTION__KEY)
3. YAML file (--config path, or ~/.config/tskdocs/config.yaml)
4. Built-in defaults (this file)

Environment Variable Format:
    TSKDOCS__<SECTION>__<KEY>=<VALUE>

Examples:
    TSKDOCS__LOGGING__LEVEL=DEBUG
    TSKDOCS__FETCH__TIMEOUT_SEC=5
    TSKDOCS__FETCH__REFRESH_ON_STARTUP=false
    TSKDOCS__SERVER__TRANSPORT=http
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from tskdocs.config.constants import PORT_MAX, PORT_MIN

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        TSKDOCS__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every fetch and tool call.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class ServerConfig(BaseModel):
    """MCP server configuration.

    Env vars:
        TSKDOCS__SERVER__TRANSPORT: stdio (default) or http
        TSKDOCS__SERVER__HOST: Bind address for http transport
        TSKDOCS__SERVER__PORT: Port for http transport
    """

    transport: Literal["stdio", "http"] = Field(
        default="stdio",
        description="MCP transport. stdio for editor integrations, http for remote clients.",
    )
    host: str = Field(default="127.0.0.1", description="Bind address (http transport only).")
    port: int = Field(default=7655, description="Port (http transport only).")

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not (PORT_MIN <= v <= PORT_MAX):
            raise ValueError(f"Port must be {PORT_MIN}-{PORT_MAX}, got {v}")
        return v


class FetchConfig(BaseModel):
    """Remote documentation fetch configuration.

    Env vars:
        TSKDOCS__FETCH__TIMEOUT_SEC: Per-request timeout
        TSKDOCS__FETCH__REFRESH_ON_STARTUP: Fetch all site docs before serving
    """

    timeout_sec: float = Field(
        default=10.0,
        gt=0,
        description="Per-request timeout. A hung endpoint only delays its own document.",
    )
    user_agent: str = Field(default="tskdocs", description="User-Agent header for doc fetches.")
    refresh_on_startup: bool = Field(
        default=True,
        description="Fetch every site doc before the server starts accepting calls.",
    )


class SiteDocSource(BaseModel):
    """A remote document to seed the site doc cache with."""

    url: str
    title: str | None = None


class DocsConfig(BaseModel):
    """Site doc presentation and sources.

    Env vars:
        TSKDOCS__DOCS__MAX_CONTENT_CHARS: Truncation limit for unfiltered doc output
    """

    max_content_chars: int = Field(
        default=2000,
        ge=1,
        description="Documents longer than this are truncated when shown without a search term.",
    )
    sources: list[SiteDocSource] | None = Field(
        default=None,
        description="Override the built-in list of site docs. Order is preserved.",
    )


class TskDocsConfig(BaseModel):
    """Root configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    fetch: FetchConfig = Field(default_factory=FetchConfig)
    docs: DocsConfig = Field(default_factory=DocsConfig)
