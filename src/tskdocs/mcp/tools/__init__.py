"""MCP tool handlers."""

from tskdocs.mcp.tools import (
    completion,
    reference,
    site_docs,
)

__all__ = [
    "completion",
    "reference",
    "site_docs",
]
