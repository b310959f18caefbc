"""MCP server module - FastMCP tool registration and wiring."""

from tskdocs.mcp.context import AppContext
from tskdocs.mcp.dispatch import Dispatcher, ToolResult
from tskdocs.mcp.registry import ToolRegistry, ToolSpec
from tskdocs.mcp.server import create_mcp_server

__all__ = [
    "AppContext",
    "Dispatcher",
    "ToolRegistry",
    "ToolResult",
    "ToolSpec",
    "create_mcp_server",
]
