"""tskdocs - MCP server exposing tsk task runner reference documentation."""

__version__ = "0.1.0"
