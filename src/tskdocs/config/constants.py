"""Configuration constants.

This module contains truly constant values that should NOT be user-configurable.
These are protocol constraints and output-format details that callers rely on.

For configurable values, see models.py (FetchConfig, DocsConfig, etc.).
"""

# =============================================================================
# Server Identity
# =============================================================================

SERVER_NAME = "tskdocs"
"""Name advertised to MCP clients."""

SERVER_INSTRUCTIONS = (
    "Reference documentation for the tsk task runner: CLI commands, "
    "tasks.toml syntax, completions, examples and the official site docs."
)

# =============================================================================
# Site Doc Search
# =============================================================================

SEARCH_CONTEXT_LINES = 2
"""Lines of context kept before and after each matching line."""

ERROR_CONTENT_PREFIX = "Error fetching content"
"""Prefix of the diagnostic content stored for a failed bulk fetch."""

# =============================================================================
# Output Formatting
# =============================================================================

SECTION_SEPARATOR = "\n\n---\n\n"
"""Separator between rendered documents and syntax elements."""

COMPLETION_JSON_INDENT = 2

# =============================================================================
# Protocol/Validation Constants
# =============================================================================

PORT_MIN = 0
PORT_MAX = 65535
"""Valid port range."""
