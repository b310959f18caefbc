"""Structured error system for MCP tools.

Provides typed exceptions with error codes and remediation hints.
Enables agents to understand failures and self-correct.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from fastmcp.exceptions import ToolError
from pydantic import ValidationError


class MCPErrorCode(StrEnum):
    """Machine-readable error codes for MCP tool failures."""

    # Request errors - agent should fix the call
    UNKNOWN_TOOL = "UNKNOWN_TOOL"
    ARGUMENTS_REQUIRED = "ARGUMENTS_REQUIRED"
    INVALID_PARAMS = "INVALID_PARAMS"


class MCPError(ToolError):
    """Base exception for MCP tool errors with structured response.

    Extends FastMCP's ToolError so FastMCP passes it through unchanged if
    it ever escapes the dispatcher.
    """

    def __init__(
        self,
        code: MCPErrorCode,
        message: str,
        remediation: str,
        **context: Any,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.remediation = remediation
        self.context = context


# =============================================================================
# Specific Error Classes
# =============================================================================


class UnknownToolError(MCPError):
    """Raised when a call names a tool that is not registered."""

    def __init__(self, name: str, available: list[str]) -> None:
        super().__init__(
            code=MCPErrorCode.UNKNOWN_TOOL,
            message=f"Unknown tool: {name}",
            remediation=f"Use one of: {', '.join(available)}",
            name=name,
        )


class ArgumentsRequiredError(MCPError):
    """Raised when a tool with required parameters is called without arguments."""

    def __init__(self, tool: str) -> None:
        super().__init__(
            code=MCPErrorCode.ARGUMENTS_REQUIRED,
            message="arguments object is required",
            remediation="Pass an arguments object with the tool's required parameters.",
            tool=tool,
        )


class InvalidArgumentError(MCPError):
    """Raised when tool arguments are missing or have the wrong shape."""

    def __init__(self, tool: str, message: str, errors: list[dict[str, str]] | None = None) -> None:
        super().__init__(
            code=MCPErrorCode.INVALID_PARAMS,
            message=message,
            remediation="Check the tool's input schema and resend the call.",
            tool=tool,
            errors=errors or [],
        )

    @classmethod
    def from_validation(cls, tool: str, exc: ValidationError) -> InvalidArgumentError:
        """Summarize a pydantic ValidationError, leading with the first problem."""
        errors = [
            {"field": ".".join(str(x) for x in err["loc"]) or "arguments", "message": err["msg"]}
            for err in exc.errors()[:5]
        ]
        if not errors:
            return cls(tool, f"Invalid arguments for {tool}")
        first = errors[0]
        if first["message"] == "Field required":
            message = f"{first['field']} is required for {tool}"
        else:
            message = f"Invalid {first['field']} for {tool}: {first['message']}"
        return cls(tool, message, errors)
