"""Tests for mcp/errors.py module."""

from __future__ import annotations

import pytest
from fastmcp.exceptions import ToolError
from pydantic import ValidationError

from tskdocs.mcp.errors import (
    ArgumentsRequiredError,
    InvalidArgumentError,
    MCPErrorCode,
    UnknownToolError,
)
from tskdocs.mcp.tools.reference import GetExamplesParams, LookupCommandParams


def _validation_error(model, data) -> ValidationError:
    with pytest.raises(ValidationError) as exc_info:
        model.model_validate(data)
    return exc_info.value


class TestMCPErrors:
    def test_unknown_tool(self) -> None:
        error = UnknownToolError("nope", ["a", "b"])

        assert isinstance(error, ToolError)
        assert error.code == MCPErrorCode.UNKNOWN_TOOL
        assert error.message == "Unknown tool: nope"
        assert error.remediation == "Use one of: a, b"

    def test_arguments_required(self) -> None:
        error = ArgumentsRequiredError("lookup-command")

        assert error.message == "arguments object is required"
        assert error.context == {"tool": "lookup-command"}

    def test_context_kept_for_logging(self) -> None:
        error = UnknownToolError("nope", [])

        assert error.context == {"name": "nope"}
        assert str(error) == "Unknown tool: nope"


class TestFromValidation:
    def test_missing_field(self) -> None:
        exc = _validation_error(LookupCommandParams, {})

        error = InvalidArgumentError.from_validation("lookup-command", exc)

        assert error.code == MCPErrorCode.INVALID_PARAMS
        assert error.message == "command is required for lookup-command"

    def test_wrong_value(self) -> None:
        exc = _validation_error(GetExamplesParams, {"type": "rust"})

        error = InvalidArgumentError.from_validation("get-examples", exc)

        assert error.message.startswith("Invalid type for get-examples: ")
        assert error.context["errors"][0]["field"] == "type"
