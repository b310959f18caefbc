"""Request dispatch - route a tool call to its handler and normalize the outcome.

Every call, successful or not, ends as a ToolResult carrying one text
payload. Nothing raised by validation or a handler crosses this boundary.
"""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import structlog
from pydantic import ValidationError

from tskdocs.core.errors import NotFoundError, TskDocsError
from tskdocs.core.logging import clear_request_id, set_request_id
from tskdocs.mcp.errors import (
    ArgumentsRequiredError,
    InvalidArgumentError,
    MCPError,
    UnknownToolError,
)
from tskdocs.mcp.registry import ToolRegistry, registry

if TYPE_CHECKING:
    from tskdocs.mcp.context import AppContext

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ToolResult:
    """Uniform tool outcome: a single text payload."""

    text: str
    is_error: bool = False


def _extract_log_params(arguments: Any) -> dict[str, Any]:
    """Key params for the tool_start log line, with long strings truncated."""
    params: dict[str, Any] = {}
    if not isinstance(arguments, Mapping):
        return params
    for key, value in arguments.items():
        if isinstance(value, str) and len(value) > 50:
            params[key] = value[:50] + "..."
        elif value is not None:
            params[key] = value
    return params


async def guarded(tool_name: str, call: Callable[[], Awaitable[str]]) -> ToolResult:
    """Run ``call`` inside the error boundary.

    - NotFoundError: the message (with its alternatives) is the answer
    - MCPError / TskDocsError: "Error: <message>", logged as a warning
    - anything else: "Error: <message>", logged as an error with traceback at debug
    """
    start_time = time.perf_counter()

    def elapsed_ms() -> int:
        return int((time.perf_counter() - start_time) * 1000)

    try:
        text = await call()
    except NotFoundError as e:
        log.info("tool_not_found", tool=tool_name, error_code=e.error_name, elapsed_ms=elapsed_ms())
        return ToolResult(text=e.message)
    except MCPError as e:
        log.warning(
            "tool_error",
            tool=tool_name,
            error_code=e.code.value,
            error=e.message,
            remediation=e.remediation,
            elapsed_ms=elapsed_ms(),
        )
        return ToolResult(text=f"Error: {e.message}", is_error=True)
    except TskDocsError as e:
        log.warning(
            "tool_error",
            tool=tool_name,
            error_code=e.error_name,
            error=e.message,
            elapsed_ms=elapsed_ms(),
        )
        return ToolResult(text=f"Error: {e.message}", is_error=True)
    except Exception as e:
        log.error("tool_internal_error", tool=tool_name, error=str(e), elapsed_ms=elapsed_ms())
        log.debug("tool_internal_error_traceback", tool=tool_name, exc_info=True)
        return ToolResult(text=f"Error: {e or type(e).__name__}", is_error=True)

    log.info("tool_complete", tool=tool_name, elapsed_ms=elapsed_ms(), chars=len(text))
    return ToolResult(text=text)


class Dispatcher:
    """Maps a tool name and raw arguments to a registered handler."""

    def __init__(self, context: AppContext, tools: ToolRegistry | None = None) -> None:
        # Import tools to trigger registration
        from tskdocs.mcp import tools as _tools  # noqa: F401

        self._context = context
        self._tools = tools or registry

    @property
    def tool_names(self) -> list[str]:
        return self._tools.names()

    async def dispatch(self, name: str, arguments: Mapping[str, Any] | None) -> ToolResult:
        set_request_id()
        log.info("tool_start", tool=name, args=_extract_log_params(arguments))
        try:
            return await guarded(name, lambda: self._invoke(name, arguments))
        finally:
            clear_request_id()

    async def _invoke(self, name: str, arguments: Mapping[str, Any] | None) -> str:
        spec = self._tools.get(name)
        if spec is None:
            raise UnknownToolError(name, self._tools.names())

        if arguments is None:
            if spec.requires_arguments:
                raise ArgumentsRequiredError(name)
            arguments = {}
        elif not isinstance(arguments, Mapping):
            raise InvalidArgumentError(name, "arguments must be an object")

        try:
            params = spec.params_model.model_validate(dict(arguments))
        except ValidationError as e:
            raise InvalidArgumentError.from_validation(name, e) from e

        return await spec.handler(self._context, params)
