"""Completion MCP tool."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from pydantic import Field

from tskdocs.config.constants import COMPLETION_JSON_INDENT
from tskdocs.mcp.registry import registry
from tskdocs.mcp.tools.base import BaseParams

if TYPE_CHECKING:
    from tskdocs.mcp.context import AppContext


class GetCompletionParams(BaseParams):
    context: str = Field(description="tasks.toml text before the cursor.")
    line_prefix: str = Field(default="", description="Text on the current line before the cursor.")


@registry.register(
    "get-completion",
    "Suggest tasks.toml completions for the text before the cursor. Returns JSON.",
    GetCompletionParams,
)
async def get_completion(ctx: AppContext, params: GetCompletionParams) -> str:
    result = ctx.completion.complete(params.context, params.line_prefix)
    return json.dumps(result.to_wire(), indent=COMPLETION_JSON_INDENT)
