"""Reference MCP tools - command, syntax and example lookups."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from pydantic import Field

from tskdocs.mcp.registry import registry
from tskdocs.mcp.tools.base import BaseParams

if TYPE_CHECKING:
    from tskdocs.mcp.context import AppContext


class LookupCommandParams(BaseParams):
    command: str = Field(description='Command name to look up (e.g. "run", "list", "init").')


class LookupSyntaxParams(BaseParams):
    key: str = Field(
        description='tasks.toml key to look up (e.g. "tasks", "env", "tasks.*.cmds", "deps").'
    )


class ListCommandsParams(BaseParams):
    pass


class GetExamplesParams(BaseParams):
    type: Literal["basic", "advanced", "multi-language", "all"] = Field(
        default="all",
        description="Kind of example to return.",
    )


@registry.register(
    "lookup-command",
    "Look up documentation for a tsk CLI command: usage, options and examples.",
    LookupCommandParams,
)
async def lookup_command(ctx: AppContext, params: LookupCommandParams) -> str:
    return ctx.lookup.lookup_command(params.command)


@registry.register(
    "lookup-syntax",
    "Look up tasks.toml syntax. Partial keys match related entries.",
    LookupSyntaxParams,
)
async def lookup_syntax(ctx: AppContext, params: LookupSyntaxParams) -> str:
    return ctx.lookup.lookup_syntax(params.key)


@registry.register(
    "list-commands",
    "List every tsk CLI command with a one-line description.",
    ListCommandsParams,
)
async def list_commands(ctx: AppContext, _params: ListCommandsParams) -> str:
    return ctx.lookup.list_commands()


@registry.register(
    "get-examples",
    "Get example tasks.toml files: basic, advanced, multi-language, or all.",
    GetExamplesParams,
)
async def get_examples(ctx: AppContext, params: GetExamplesParams) -> str:
    return ctx.lookup.get_examples(params.type)
