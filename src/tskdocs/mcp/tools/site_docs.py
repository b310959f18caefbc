"""Site docs MCP tool."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

from pydantic import BeforeValidator, Field

from tskdocs.mcp.registry import registry
from tskdocs.mcp.tools.base import BaseParams, drop_non_string

if TYPE_CHECKING:
    from tskdocs.mcp.context import AppContext

LenientStr = Annotated[str | None, BeforeValidator(drop_non_string)]


class GetSiteDocsParams(BaseParams):
    title: LenientStr = Field(
        default=None,
        description='Title filter, e.g. "Installation Guide" or "Usage".',
    )
    search: LenientStr = Field(
        default=None,
        description="Term to search for in the documentation content.",
    )


@registry.register(
    "get-site-docs",
    "Get tsk documentation from the official site, optionally filtered by title and searched.",
    GetSiteDocsParams,
)
async def get_site_docs(ctx: AppContext, params: GetSiteDocsParams) -> str:
    return ctx.lookup.get_site_docs(title=params.title, search=params.search)
