"""FastMCP server creation and wiring.

Every registered tool is exposed with the flat JSON schema of its params
model and delegates to the Dispatcher, so FastMCP only ever sees a text
payload. Startup fetches the site docs once; failures there never stop
the server.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

import structlog
from fastmcp.utilities.json_schema import dereference_refs

if TYPE_CHECKING:
    from fastmcp import FastMCP

    from tskdocs.config.models import TskDocsConfig
    from tskdocs.mcp.context import AppContext
    from tskdocs.mcp.dispatch import Dispatcher
    from tskdocs.mcp.registry import ToolSpec

log = structlog.get_logger(__name__)


def create_mcp_server(context: AppContext) -> FastMCP:
    """Create FastMCP server with all tools wired to context.

    Args:
        context: AppContext with the reference store and site doc cache

    Returns:
        Configured FastMCP server ready to run
    """
    from fastmcp import FastMCP

    from tskdocs.config.constants import SERVER_INSTRUCTIONS, SERVER_NAME
    from tskdocs.mcp.dispatch import Dispatcher
    from tskdocs.mcp.registry import registry

    dispatcher = Dispatcher(context)

    log.info("mcp_server_creating", docs=len(context.cache))

    mcp = FastMCP(SERVER_NAME, instructions=SERVER_INSTRUCTIONS)

    tool_count = 0
    for spec in registry.get_all():
        _wire_tool(mcp, spec, dispatcher)
        tool_count += 1

    log.info("mcp_server_created", tool_count=tool_count)

    return mcp


def _wire_tool(mcp: FastMCP, spec: ToolSpec, dispatcher: Dispatcher) -> None:
    """Wire a single tool spec to FastMCP.

    The handler takes the params model's fields as direct keyword
    arguments so FastMCP advertises a flat schema, then hands the raw
    arguments to the dispatcher for validation.
    """
    from fastmcp.tools.tool import FunctionTool

    flat_schema = dereference_refs(spec.params_model.model_json_schema())
    tool_name = spec.name

    async def handler(**kwargs: Any) -> str:
        result = await dispatcher.dispatch(tool_name, kwargs)
        return result.text

    tool = FunctionTool(
        name=spec.name,
        description=spec.description,
        parameters=flat_schema,
        fn=handler,
    )

    mcp.add_tool(tool)


async def refresh_site_docs(context: AppContext) -> None:
    """Startup refresh. Any failure is logged and the server keeps going."""
    log.info("site_docs_fetching", docs=len(context.cache))
    try:
        await context.cache.refresh_all()
    except Exception as e:
        log.warning("site_docs_fetch_failed", error=str(e))
        log.debug("site_docs_fetch_failed_traceback", exc_info=True)


def run_server(config: TskDocsConfig, *, refresh: bool | None = None) -> None:
    """Create and run the MCP server.

    Args:
        config: Resolved configuration
        refresh: Override config.fetch.refresh_on_startup
    """
    from tskdocs.core.logging import configure_logging
    from tskdocs.mcp.context import AppContext

    configure_logging(config=config.logging)

    context = AppContext.create(config)

    if refresh if refresh is not None else config.fetch.refresh_on_startup:
        asyncio.run(refresh_site_docs(context))

    mcp = create_mcp_server(context)

    log.info("mcp_server_running", transport=config.server.transport)
    if config.server.transport == "http":
        mcp.run(transport="http", host=config.server.host, port=config.server.port)
    else:
        mcp.run()
