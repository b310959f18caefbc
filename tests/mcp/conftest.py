"""Shared fixtures for MCP tests."""

from __future__ import annotations

from collections.abc import Generator

import httpx
import pytest

from tskdocs.config.models import DocsConfig, SiteDocSource, TskDocsConfig
from tskdocs.mcp.context import AppContext
from tskdocs.mcp.registry import ToolRegistry, registry

DOC_URL = "https://docs.example.com/usage.md"
DOC_BODY = "# Usage\n\nRun tasks with tsk run.\n\nInstall with brew.\n"


@pytest.fixture
def clean_registry() -> Generator[ToolRegistry, None, None]:
    """Clear and yield the global registry, restore after test."""
    original_tools = dict(registry._tools)
    registry.clear()
    yield registry
    registry._tools = original_tools


@pytest.fixture
def transport() -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        if str(request.url) == DOC_URL:
            return httpx.Response(200, text=DOC_BODY)
        return httpx.Response(404)

    return httpx.MockTransport(handler)


@pytest.fixture
def app_context(transport: httpx.MockTransport) -> AppContext:
    """Fresh context with a single mocked site doc."""
    config = TskDocsConfig(
        docs=DocsConfig(sources=[SiteDocSource(url=DOC_URL, title="Usage Documentation")]),
    )
    return AppContext.create(config, transport=transport)
