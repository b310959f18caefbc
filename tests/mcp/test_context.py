"""Tests for AppContext wiring."""

from __future__ import annotations

from tskdocs.config.models import DocsConfig, SiteDocSource, TskDocsConfig
from tskdocs.mcp.context import AppContext
from tskdocs.reference.data import seed_site_docs
from tskdocs.reference.models import Command
from tskdocs.reference.store import ReferenceStore


class TestAppContextCreate:
    def test_defaults_use_seeded_docs(self) -> None:
        context = AppContext.create()

        assert context.cache.urls() == [d.url for d in seed_site_docs()]
        assert context.store.find_command("run") is not None

    def test_configured_sources_replace_seed(self) -> None:
        config = TskDocsConfig(
            docs=DocsConfig(sources=[SiteDocSource(url="https://e.com/x.md", title="X")])
        )

        context = AppContext.create(config)

        assert context.cache.urls() == ["https://e.com/x.md"]
        assert context.cache.titles() == ["X"]

    def test_custom_store(self) -> None:
        store = ReferenceStore.from_seed(
            commands=[Command(name="only", description="d", usage="tsk only")]
        )

        context = AppContext.create(store=store)

        assert context.lookup.list_commands() == "# tsk Commands\n\n- **only**: d"

    def test_contexts_do_not_share_cache(self) -> None:
        first = AppContext.create()
        second = AppContext.create()

        first.cache.docs[0].content = "changed"

        assert second.cache.docs[0].content is None

    def test_max_content_chars_from_config(self) -> None:
        config = TskDocsConfig(
            docs=DocsConfig(
                max_content_chars=5,
                sources=[SiteDocSource(url="u", title="T")],
            )
        )
        context = AppContext.create(config)
        context.cache.docs[0].content = "abcdefghij"

        assert "[Content truncated - 10 total characters]" in context.lookup.get_site_docs()
