"""Tests for lookup operations and markdown rendering."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from tskdocs.core.errors import ErrorCode, NotFoundError
from tskdocs.lookup.formatting import NOT_FETCHED_NOTICE, format_option, format_site_doc
from tskdocs.lookup.ops import LookupOps
from tskdocs.reference.data import COMMANDS
from tskdocs.reference.models import Command, CommandOption, SiteDoc
from tskdocs.reference.store import ReferenceStore
from tskdocs.sitedocs.cache import SiteDocCache

FETCHED_AT = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


def _ops(docs: list[SiteDoc] | None = None, max_content_chars: int = 2000) -> LookupOps:
    store = ReferenceStore.from_seed()
    return LookupOps(store, SiteDocCache(docs or []), max_content_chars=max_content_chars)


@pytest.fixture
def ops() -> LookupOps:
    return _ops()


class TestLookupCommand:
    def test_run(self, ops: LookupOps) -> None:
        store = ReferenceStore.from_seed()
        run = store.find_command("run")
        assert run is not None

        text = ops.lookup_command("run")

        assert "tsk run" in text
        assert run.description in text
        assert text.startswith("# tsk run")
        assert "**Usage:**" in text
        assert "## Options" in text
        assert "```bash" in text

    @pytest.mark.parametrize("command", COMMANDS, ids=lambda c: c.name)
    def test_every_command_shows_usage(self, ops: LookupOps, command: Command) -> None:
        text = ops.lookup_command(command.name)

        assert text.startswith(f"# tsk {command.name}")
        assert f"**Usage:** `{command.usage}`" in text

    def test_unknown_lists_available(self, ops: LookupOps) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            ops.lookup_command("nonexistent")

        assert exc_info.value.code == ErrorCode.COMMAND_NOT_FOUND
        assert 'Command "nonexistent" not found' in exc_info.value.message
        message = exc_info.value.message
        assert message.endswith(", ".join(c.name for c in COMMANDS))
        for name in ReferenceStore.from_seed().command_names():
            assert name in message

    def test_command_without_options(self, ops: LookupOps) -> None:
        text = ops.lookup_command("version")

        assert "## Options" not in text


class TestLookupSyntax:
    def test_multiple_matches_separated(self, ops: LookupOps) -> None:
        text = ops.lookup_syntax("env")

        assert "# `tasks.*.env`" in text
        assert "# `env`" in text
        assert "\n\n---\n\n" in text

    def test_unknown_lists_keys(self, ops: LookupOps) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            ops.lookup_syntax("xyz")

        assert "Available keys:" in exc_info.value.message
        assert "tasks.*.cmds" in exc_info.value.message


class TestListAndExamples:
    def test_list_commands(self, ops: LookupOps) -> None:
        text = ops.list_commands()

        assert text.startswith("# tsk Commands")
        assert "- **run**:" in text
        assert "- **version**:" in text

    def test_examples_all(self, ops: LookupOps) -> None:
        text = ops.get_examples("all")

        assert "## Basic Setup" in text
        assert "## Multi-Language Monorepo" in text
        assert "```toml" in text

    def test_examples_default_is_all(self, ops: LookupOps) -> None:
        assert ops.get_examples() == ops.get_examples("all")

    def test_examples_no_match(self, ops: LookupOps) -> None:
        assert ops.get_examples("rust") == 'No examples found for type "rust".'


class TestFormatOption:
    def test_flag_with_shorthand_default_and_values(self) -> None:
        option = CommandOption(
            name="output",
            shorthand="o",
            description="Format.",
            type="string",
            default="text",
            valid_values=("text", "markdown"),
        )

        line = format_option(option)

        assert line.startswith("- `--output, -o` (string): Format.")
        assert "Default: `text`." in line
        assert "Valid values: text, markdown." in line

    def test_boolean_default(self) -> None:
        option = CommandOption(name="pure", description="Pure.", type="boolean", default=False)

        assert "Default: `false`." in format_option(option)


class TestGetSiteDocs:
    def test_not_fetched_notice(self) -> None:
        ops = _ops([SiteDoc(url="https://e.com/a.md", title="Core Concepts")])

        text = ops.get_site_docs()

        assert text.startswith("# Core Concepts\n\nURL: https://e.com/a.md\n\n")
        assert NOT_FETCHED_NOTICE in text
        assert "Last fetched" not in text

    def test_full_content_with_timestamp(self) -> None:
        doc = SiteDoc(url="u", title="T", content="hello", last_fetched=FETCHED_AT)

        text = _ops([doc]).get_site_docs()

        assert "hello" in text
        assert f"*Last fetched: {FETCHED_AT.isoformat()}*" in text

    def test_truncation(self) -> None:
        doc = SiteDoc(url="u", title="T", content="x" * 50)

        text = _ops([doc], max_content_chars=10).get_site_docs()

        assert "x" * 10 + "\n\n[Content truncated - 50 total characters]" in text
        assert "x" * 11 not in text

    def test_title_filter_case_insensitive(self) -> None:
        docs = [
            SiteDoc(url="a", title="Installation Guide", content="install"),
            SiteDoc(url="b", title="Usage Documentation", content="usage"),
        ]

        text = _ops(docs).get_site_docs(title="install")

        assert "# Installation Guide" in text
        assert "Usage Documentation" not in text

    def test_title_no_match_lists_available(self) -> None:
        docs = [SiteDoc(url="a", title="Core Concepts"), SiteDoc(url="b", title="Usage")]

        text = _ops(docs).get_site_docs(title="missing")

        assert text == 'No documentation found matching title "missing". Available: Core Concepts, Usage'

    def test_search_hits(self) -> None:
        doc = SiteDoc(url="u", title="T", content="one\ntwo\nbrew install tsk\nthree")

        text = _ops([doc]).get_site_docs(search="BREW")

        assert '**Search results for "BREW":**' in text
        assert "...line 1-4:" in text

    def test_search_no_hits(self) -> None:
        doc = SiteDoc(url="u", title="T", content="nothing here")

        text = _ops([doc]).get_site_docs(search="zzz")

        assert 'No matches found for search term "zzz" in this document.' in text

    def test_search_ignores_truncation(self) -> None:
        content = "a" * 100 + "\nneedle"
        doc = SiteDoc(url="u", title="T", content=content)

        text = _ops([doc], max_content_chars=10).get_site_docs(search="needle")

        assert "Content truncated" not in text
        assert "needle" in text

    def test_multiple_docs_separated(self) -> None:
        docs = [SiteDoc(url="a", title="A", content="1"), SiteDoc(url="b", title="B", content="2")]

        text = _ops(docs).get_site_docs()

        assert text.split("\n\n---\n\n")[1].startswith("# B")

    def test_empty_content_renders_not_fetched(self) -> None:
        doc = SiteDoc(url="u", title="T", content="", last_fetched=FETCHED_AT)

        text = _ops([doc]).get_site_docs()

        assert text == "# T\n\nURL: u\n\n" + NOT_FETCHED_NOTICE

    def test_format_site_doc_never_fetches(self) -> None:
        doc = SiteDoc(url="u", title="T")

        assert format_site_doc(doc, search="x", max_chars=10).endswith(NOT_FETCHED_NOTICE)
