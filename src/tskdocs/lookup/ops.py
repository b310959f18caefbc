"""Lookup operations - command, syntax, example and site doc queries.

Every operation returns markdown. Unknown commands and syntax keys raise
NotFoundError carrying the list of valid alternatives; the tool layer
renders that as an ordinary answer.
"""

from __future__ import annotations

from tskdocs.config.constants import SECTION_SEPARATOR
from tskdocs.core.errors import NotFoundError
from tskdocs.lookup.formatting import (
    format_command,
    format_command_list,
    format_example,
    format_site_doc,
    format_syntax,
)
from tskdocs.reference.store import ReferenceStore
from tskdocs.sitedocs.cache import SiteDocCache


class LookupOps:
    """Reference and site doc lookups for the MCP tools."""

    def __init__(self, store: ReferenceStore, cache: SiteDocCache, max_content_chars: int = 2000):
        self._store = store
        self._cache = cache
        self._max_content_chars = max_content_chars

    def lookup_command(self, name: str) -> str:
        command = self._store.find_command(name)
        if command is None:
            raise NotFoundError.command(name, self._store.command_names())
        return format_command(command)

    def lookup_syntax(self, key: str) -> str:
        elements = self._store.find_syntax(key)
        if not elements:
            raise NotFoundError.syntax(key, self._store.syntax_keys())
        return SECTION_SEPARATOR.join(format_syntax(e) for e in elements)

    def list_commands(self) -> str:
        return format_command_list(self._store.all_commands())

    def get_examples(self, category: str = "all") -> str:
        examples = self._store.find_examples(category)
        if not examples:
            return f'No examples found for type "{category}".'
        return "\n\n".join(format_example(e) for e in examples)

    def get_site_docs(self, title: str | None = None, search: str | None = None) -> str:
        """Render cached site docs, optionally filtered by title and searched.

        Docs without content are reported as not yet fetched; this never
        triggers a fetch.
        """
        docs = self._cache.docs
        if title:
            needle = title.lower()
            docs = [d for d in docs if d.title and needle in d.title.lower()]

        if not docs:
            available = ", ".join(self._cache.titles())
            return f'No documentation found matching title "{title}". Available: {available}'

        return SECTION_SEPARATOR.join(
            format_site_doc(doc, search=search, max_chars=self._max_content_chars) for doc in docs
        )
