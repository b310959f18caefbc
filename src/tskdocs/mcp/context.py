"""Application context for MCP handlers.

Single object passed to all tool handlers. Owns the only mutable shared
state (the site doc cache); tests build a fresh context per case.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from tskdocs.completion.engine import CompletionEngine
    from tskdocs.config.models import TskDocsConfig
    from tskdocs.lookup.ops import LookupOps
    from tskdocs.reference.store import ReferenceStore
    from tskdocs.sitedocs.cache import SiteDocCache


@dataclass
class AppContext:
    """Context object passed to all MCP tool handlers."""

    config: TskDocsConfig
    store: ReferenceStore
    cache: SiteDocCache
    completion: CompletionEngine
    lookup: LookupOps

    @classmethod
    def create(
        cls,
        config: TskDocsConfig | None = None,
        *,
        store: ReferenceStore | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> AppContext:
        """Factory to create context with all ops wired together.

        Args:
            config: Resolved configuration (defaults if omitted)
            store: Reference catalog (built-in seed if omitted)
            transport: httpx transport used for doc fetches (network if omitted)
        """
        from tskdocs.completion.engine import CompletionEngine
        from tskdocs.config.models import TskDocsConfig
        from tskdocs.lookup.ops import LookupOps
        from tskdocs.reference.data import seed_site_docs
        from tskdocs.reference.models import SiteDoc
        from tskdocs.reference.store import ReferenceStore
        from tskdocs.sitedocs.cache import SiteDocCache

        config = config or TskDocsConfig()
        store = store or ReferenceStore.from_seed()

        if config.docs.sources is not None:
            docs = [SiteDoc(url=s.url, title=s.title) for s in config.docs.sources]
        else:
            docs = seed_site_docs()

        cache = SiteDocCache(
            docs,
            transport=transport,
            timeout_sec=config.fetch.timeout_sec,
            user_agent=config.fetch.user_agent,
        )

        return cls(
            config=config,
            store=store,
            cache=cache,
            completion=CompletionEngine(store),
            lookup=LookupOps(store, cache, max_content_chars=config.docs.max_content_chars),
        )
