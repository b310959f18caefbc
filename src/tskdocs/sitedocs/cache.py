"""Site doc cache - fetch-and-cache store for remote documentation pages.

Every seeded doc is fetched independently: one slow or broken endpoint
never blocks or fails the others. Fetch failures are terminal for that
attempt (no retries) and are turned into values, never raised:

- ``fetch_all`` / ``refresh_all`` store a diagnostic string as content
- ``get_content`` leaves the record untouched and returns None

The asymmetry between the two is long-standing caller-visible behavior
and is kept as is.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from dataclasses import replace
from datetime import UTC, datetime

import httpx
import structlog

from tskdocs.config.constants import ERROR_CONTENT_PREFIX
from tskdocs.core.errors import FetchError, NotFoundError
from tskdocs.reference.models import SiteDoc

log = structlog.get_logger(__name__)


def _now() -> datetime:
    return datetime.now(UTC)


def error_content(error: FetchError) -> str:
    """Diagnostic content stored in place of a page that failed to fetch."""
    return f"{ERROR_CONTENT_PREFIX}: {error.message}"


def is_error_content(content: str | None) -> bool:
    return content is not None and content.startswith(ERROR_CONTENT_PREFIX)


class SiteDocCache:
    """Mutable, url-keyed collection of site docs with read-through fetching.

    The set of docs is fixed at construction; records are replaced or
    updated in place but never added or removed. Concurrent misses for the
    same url are not coalesced, the last completed fetch wins.
    """

    def __init__(
        self,
        docs: Iterable[SiteDoc],
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout_sec: float = 10.0,
        user_agent: str = "tskdocs",
    ) -> None:
        self._docs: list[SiteDoc] = list(docs)
        self._index: dict[str, int] = {}
        for position, doc in enumerate(self._docs):
            self._index.setdefault(doc.url, position)
        self._transport = transport
        self._timeout = httpx.Timeout(timeout_sec)
        self._headers = {"User-Agent": user_agent}

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def docs(self) -> list[SiteDoc]:
        """Current records in seed order."""
        return list(self._docs)

    def __len__(self) -> int:
        return len(self._docs)

    def get(self, url: str) -> SiteDoc | None:
        position = self._index.get(url)
        return None if position is None else self._docs[position]

    def urls(self) -> list[str]:
        return [doc.url for doc in self._docs]

    def titles(self) -> list[str]:
        return [doc.title for doc in self._docs if doc.title]

    # -------------------------------------------------------------------------
    # Fetching
    # -------------------------------------------------------------------------

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=self._transport,
            timeout=self._timeout,
            headers=self._headers,
            follow_redirects=True,
        )

    async def _fetch_text(self, client: httpx.AsyncClient, url: str) -> str:
        """Fetch one page body. Raises FetchError on any failure."""
        try:
            response = await client.get(url)
        except Exception as e:
            # httpx errors, and anything an injected transport raises
            raise FetchError.transport(url, str(e) or type(e).__name__) from e
        if not response.is_success:
            raise FetchError.http_status(url, response.status_code)
        return response.text

    async def _fetch_record(self, client: httpx.AsyncClient, doc: SiteDoc) -> SiteDoc:
        try:
            content = await self._fetch_text(client, doc.url)
        except FetchError as e:
            log.warning(
                "site_doc_fetch_failed",
                url=doc.url,
                error_code=e.error_name,
                error=e.message,
            )
            content = error_content(e)
        else:
            log.debug("site_doc_fetched", url=doc.url, chars=len(content))
        return replace(doc, content=content, last_fetched=_now())

    async def fetch_all(self) -> list[SiteDoc]:
        """Fetch every doc concurrently and return new records in seed order.

        Stored records are not modified. The result always has one record
        per doc, each with content (real or diagnostic) and a timestamp.
        """
        snapshot = list(self._docs)
        async with self._client() as client:
            results = await asyncio.gather(*(self._fetch_record(client, doc) for doc in snapshot))
        return list(results)

    async def refresh_all(self) -> list[SiteDoc]:
        """Re-fetch every doc and overwrite the stored records positionally."""
        updated = await self.fetch_all()
        for position, doc in enumerate(updated):
            if position < len(self._docs):
                self._docs[position] = doc
        failed = sum(1 for doc in updated if is_error_content(doc.content))
        log.info("site_docs_refreshed", total=len(updated), failed=failed)
        return updated

    async def get_content(self, url: str) -> str | None:
        """Return cached content for ``url``, fetching it on a miss.

        Empty content is a miss. Diagnostic content from a failed bulk fetch
        is a hit.

        Raises:
            NotFoundError: ``url`` is not one of the seeded docs.
        """
        doc = self.get(url)
        if doc is None:
            raise NotFoundError.site_doc(url)

        if doc.is_fetched:
            return doc.content

        async with self._client() as client:
            try:
                content = await self._fetch_text(client, url)
            except FetchError as e:
                log.warning(
                    "site_doc_fetch_failed",
                    url=url,
                    error_code=e.error_name,
                    error=e.message,
                )
                return None

        current = self._docs[self._index[url]]
        current.content = content
        current.last_fetched = _now()
        log.debug("site_doc_fetched", url=url, chars=len(content))
        return content
