"""Shared fixtures for site doc tests."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable

import httpx
import pytest

from tskdocs.reference.models import SiteDoc

URL_A = "https://docs.example.com/a.md"
URL_B = "https://docs.example.com/b.md"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that counts requests per URL."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.calls: Counter[str] = Counter()

        def recording(request: httpx.Request) -> httpx.Response:
            self.calls[str(request.url)] += 1
            return handler(request)

        super().__init__(recording)


@pytest.fixture
def docs() -> list[SiteDoc]:
    return [SiteDoc(url=URL_A, title="Doc A"), SiteDoc(url=URL_B, title="Doc B")]


@pytest.fixture
def make_transport() -> Callable[[dict[str, int | str | Exception]], RecordingTransport]:
    """Build a transport from a url -> body / status / exception table."""

    def factory(table: dict[str, int | str | Exception]) -> RecordingTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            outcome = table[str(request.url)]
            if isinstance(outcome, Exception):
                raise outcome
            if isinstance(outcome, int):
                return httpx.Response(outcome, text="")
            return httpx.Response(200, text=outcome)

        return RecordingTransport(handler)

    return factory
