"""
Scripted transports for exercising the fetch engine without a network.
"""

from __future__ import annotations
from typing import List, Sequence, Union

from neis_client.transport.base import HttpResponse

Scripted = Union[HttpResponse, Exception]


class MockTransport:
    """
    Blocking transport that replays a fixed sequence of responses.

    Each entry is either an HttpResponse to return or an exception to raise.
    Every requested URL is recorded in ``urls``.
    """

    def __init__(self, responses: Sequence[Scripted]):
        self._responses = list(responses)
        self.urls: List[str] = []
        self.closed = False

    @property
    def call_count(self) -> int:
        return len(self.urls)

    def _next(self, url: str) -> HttpResponse:
        self.urls.append(url)
        if not self._responses:
            raise AssertionError(f"Unexpected request #{len(self.urls)}: {url}")
        item = self._responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def get(self, url: str) -> HttpResponse:
        return self._next(url)

    def close(self) -> None:
        self.closed = True


class AsyncMockTransport(MockTransport):
    """Async flavour of MockTransport."""

    async def get(self, url: str) -> HttpResponse:
        return self._next(url)

    async def close(self) -> None:
        self.closed = True


def ok(body: bytes) -> HttpResponse:
    return HttpResponse(200, body)
