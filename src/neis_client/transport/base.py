"""
Transport contract.

A transport performs one GET for a fully formed URL and returns the status
and the raw body. It does not retry, and it holds no per-call state, so one
instance can serve concurrent fetches.
"""

import re
from typing import Awaitable, NamedTuple, Protocol


class HttpResponse(NamedTuple):
    status: int
    body: bytes

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class Transport(Protocol):
    def get(self, url: str) -> HttpResponse:
        ...


class AsyncTransport(Protocol):
    def get(self, url: str) -> Awaitable[HttpResponse]:
        ...


_KEY_PATTERN = re.compile(r"(\bKEY=)[^&\s'\"]*")


def redact(text: str) -> str:
    """Mask the API key in a URL or in a message that embeds one."""
    return _KEY_PATTERN.sub(r"\1***", text)
