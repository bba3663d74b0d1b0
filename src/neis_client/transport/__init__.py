"""HTTP transports: blocking (requests) and async (aiohttp)."""

from .base import AsyncTransport, HttpResponse, Transport, redact
from .http import RequestsTransport
from .aio import AiohttpTransport

__all__ = [
    "HttpResponse",
    "Transport",
    "AsyncTransport",
    "RequestsTransport",
    "AiohttpTransport",
    "redact",
]
