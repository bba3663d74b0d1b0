"""
Async HTTP transport on top of aiohttp.

The session is created lazily inside the running event loop and may be
shared by any number of concurrent fetches.
"""

from __future__ import annotations
import asyncio
import logging
from typing import Optional

import aiohttp
from yarl import URL

from ..config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from ..errors import TimeoutError, TransportError
from .base import HttpResponse, redact

logger = logging.getLogger(__name__)


class AiohttpTransport:
    """
    GET requests through an aiohttp.ClientSession.

    Args:
        session: Optional externally managed session
        timeout: Total request timeout in seconds
        user_agent: User-Agent header value
    """

    def __init__(
        self,
        session: Optional[aiohttp.ClientSession] = None,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self._session = session
        self._owns_session = session is None
        self._timeout = timeout
        self._headers = {"User-Agent": user_agent, "Accept": "application/json"}

    async def __aenter__(self) -> AiohttpTransport:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self._timeout),
                headers=self._headers,
                trust_env=True,
            )
            logger.debug("Created aiohttp session")
        return self._session

    async def get(self, url: str) -> HttpResponse:
        """
        Issue one GET request.

        Cancellation propagates unchanged.

        Raises:
            TimeoutError: If the request timed out
            TransportError: If the request could not be completed
        """
        session = self._get_session()
        try:
            # the query is already form-encoded; keep it byte for byte
            async with session.get(URL(url, encoded=True)) as response:
                body = await response.read()
                status = response.status
        except asyncio.TimeoutError as e:
            raise TimeoutError(
                f"Request timed out after {self._timeout}s",
                {"url": redact(url)},
            ) from e
        except aiohttp.ClientError as e:
            raise TransportError(
                f"HTTP request failed: {redact(str(e))}",
                {"url": redact(url)},
            ) from e

        logger.debug(f"GET {redact(url)} -> {status} ({len(body)} bytes)")
        return HttpResponse(status, body)

    async def close(self) -> None:
        """Close the session if owned by this transport."""
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None
