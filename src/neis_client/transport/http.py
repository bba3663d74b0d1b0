"""
Blocking HTTP transport on top of requests.
"""

from __future__ import annotations
import logging
from typing import Optional

import requests

from ..config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from ..errors import TimeoutError, TransportError
from .base import HttpResponse, redact

logger = logging.getLogger(__name__)


class RequestsTransport:
    """
    GET requests through a shared requests.Session.

    Args:
        session: Optional requests.Session for connection pooling
        timeout: Request timeout in seconds
        user_agent: User-Agent header value
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self._session = session or requests.Session()
        self._owns_session = session is None
        self._timeout = timeout
        self._headers = {"User-Agent": user_agent, "Accept": "application/json"}

    @property
    def timeout(self) -> float:
        return self._timeout

    def get(self, url: str) -> HttpResponse:
        """
        Issue one GET request.

        Raises:
            TimeoutError: If the request timed out
            TransportError: If the request could not be completed
        """
        try:
            response = self._session.get(url, headers=self._headers, timeout=self._timeout)
        except requests.exceptions.Timeout as e:
            raise TimeoutError(
                f"Request timed out after {self._timeout}s",
                {"url": redact(url)},
            ) from e
        except requests.exceptions.RequestException as e:
            raise TransportError(
                f"HTTP request failed: {redact(str(e))}",
                {"url": redact(url)},
            ) from e

        logger.debug(f"GET {redact(url)} -> {response.status_code} ({len(response.content)} bytes)")
        return HttpResponse(response.status_code, response.content)

    def close(self) -> None:
        """Close the HTTP session if owned by this transport."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> RequestsTransport:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

