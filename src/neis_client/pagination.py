"""
Paginated fetch engine.

One Paginator drives every resource: it builds each page's URL, and
consume() decides from the decoded page whether another one is needed. The
blocking and async loops below only move bytes between a transport and the
paginator, so the paging rules live in one place.

Pages are fetched strictly in sequence; whether page n+1 exists depends on
the total count reported with page n.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from typing import Generic, List, Optional, Tuple, TypeVar
from urllib.parse import urlencode

from .config import DEFAULT_BASE_URL, DEFAULT_PAGE_SIZE
from .envelope import Envelope, ResourceEnvelope, ResultEnvelope, decode_envelope
from .errors import ApiResultError, DecodeError, ErrorCode, HttpStatusError
from .extract import Extractor, extractor_for
from .resources import Resource
from .transport.base import AsyncTransport, HttpResponse, Transport, redact

logger = logging.getLogger(__name__)

T = TypeVar("T")

AUTH_KEY_PARAM = "KEY"
FORMAT_PARAM = "Type"
PAGE_INDEX_PARAM = "pIndex"
PAGE_SIZE_PARAM = "pSize"


@dataclass(frozen=True)
class PageCursor:
    """Position of a fetch: 1-based page index and rows per page."""
    index: int = 1
    size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.index < 1:
            raise ValueError(f"page index must be >= 1, got {self.index}")
        if self.size <= 0:
            raise ValueError(f"page size must be positive, got {self.size}")

    def advance(self) -> PageCursor:
        return replace(self, index=self.index + 1)

    def covers(self, total: int) -> bool:
        """Whether pages up to and including this one hold all ``total`` rows."""
        return total <= self.index * self.size


class Paginator(Generic[T]):
    """
    State of one paginated fetch.

    Owns the page cursor and the accumulated rows. Neither outlives the
    fetch call, and rows of a page are appended only once that page has been
    fully decoded.

    Args:
        api_key: API key sent as KEY
        resource: Resource to fetch
        query: Pre-encoded resource query (``to_query_string()`` output)
        page_size: Rows per page
        base_url: API base URL
        extractor: Extractor for the caller's record type; defaults to the
            one registered for ``resource``
        strict_results: Raise on error results instead of treating them as empty
    """

    def __init__(
        self,
        api_key: str,
        resource: Resource,
        query: str = "",
        page_size: int = DEFAULT_PAGE_SIZE,
        base_url: str = DEFAULT_BASE_URL,
        extractor: Optional[Extractor[T]] = None,
        strict_results: bool = False,
    ):
        self.resource = resource
        self.cursor = PageCursor(size=page_size)
        self.items: List[T] = []
        self.requests = 0
        self.total_count: Optional[int] = None

        self._api_key = api_key
        self._query = query
        self._base_url = base_url.rstrip("/")
        self._extractor: Extractor[T] = extractor or extractor_for(resource)
        self._strict = strict_results

    def next_url(self) -> str:
        """URL of the page the cursor points at."""
        common = urlencode([
            (AUTH_KEY_PARAM, self._api_key),
            (FORMAT_PARAM, "json"),
            (PAGE_INDEX_PARAM, self.cursor.index),
            (PAGE_SIZE_PARAM, self.cursor.size),
        ])
        url = f"{self._base_url}/hub/{self.resource.path}?{common}"
        if self._query:
            url = f"{url}&{self._query}"
        return url

    def consume(self, response: HttpResponse) -> bool:
        """
        Take one page's response.

        Args:
            response: Status and raw body of the page request

        Returns:
            True if another page must be fetched; the cursor has then advanced

        Raises:
            HttpStatusError: If the status is not a 2xx
            DecodeError: If the body is not a known envelope
            ApiResultError: In strict mode, if the API reported an error result
        """
        self.requests += 1
        if not response.ok:
            raise HttpStatusError(
                response.status,
                {"resource": self.resource.tag, "page": self.cursor.index},
            )

        envelope = decode_envelope(response.body, response.status)
        total, rows = self._extract(envelope)

        self.items.extend(rows)
        self.total_count = total
        logger.debug(
            f"{self.resource.tag}: page {self.cursor.index} (size {self.cursor.size}) "
            f"-> {len(rows)} rows, total {total}, collected {len(self.items)}"
        )

        if self.cursor.covers(total):
            return False
        self.cursor = self.cursor.advance()
        return True

    def _extract(self, envelope: Envelope) -> Tuple[int, List[T]]:
        if isinstance(envelope, ResultEnvelope):
            result = envelope.result
            if not (result.is_success or result.is_empty):
                if self._strict:
                    raise ApiResultError(result.code, result.message)
                logger.warning(
                    f"{self.resource.tag}: API returned {result.code} ({result.message}); "
                    f"treating as no data"
                )
        elif isinstance(envelope, ResourceEnvelope) and not self._extractor.matches(envelope):
            message = f"expected {self.resource.tag!r} envelope, got {envelope.resource.tag!r}"
            if self._strict:
                raise DecodeError(message, code=ErrorCode.RESOURCE_MISMATCH)
            logger.warning(f"{message}; treating as no data")

        return self._extractor.extract(envelope)


def fetch_all(transport: Transport, paginator: Paginator[T]) -> List[T]:
    """
    Fetch every page through a blocking transport.

    Returns:
        All rows in response order. Nothing is returned if any page fails.
    """
    while True:
        url = paginator.next_url()
        logger.debug(f"Fetching {redact(url)}")
        if not paginator.consume(transport.get(url)):
            return paginator.items


async def afetch_all(transport: AsyncTransport, paginator: Paginator[T]) -> List[T]:
    """Async counterpart of fetch_all(); suspends only on the network call."""
    while True:
        url = paginator.next_url()
        logger.debug(f"Fetching {redact(url)}")
        if not paginator.consume(await transport.get(url)):
            return paginator.items


__all__ = [
    "PageCursor",
    "Paginator",
    "fetch_all",
    "afetch_all",
]
