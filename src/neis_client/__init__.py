"""
NEIS Open API client

Python client for the NEIS (Korean education information) Open API. Every
dataset is fetched through one paginated engine that decodes the
resource-named response envelope and collects all rows of a query.
"""

from .config import ClientConfig, DEFAULT_BASE_URL, DEFAULT_PAGE_SIZE
from .errors import (
    ApiResultError,
    ConfigurationError,
    DecodeError,
    ErrorCode,
    FetchError,
    HttpStatusError,
    NeisError,
    TimeoutError,
    TransportError,
    is_retryable,
)
from .resources import Resource, record_model_for
from .envelope import ApiResult, Head, ResourceEnvelope, ResultEnvelope, decode_envelope
from .extract import Extractor, extractor_for
from .pagination import PageCursor, Paginator, afetch_all, fetch_all
from .transport import AiohttpTransport, HttpResponse, RequestsTransport
from .client import NeisClient
from .async_client import AsyncNeisClient

__version__ = "0.3.0"
__all__ = [
    # Clients
    "NeisClient",
    "AsyncNeisClient",
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_PAGE_SIZE",

    # Engine
    "Resource",
    "record_model_for",
    "ApiResult",
    "Head",
    "ResourceEnvelope",
    "ResultEnvelope",
    "decode_envelope",
    "Extractor",
    "extractor_for",
    "PageCursor",
    "Paginator",
    "fetch_all",
    "afetch_all",

    # Transports
    "HttpResponse",
    "RequestsTransport",
    "AiohttpTransport",

    # Errors
    "ErrorCode",
    "NeisError",
    "ConfigurationError",
    "FetchError",
    "TransportError",
    "TimeoutError",
    "HttpStatusError",
    "DecodeError",
    "ApiResultError",
    "is_retryable",
]
