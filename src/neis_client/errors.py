"""
NEIS Client Error Model

This module provides the error handling framework for the NEIS client.
Every failure of a paginated fetch derives from FetchError, so callers can
treat any of them as "no usable data for this call".
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Client-side error codes."""

    # General errors (1-99)
    UNKNOWN = 1
    CONFIGURATION = 2

    # Encoding errors (100-199)
    DECODE_ERROR = 100
    INVALID_JSON = 101
    UNKNOWN_ENVELOPE = 102
    INVALID_RECORD = 103
    RESOURCE_MISMATCH = 104

    # Network errors (200-299)
    NETWORK_ERROR = 200
    TIMEOUT = 202
    HTTP_STATUS = 210

    # Upstream API errors (300-399)
    API_RESULT = 300


class NeisError(Exception):
    """Root of the client error tree; carries an ErrorCode and optional context."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        text = f"[{self.code.name}] {self.message}"
        if self.details:
            text += f" | Details: {self.details}"
        if self.cause is not None:
            text += f" | Caused by: {self.cause}"
        return text

    def to_dict(self) -> Dict[str, Any]:
        """Code, message and any context, for structured logs."""
        result: Dict[str, Any] = {"code": self.code.value, "message": self.message}
        if self.details:
            result["details"] = self.details
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result


class ConfigurationError(NeisError):
    """Missing or invalid client configuration."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.CONFIGURATION, details, cause)


class FetchError(NeisError):
    """Base class for every failure that terminates a paginated fetch."""


class TransportError(FetchError):
    """The network call itself could not be completed."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.NETWORK_ERROR, details, cause)


class TimeoutError(TransportError):
    """The network call timed out."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, details, cause)
        self.code = ErrorCode.TIMEOUT


class HttpStatusError(FetchError):
    """The server answered with a non-success HTTP status."""

    def __init__(self, status: int, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"HTTP status {status}", ErrorCode.HTTP_STATUS, details)
        self.status = status


class DecodeError(FetchError):
    """The response body did not parse into a known envelope."""

    def __init__(self, message: str, status: Optional[int] = None, snippet: Optional[str] = None,
                 code: ErrorCode = ErrorCode.DECODE_ERROR, cause: Optional[Exception] = None):
        details: Dict[str, Any] = {}
        if status is not None:
            details["status"] = status
        if snippet:
            details["body"] = snippet
        super().__init__(message, code, details, cause)
        self.status = status
        self.snippet = snippet


class ApiResultError(FetchError):
    """The upstream API answered with a bare error result (strict mode only)."""

    def __init__(self, result_code: str, result_message: str):
        super().__init__(
            result_message,
            ErrorCode.API_RESULT,
            {"result_code": result_code},
        )
        self.result_code = result_code
        self.result_message = result_message


def is_retryable(error: Exception) -> bool:
    """
    Check if a caller may reasonably retry after this error.

    The client itself never retries; this only classifies.

    Args:
        error: Exception to check

    Returns:
        True for network failures, timeouts, 429 and 5xx statuses
    """
    if isinstance(error, TransportError):
        return True
    if isinstance(error, HttpStatusError):
        return error.status == 429 or error.status >= 500
    return False


__all__ = [
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
