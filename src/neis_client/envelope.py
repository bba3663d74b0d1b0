"""
Response envelope decoding.

The API wraps every answer in a single-key JSON object whose key depends on
what was asked for::

    {"schoolInfo": [{"head": [{"list_total_count": 1},
                              {"RESULT": {"CODE": "INFO-000", "MESSAGE": "..."}}]},
                    {"row": [{...}, ...]}]}

or, when there is nothing to return or the request was rejected::

    {"RESULT": {"CODE": "INFO-200", "MESSAGE": "..."}}

decode_envelope() turns either shape into a ResourceEnvelope or a
ResultEnvelope. The positional head tuple is flattened into Head so nothing
past this module sees the wire layout.
"""

from __future__ import annotations
import json
from dataclasses import dataclass
from typing import Any, Dict, Generic, List, TypeVar, Union

from pydantic import ValidationError

from .errors import DecodeError, ErrorCode
from .resources import Resource, record_model_for

T = TypeVar("T")

RESULT_TAG = "RESULT"
SNIPPET_LENGTH = 200

RESULT_OK = "INFO-000"
RESULT_NO_DATA = "INFO-200"


@dataclass(frozen=True)
class ApiResult:
    """Machine code and human message reported by the API."""
    code: str
    message: str

    @property
    def is_success(self) -> bool:
        return self.code == RESULT_OK

    @property
    def is_empty(self) -> bool:
        """The query was valid but matched nothing."""
        return self.code == RESULT_NO_DATA


@dataclass(frozen=True)
class Head:
    """Metadata of a resource envelope."""
    total_count: int
    result: ApiResult


@dataclass(frozen=True)
class ResourceEnvelope(Generic[T]):
    """Successful answer for one resource."""
    resource: Resource
    head: Head
    rows: List[T]


@dataclass(frozen=True)
class ResultEnvelope:
    """Bare result, carrying only a code and a message."""
    result: ApiResult


Envelope = Union[ResourceEnvelope, ResultEnvelope]


class _ShapeError(ValueError):
    pass


def decode_envelope(body: Union[bytes, str], status: int = 200) -> Envelope:
    """
    Parse a raw response body into an envelope.

    Args:
        body: Raw response body, presumed JSON
        status: HTTP status the body arrived with, for error context

    Returns:
        ResourceEnvelope for a known resource tag, ResultEnvelope for a bare result

    Raises:
        DecodeError: If the body is not JSON or matches no known envelope shape
    """
    try:
        data = json.loads(body)
    except ValueError as e:
        raise DecodeError(
            f"Invalid JSON response: {e}", status, _snippet(body), ErrorCode.INVALID_JSON, e
        ) from e

    try:
        if not isinstance(data, dict) or len(data) != 1:
            raise _ShapeError("envelope must be an object with exactly one key")

        ((tag, payload),) = data.items()
        if tag == RESULT_TAG:
            return ResultEnvelope(result=_parse_result(payload))

        resource = Resource.from_tag(tag)
        if resource is None:
            raise _ShapeError(f"unknown envelope tag {tag!r}")
        return _parse_resource(resource, payload)

    except ValidationError as e:
        raise DecodeError(
            f"Invalid record in response: {e}", status, _snippet(body), ErrorCode.INVALID_RECORD, e
        ) from e
    except _ShapeError as e:
        raise DecodeError(
            f"Unrecognized envelope: {e}", status, _snippet(body), ErrorCode.UNKNOWN_ENVELOPE, e
        ) from e


def _parse_result(payload: Any) -> ApiResult:
    if not isinstance(payload, dict):
        raise _ShapeError("RESULT must be an object")
    code = payload.get("CODE")
    message = payload.get("MESSAGE")
    if not isinstance(code, str) or not isinstance(message, str):
        raise _ShapeError("RESULT needs string CODE and MESSAGE")
    return ApiResult(code=code, message=message)


def _parse_resource(resource: Resource, payload: Any) -> ResourceEnvelope:
    if not isinstance(payload, list) or len(payload) != 2:
        raise _ShapeError(f"{resource.tag} must be a [head, body] pair")
    head_part, body_part = payload

    head = _parse_head(_member(head_part, "head"))

    rows = _member(body_part, "row")
    if not isinstance(rows, list):
        raise _ShapeError("row must be an array")
    model = record_model_for(resource)
    records = [model.model_validate(row) for row in rows]

    return ResourceEnvelope(resource=resource, head=head, rows=records)


def _parse_head(head: Any) -> Head:
    if not isinstance(head, list) or len(head) != 2:
        raise _ShapeError("head must be a [count, result] pair")
    count_part, result_part = head

    total = _member(count_part, "list_total_count")
    # bool is an int subclass
    if not isinstance(total, int) or isinstance(total, bool) or total < 0:
        raise _ShapeError(f"list_total_count must be a non-negative integer, got {total!r}")

    return Head(total_count=total, result=_parse_result(_member(result_part, RESULT_TAG)))


def _member(part: Any, key: str) -> Any:
    if not isinstance(part, dict) or key not in part:
        raise _ShapeError(f"expected an object with {key!r}")
    return part[key]


def _snippet(body: Union[bytes, str]) -> str:
    text = body.decode("utf-8", errors="replace") if isinstance(body, (bytes, bytearray)) else str(body)
    if len(text) > SNIPPET_LENGTH:
        return text[:SNIPPET_LENGTH] + "..."
    return text


__all__ = [
    "ApiResult",
    "Head",
    "ResourceEnvelope",
    "ResultEnvelope",
    "Envelope",
    "decode_envelope",
    "RESULT_OK",
    "RESULT_NO_DATA",
]
