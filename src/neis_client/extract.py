"""
Result extraction.

An Extractor maps a decoded envelope to ``(total_count, rows)`` for exactly
one resource. Envelopes tagged for any other resource, and bare results,
map to ``(0, [])``.
"""

from __future__ import annotations
from typing import Dict, Generic, List, Tuple, Type, TypeVar

from .envelope import Envelope, ResourceEnvelope
from .resources import RESOURCE_RECORDS, Resource

T = TypeVar("T")


class Extractor(Generic[T]):
    """Pulls the row count and rows of one resource out of an envelope."""

    def __init__(self, resource: Resource, record: Type[T]):
        self.resource = resource
        self.record = record

    def matches(self, envelope: Envelope) -> bool:
        return isinstance(envelope, ResourceEnvelope) and envelope.resource is self.resource

    def extract(self, envelope: Envelope) -> Tuple[int, List[T]]:
        if self.matches(envelope):
            return envelope.head.total_count, list(envelope.rows)
        return 0, []

    def __repr__(self) -> str:
        return f"Extractor({self.resource.name}, {self.record.__name__})"


EXTRACTORS: Dict[Resource, Extractor] = {
    resource: Extractor(resource, record) for resource, record in RESOURCE_RECORDS.items()
}


def extractor_for(resource: Resource) -> Extractor:
    """The registered extractor for a resource."""
    return EXTRACTORS[resource]


__all__ = ["Extractor", "EXTRACTORS", "extractor_for"]
