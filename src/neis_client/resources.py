"""
Resource identities.

A Resource value is the upstream wire tag. The same token names the URL
path segment (``/hub/{tag}``) and the key of the response envelope, and it
selects the record type rows are decoded into.
"""

from __future__ import annotations
from enum import Enum
from typing import Dict, Optional, Type

from .types import (
    AcademyInfoItem,
    ClassInfoItem,
    ClassRoomInfoItem,
    ElsTimetableItem,
    HisTimetableItem,
    MealServiceItem,
    MisTimetableItem,
    NeisRecord,
    SchoolAflcoInfoItem,
    SchoolInfoItem,
    SchoolMajorInfoItem,
    SchoolScheduleItem,
    SpsTimetableItem,
)


class Resource(str, Enum):
    """The datasets exposed under ``/hub``."""

    SCHOOL_INFO = "schoolInfo"
    CLASS_INFO = "classInfo"
    SCHOOL_MAJOR_INFO = "schoolMajorinfo"
    SCHOOL_AFLCO_INFO = "schulAflcoinfo"
    SCHOOL_SCHEDULE = "SchoolSchedule"
    ELS_TIMETABLE = "elsTimetable"
    MIS_TIMETABLE = "misTimetable"
    HIS_TIMETABLE = "hisTimetable"
    SPS_TIMETABLE = "spsTimetable"
    CLASS_ROOM_INFO = "tiClrminfo"
    ACADEMY_INFO = "acaInsTiInfo"
    MEAL_SERVICE = "mealServiceDietInfo"

    @property
    def tag(self) -> str:
        """Envelope variant tag."""
        return self.value

    @property
    def path(self) -> str:
        """URL path segment under ``/hub``."""
        return self.value

    @classmethod
    def from_tag(cls, tag: str) -> Optional[Resource]:
        """Look up a resource by its envelope tag, or None if unknown."""
        return _BY_TAG.get(tag)


_BY_TAG: Dict[str, Resource] = {resource.tag: resource for resource in Resource}

RESOURCE_RECORDS: Dict[Resource, Type[NeisRecord]] = {
    Resource.SCHOOL_INFO: SchoolInfoItem,
    Resource.CLASS_INFO: ClassInfoItem,
    Resource.SCHOOL_MAJOR_INFO: SchoolMajorInfoItem,
    Resource.SCHOOL_AFLCO_INFO: SchoolAflcoInfoItem,
    Resource.SCHOOL_SCHEDULE: SchoolScheduleItem,
    Resource.ELS_TIMETABLE: ElsTimetableItem,
    Resource.MIS_TIMETABLE: MisTimetableItem,
    Resource.HIS_TIMETABLE: HisTimetableItem,
    Resource.SPS_TIMETABLE: SpsTimetableItem,
    Resource.CLASS_ROOM_INFO: ClassRoomInfoItem,
    Resource.ACADEMY_INFO: AcademyInfoItem,
    Resource.MEAL_SERVICE: MealServiceItem,
}

_unregistered = set(Resource) - set(RESOURCE_RECORDS)
if _unregistered:
    raise ImportError(f"Resources without a record model: {sorted(r.name for r in _unregistered)}")


def record_model_for(resource: Resource) -> Type[NeisRecord]:
    """Record model rows of this resource are decoded into."""
    return RESOURCE_RECORDS[resource]


__all__ = ["Resource", "RESOURCE_RECORDS", "record_model_for"]
