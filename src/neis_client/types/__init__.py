"""Request parameter and result record models, one pair per resource."""

from .common import (
    NeisRecord,
    OfficeParams,
    QueryParams,
    SchoolParams,
    SchoolRecord,
    TruncatedInt,
    YesOrNo,
    Ymd,
)
from .academy_info import AcademyInfoItem, AcademyInfoParams
from .class_info import ClassInfoItem, ClassInfoParams
from .class_room_info import ClassRoomInfoItem, ClassRoomInfoParams
from .meal_service import MealServiceItem, MealServiceParams
from .school_info import SchoolInfoItem, SchoolInfoParams
from .school_majors import (
    SchoolAflcoInfoItem,
    SchoolAflcoInfoParams,
    SchoolMajorInfoItem,
    SchoolMajorInfoParams,
)
from .school_schedule import SchoolScheduleItem, SchoolScheduleParams
from .timetable import (
    ElsTimetableItem,
    ElsTimetableParams,
    HisTimetableItem,
    HisTimetableParams,
    MisTimetableItem,
    MisTimetableParams,
    SpsTimetableItem,
    SpsTimetableParams,
    TimetableItem,
    TimetableParams,
)

__all__ = [
    "NeisRecord",
    "OfficeParams",
    "QueryParams",
    "SchoolParams",
    "SchoolRecord",
    "TruncatedInt",
    "YesOrNo",
    "Ymd",
    "AcademyInfoItem",
    "AcademyInfoParams",
    "ClassInfoItem",
    "ClassInfoParams",
    "ClassRoomInfoItem",
    "ClassRoomInfoParams",
    "ElsTimetableItem",
    "ElsTimetableParams",
    "HisTimetableItem",
    "HisTimetableParams",
    "MealServiceItem",
    "MealServiceParams",
    "MisTimetableItem",
    "MisTimetableParams",
    "SchoolAflcoInfoItem",
    "SchoolAflcoInfoParams",
    "SchoolInfoItem",
    "SchoolInfoParams",
    "SchoolMajorInfoItem",
    "SchoolMajorInfoParams",
    "SchoolScheduleItem",
    "SchoolScheduleParams",
    "SpsTimetableItem",
    "SpsTimetableParams",
    "TimetableItem",
    "TimetableParams",
]
