"""시간표강의실정보 (timetable classrooms)."""

from typing import Optional

from .common import SchoolParams, SchoolRecord


class ClassRoomInfoParams(SchoolParams):
    ay: Optional[int] = None
    grade: Optional[int] = None
    sem: Optional[int] = None
    schul_crse_sc_nm: Optional[str] = None
    dght_crse_sc_nm: Optional[str] = None
    ord_sc_nm: Optional[str] = None
    dddep_nm: Optional[str] = None


class ClassRoomInfoItem(SchoolRecord):
    ay: int
    grade: int
    sem: int
    schul_crse_sc_nm: Optional[str] = None
    dght_crse_sc_nm: Optional[str] = None
    ord_sc_nm: Optional[str] = None
    dddep_nm: Optional[str] = None
    clrm_nm: Optional[str] = None
    load_dtm: str
