"""
Timetables: 초등학교시간표, 중학교시간표, 고등학교시간표, 특수학교시간표.

The four school levels share one shape and differ only in the track and
department filters each level exposes.
"""

from typing import Optional

from .common import SchoolParams, SchoolRecord, Ymd


class TimetableParams(SchoolParams):
    ay: Optional[int] = None
    sem: Optional[int] = None
    all_ti_ymd: Ymd = None
    grade: Optional[int] = None
    class_nm: Optional[str] = None
    ti_from_ymd: Ymd = None
    ti_to_ymd: Ymd = None


class TimetableItem(SchoolRecord):
    ay: int
    sem: int
    all_ti_ymd: str
    grade: int
    class_nm: Optional[str] = None
    perio: int
    itrt_cntnt: Optional[str] = None
    load_dtm: str


class ElsTimetableParams(TimetableParams):
    perio: Optional[int] = None


class ElsTimetableItem(TimetableItem):
    pass


class MisTimetableParams(TimetableParams):
    dght_crse_sc_nm: Optional[str] = None
    perio: Optional[int] = None


class MisTimetableItem(TimetableItem):
    dght_crse_sc_nm: Optional[str] = None


class HisTimetableParams(TimetableParams):
    dght_crse_sc_nm: Optional[str] = None
    ord_sc_nm: Optional[str] = None
    dddep_nm: Optional[str] = None
    clrm_nm: Optional[str] = None


class HisTimetableItem(TimetableItem):
    dght_crse_sc_nm: Optional[str] = None
    ord_sc_nm: Optional[str] = None
    dddep_nm: Optional[str] = None
    clrm_nm: Optional[str] = None


class SpsTimetableParams(TimetableParams):
    schul_crse_sc_nm: Optional[str] = None
    dght_crse_sc_nm: Optional[str] = None
    perio: Optional[int] = None


class SpsTimetableItem(TimetableItem):
    schul_crse_sc_nm: Optional[str] = None
    dght_crse_sc_nm: Optional[str] = None
