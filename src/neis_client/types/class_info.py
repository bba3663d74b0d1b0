"""학급정보 (class information)."""

from typing import Optional

from .common import SchoolParams, SchoolRecord


class ClassInfoParams(SchoolParams):
    ay: Optional[int] = None
    grade: Optional[int] = None
    dght_crse_sc_nm: Optional[str] = None
    schul_crse_sc_nm: Optional[str] = None
    ord_sc_nm: Optional[str] = None
    dddep_nm: Optional[str] = None


class ClassInfoItem(SchoolRecord):
    ay: int
    grade: int
    dght_crse_sc_nm: Optional[str] = None
    schul_crse_sc_nm: Optional[str] = None
    ord_sc_nm: Optional[str] = None
    dddep_nm: Optional[str] = None
    class_nm: Optional[str] = None
    load_dtm: str
