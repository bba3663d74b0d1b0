"""학교학과정보 and 학교계열정보 (school departments and school tracks)."""

from typing import Optional

from .common import OfficeParams, SchoolRecord


class SchoolMajorInfoParams(OfficeParams):
    sd_schul_code: Optional[str] = None
    dght_crse_sc_nm: Optional[str] = None
    ord_sc_nm: Optional[str] = None


class SchoolMajorInfoItem(SchoolRecord):
    dght_crse_sc_nm: Optional[str] = None
    ord_sc_nm: Optional[str] = None
    dddep_nm: Optional[str] = None
    load_dtm: str


class SchoolAflcoInfoParams(OfficeParams):
    sd_schul_code: Optional[str] = None
    dght_crse_sc_nm: Optional[str] = None


class SchoolAflcoInfoItem(SchoolRecord):
    dght_crse_sc_nm: Optional[str] = None
    ord_sc_nm: Optional[str] = None
    load_dtm: str
