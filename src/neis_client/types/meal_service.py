"""급식식단정보 (school meal menus)."""

from typing import Optional

from .common import SchoolParams, SchoolRecord, TruncatedInt, Ymd


class MealServiceParams(SchoolParams):
    mmeal_sc_code: Optional[str] = None
    mlsv_ymd: Ymd = None
    mlsv_from_ymd: Ymd = None
    mlsv_to_ymd: Ymd = None


class MealServiceItem(SchoolRecord):
    mmeal_sc_code: str
    mmeal_sc_nm: str
    mlsv_ymd: str
    # served headcount arrives as a float, e.g. 498.0
    mlsv_fgr: TruncatedInt
    ddish_nm: str
    orplc_info: str
    cal_info: Optional[str] = None
    ntr_info: Optional[str] = None
    mlsv_from_ymd: str
    mlsv_to_ymd: str
    load_dtm: str
