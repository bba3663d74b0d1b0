"""학사일정 (academic calendar)."""

from typing import Optional

from .common import SchoolParams, SchoolRecord, Ymd


class SchoolScheduleParams(SchoolParams):
    dght_crse_sc_nm: Optional[str] = None
    schul_crse_sc_nm: Optional[str] = None
    aa_ymd: Ymd = None
    aa_from_ymd: Ymd = None
    aa_to_ymd: Ymd = None


class SchoolScheduleItem(SchoolRecord):
    ay: int
    dght_crse_sc_nm: Optional[str] = None
    schul_crse_sc_nm: Optional[str] = None
    sbtr_dd_sc_nm: Optional[str] = None
    aa_ymd: str
    event_nm: str
    event_cntnt: str
    one_grade_event_yn: str
    tw_grade_event_yn: str
    three_grade_event_yn: str
    fr_grade_event_yn: str
    fiv_grade_event_yn: str
    six_grade_event_yn: str
    load_dtm: str

    def is_event_for_grade(self, grade: int) -> bool:
        """Whether the event applies to the given grade (1-6)."""
        flags = {
            1: self.one_grade_event_yn,
            2: self.tw_grade_event_yn,
            3: self.three_grade_event_yn,
            4: self.fr_grade_event_yn,
            5: self.fiv_grade_event_yn,
            6: self.six_grade_event_yn,
        }
        return flags.get(grade) == "Y"
