"""
Tests for result record decoding.
"""

import pytest
from pydantic import ValidationError

from helpers import class_row, meal_row, school_info_row

from neis_client.types import (
    AcademyInfoItem,
    ClassInfoItem,
    HisTimetableItem,
    MealServiceItem,
    SchoolInfoItem,
    SchoolScheduleItem,
    YesOrNo,
)


def schedule_row(**grades):
    row = {
        "ATPT_OFCDC_SC_CODE": "B10",
        "ATPT_OFCDC_SC_NM": "서울특별시교육청",
        "SD_SCHUL_CODE": "7010959",
        "SCHUL_NM": "문현고등학교",
        "AY": "2024",
        "DGHT_CRSE_SC_NM": "주간",
        "SCHUL_CRSE_SC_NM": "고등학교",
        "SBTR_DD_SC_NM": "해당없음",
        "AA_YMD": "20240302",
        "EVENT_NM": "입학식",
        "EVENT_CNTNT": "",
        "ONE_GRADE_EVENT_YN": "N",
        "TW_GRADE_EVENT_YN": "N",
        "THREE_GRADE_EVENT_YN": "N",
        "FR_GRADE_EVENT_YN": "*",
        "FIV_GRADE_EVENT_YN": "*",
        "SIX_GRADE_EVENT_YN": "*",
        "LOAD_DTM": "20240305",
    }
    row.update(grades)
    return row


def academy_row(**overrides):
    row = {
        "ATPT_OFCDC_SC_CODE": "B10",
        "ATPT_OFCDC_SC_NM": "서울특별시교육청",
        "ADMST_ZONE_NM": "강남구",
        "ACA_INSTI_SC_NM": "교습소",
        "ACA_ASNUM": "3000024877",
        "ACA_NM": "9087스튜디오미술교습소",
        "ESTBL_YMD": "20151208",
        "REG_YMD": "20151208",
        "REG_STTUS_NM": "개원",
        "CAA_BEGIN_YMD": None,
        "CAA_END_YMD": "99991231",
        "TOFOR_SMTOT": 4,
        "DTM_RCPTN_ABLTY_NMPR_SMTOT": 9.0,
        "REALM_SC_NM": "예능(대)",
        "LE_ORD_NM": "예능(중)",
        "LE_CRSE_LIST_NM": "드로잉",
        "LE_CRSE_NM": "미술",
        "PSNBY_THCC_CNTNT": "",
        "THCC_OTHBC_YN": "Y",
        "BRHS_ACA_YN": "N",
        "FA_RDNMA": "서울특별시 서초구 바우뫼로20길 25",
        "FA_RDNDA": ", 201호 (양재동, 서두빌딩)",
        "FA_RDNZC": "06755",
        "FA_TELNO": None,
        "LOAD_DTM": "20231018",
    }
    row.update(overrides)
    return row


class TestSchoolInfoItem:

    def test_wire_fields_map_to_snake_case(self):
        item = SchoolInfoItem.model_validate(school_info_row())
        assert item.sd_schul_code == "7010959"
        assert item.eng_schul_nm == "MUNHYEON HIGH SCHOOL"
        assert item.spcly_purps_hs_ord_nm is None

    def test_yes_or_no(self):
        item = SchoolInfoItem.model_validate(school_info_row())
        assert item.indst_specl_ccccl_exst_yn is YesOrNo.N
        assert not item.indst_specl_ccccl_exst_yn

    def test_invalid_flag_rejected(self):
        row = school_info_row()
        row["INDST_SPECL_CCCCL_EXST_YN"] = "maybe"
        with pytest.raises(ValidationError):
            SchoolInfoItem.model_validate(row)

    def test_unknown_fields_ignored(self):
        row = school_info_row()
        row["NEW_FIELD_FROM_SERVER"] = "x"
        assert SchoolInfoItem.model_validate(row).schul_nm == "문현고등학교"

    def test_records_are_immutable(self):
        item = SchoolInfoItem.model_validate(school_info_row())
        with pytest.raises(ValidationError):
            item.schul_nm = "other"


class TestNumericCoercion:

    def test_string_integers(self):
        item = ClassInfoItem.model_validate(class_row(grade="3"))
        assert item.ay == 2024
        assert item.grade == 3

    def test_non_numeric_grade_rejected(self):
        with pytest.raises(ValidationError):
            ClassInfoItem.model_validate(class_row(grade="three"))

    @pytest.mark.parametrize("headcount,expected", [(498.0, 498), (498.7, 498), (12, 12)])
    def test_fractional_headcount_truncates(self, headcount, expected):
        assert MealServiceItem.model_validate(meal_row(headcount=headcount)).mlsv_fgr == expected

    def test_academy_totals(self):
        item = AcademyInfoItem.model_validate(academy_row())
        assert item.tofor_smtot == 4
        assert item.dtm_rcptn_ablty_nmpr_smtot == 9
        assert item.thcc_othbc_yn is YesOrNo.Y
        assert item.caa_begin_ymd is None

    def test_timetable_fields(self):
        row = {
            "ATPT_OFCDC_SC_CODE": "B10",
            "ATPT_OFCDC_SC_NM": "서울특별시교육청",
            "SD_SCHUL_CODE": "7010959",
            "SCHUL_NM": "문현고등학교",
            "AY": "2023",
            "SEM": "2",
            "ALL_TI_YMD": "20230821",
            "DGHT_CRSE_SC_NM": "주간",
            "ORD_SC_NM": "일반계",
            "DDDEP_NM": "일반학과",
            "GRADE": "3",
            "CLRM_NM": "301",
            "CLASS_NM": "1",
            "PERIO": "5",
            "ITRT_CNTNT": "[보강]음악 감상과 비평",
            "LOAD_DTM": "20230827",
        }
        item = HisTimetableItem.model_validate(row)
        assert (item.ay, item.sem, item.grade, item.perio) == (2023, 2, 3, 5)
        assert item.clrm_nm == "301"


class TestSchoolScheduleItem:

    def test_is_event_for_grade(self):
        item = SchoolScheduleItem.model_validate(schedule_row(ONE_GRADE_EVENT_YN="Y", THREE_GRADE_EVENT_YN="Y"))
        assert item.is_event_for_grade(1)
        assert not item.is_event_for_grade(2)
        assert item.is_event_for_grade(3)

    @pytest.mark.parametrize("grade", [0, 7, -1])
    def test_out_of_range_grade(self, grade):
        item = SchoolScheduleItem.model_validate(schedule_row(ONE_GRADE_EVENT_YN="Y"))
        assert not item.is_event_for_grade(grade)
