"""
Tests for request parameter encoding.
"""

from datetime import date, datetime
from urllib.parse import parse_qsl

import pytest
from pydantic import ValidationError

from neis_client.types import (
    AcademyInfoParams,
    ClassInfoParams,
    ElsTimetableParams,
    HisTimetableParams,
    MealServiceParams,
    SchoolInfoParams,
    SchoolMajorInfoParams,
    SchoolScheduleParams,
    SpsTimetableParams,
)


class TestQueryString:
    """Tests for to_query_string()."""

    def test_required_fields_only(self):
        params = ClassInfoParams.for_school("B10", "7010959")
        assert params.to_query_string() == "ATPT_OFCDC_SC_CODE=B10&SD_SCHUL_CODE=7010959"

    def test_optional_fields_omitted_when_absent(self):
        params = ClassInfoParams.for_school("B10", "7010959", grade=3)
        assert params.to_query_string() == "ATPT_OFCDC_SC_CODE=B10&SD_SCHUL_CODE=7010959&GRADE=3"

    def test_field_order_is_declaration_order(self):
        params = ClassInfoParams(
            dddep_nm="일반학과",
            ay=2024,
            sd_schul_code="7010959",
            atpt_ofcdc_sc_code="B10",
        )
        keys = [key for key, _ in parse_qsl(params.to_query_string())]
        assert keys == ["ATPT_OFCDC_SC_CODE", "SD_SCHUL_CODE", "AY", "DDDEP_NM"]

    def test_values_are_form_encoded(self):
        params = SchoolInfoParams(schul_nm="문현 고등학교")
        query = params.to_query_string()
        assert "문" not in query
        assert " " not in query
        assert parse_qsl(query) == [("SCHUL_NM", "문현 고등학교")]

    def test_empty_params_encode_to_empty_string(self):
        assert SchoolInfoParams().to_query_string() == ""

    def test_to_dict_stringifies_values(self):
        params = ElsTimetableParams.for_school("B10", "7130126", grade=6, sem=2)
        assert params.to_dict() == {
            "ATPT_OFCDC_SC_CODE": "B10",
            "SD_SCHUL_CODE": "7130126",
            "SEM": "2",
            "GRADE": "6",
        }


class TestConstructors:
    """Tests for convenience constructors and required fields."""

    def test_by_school_code(self):
        assert SchoolInfoParams.by_school_code("7010959").to_dict() == {"SD_SCHUL_CODE": "7010959"}

    def test_for_office(self):
        params = SchoolMajorInfoParams.for_office("B10", sd_schul_code="7010959")
        assert params.to_dict() == {"ATPT_OFCDC_SC_CODE": "B10", "SD_SCHUL_CODE": "7010959"}

    def test_academy_for_office(self):
        assert AcademyInfoParams.for_office("B10").to_query_string() == "ATPT_OFCDC_SC_CODE=B10"

    def test_school_scoped_params_require_school(self):
        with pytest.raises(ValidationError):
            MealServiceParams(atpt_ofcdc_sc_code="B10")

    def test_wire_names_accepted(self):
        params = MealServiceParams(ATPT_OFCDC_SC_CODE="B10", SD_SCHUL_CODE="7031115")
        assert params.sd_schul_code == "7031115"

    def test_params_are_immutable(self):
        params = ClassInfoParams.for_school("B10", "7010959")
        with pytest.raises(ValidationError):
            params.grade = 2


class TestDates:
    """Tests for date filters."""

    def test_date_value_formats_as_ymd(self):
        params = MealServiceParams.for_school("B10", "7031115", mlsv_from_ymd=date(2025, 1, 1))
        assert params.mlsv_from_ymd == "20250101"
        assert "MLSV_FROM_YMD=20250101" in params.to_query_string()

    def test_datetime_value_formats_as_ymd(self):
        params = SchoolScheduleParams.for_school("B10", "7010959", aa_ymd=datetime(2024, 3, 2, 9, 30))
        assert params.aa_ymd == "20240302"

    def test_string_value_passes_through(self):
        params = HisTimetableParams.for_school("B10", "7010959", ti_from_ymd="20230821")
        assert params.ti_from_ymd == "20230821"

    def test_timetable_range(self):
        params = SpsTimetableParams.for_school(
            "B10", "7010575", ti_from_ymd=date(2024, 9, 2), ti_to_ymd=date(2024, 9, 6)
        )
        query = dict(parse_qsl(params.to_query_string()))
        assert query["TI_FROM_YMD"] == "20240902"
        assert query["TI_TO_YMD"] == "20240906"
