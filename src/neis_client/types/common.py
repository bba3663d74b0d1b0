"""
Shared building blocks for request parameters and result records.

Wire keys are the upper-case form of the Python field names, so
``atpt_ofcdc_sc_code`` travels as ``ATPT_OFCDC_SC_CODE``.
"""

from datetime import date
from enum import Enum
from typing import Annotated, Any, Dict, Optional
from urllib.parse import urlencode

from pydantic import BaseModel, BeforeValidator, ConfigDict


def _format_ymd(value: Any) -> Any:
    # datetime is a date subclass, so both collapse to YYYYMMDD
    if isinstance(value, date):
        return value.strftime("%Y%m%d")
    return value


def _truncate_float(value: Any) -> Any:
    if isinstance(value, float):
        return int(value)
    return value


Ymd = Annotated[Optional[str], BeforeValidator(_format_ymd)]
"""Optional date filter accepting ``YYYYMMDD`` strings or ``date`` values."""

TruncatedInt = Annotated[int, BeforeValidator(_truncate_float)]
"""Integer that the API sometimes sends as a fractional number."""


class YesOrNo(str, Enum):
    """Y/N flag as sent by the API."""
    Y = "Y"
    N = "N"

    def __bool__(self) -> bool:
        return self is YesOrNo.Y


class QueryParams(BaseModel):
    """
    Base class for per-resource request parameters.

    Subclasses declare required identifying fields first, then optional
    filters. Field order is the order keys appear in the query string.
    """

    model_config = ConfigDict(alias_generator=str.upper, populate_by_name=True, frozen=True)

    def to_dict(self) -> Dict[str, str]:
        """Convert to wire key/value pairs, dropping absent filters."""
        return {
            key: str(value)
            for key, value in self.model_dump(by_alias=True, exclude_none=True).items()
        }

    def to_query_string(self) -> str:
        """Form-url-encode the parameters as ``KEY=value&...``."""
        return urlencode(self.to_dict())


class OfficeParams(QueryParams):
    """Parameters scoped to one provincial office of education."""

    atpt_ofcdc_sc_code: str

    @classmethod
    def for_office(cls, office_code: str, **filters: Any):
        return cls(atpt_ofcdc_sc_code=office_code, **filters)


class SchoolParams(QueryParams):
    """Parameters scoped to one school."""

    atpt_ofcdc_sc_code: str
    sd_schul_code: str

    @classmethod
    def for_school(cls, office_code: str, school_code: str, **filters: Any):
        return cls(atpt_ofcdc_sc_code=office_code, sd_schul_code=school_code, **filters)


class NeisRecord(BaseModel):
    """Base class for result rows. Unknown wire fields are ignored."""

    model_config = ConfigDict(
        alias_generator=str.upper,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    atpt_ofcdc_sc_code: str
    atpt_ofcdc_sc_nm: str


class SchoolRecord(NeisRecord):
    """Result row that belongs to a single school."""

    sd_schul_code: str
    schul_nm: str
