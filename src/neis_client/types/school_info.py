"""학교기본정보 (school basic information)."""

from typing import Optional

from .common import QueryParams, SchoolRecord, YesOrNo


class SchoolInfoParams(QueryParams):
    """Every filter is optional; an empty query lists all schools."""

    atpt_ofcdc_sc_code: Optional[str] = None
    sd_schul_code: Optional[str] = None
    schul_nm: Optional[str] = None
    schul_knd_sc_nm: Optional[str] = None
    lctn_sc_nm: Optional[str] = None
    fond_sc_nm: Optional[str] = None

    @classmethod
    def by_school_code(cls, school_code: str) -> "SchoolInfoParams":
        return cls(sd_schul_code=school_code)


class SchoolInfoItem(SchoolRecord):
    eng_schul_nm: Optional[str] = None
    schul_knd_sc_nm: Optional[str] = None
    lctn_sc_nm: str
    ju_org_nm: str
    fond_sc_nm: Optional[str] = None
    org_rdnzc: Optional[str] = None
    org_rdnma: Optional[str] = None
    org_rdnda: Optional[str] = None
    org_telno: Optional[str] = None
    hmpg_adres: Optional[str] = None
    coedu_sc_nm: str
    org_faxno: Optional[str] = None
    hs_sc_nm: Optional[str] = None
    indst_specl_ccccl_exst_yn: YesOrNo
    hs_gnrl_busns_sc_nm: Optional[str] = None
    spcly_purps_hs_ord_nm: Optional[str] = None
    ene_bfe_sehf_sc_nm: str
    dght_sc_nm: str
    fond_ymd: str
    foas_memrd: str
    load_dtm: str
