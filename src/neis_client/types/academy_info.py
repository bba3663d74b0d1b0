"""학원교습소정보 (private academies and tutoring rooms)."""

from typing import Optional

from .common import NeisRecord, OfficeParams, TruncatedInt, YesOrNo


class AcademyInfoParams(OfficeParams):
    admst_zone_nm: Optional[str] = None
    aca_asnum: Optional[str] = None
    aca_nm: Optional[str] = None
    realm_sc_nm: Optional[str] = None
    le_ord_nm: Optional[str] = None
    le_crse_nm: Optional[str] = None


class AcademyInfoItem(NeisRecord):
    admst_zone_nm: Optional[str] = None
    aca_insti_sc_nm: str
    aca_asnum: str
    aca_nm: str
    estbl_ymd: str
    reg_ymd: str
    reg_sttus_nm: str
    # blank for academies that never closed
    caa_begin_ymd: Optional[str] = None
    caa_end_ymd: Optional[str] = None
    tofor_smtot: TruncatedInt
    dtm_rcptn_ablty_nmpr_smtot: TruncatedInt
    realm_sc_nm: Optional[str] = None
    le_ord_nm: Optional[str] = None
    le_crse_list_nm: Optional[str] = None
    le_crse_nm: Optional[str] = None
    psnby_thcc_cntnt: Optional[str] = None
    thcc_othbc_yn: YesOrNo
    brhs_aca_yn: str
    fa_rdnma: str
    fa_rdnda: str
    fa_rdnzc: str
    fa_telno: Optional[str] = None
    load_dtm: str
