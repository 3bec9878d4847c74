from __future__ import annotations


class Honorific:
    """Form of address used in narratives (masculine / feminine)."""

    MALE = 'ong'
    FEMALE = 'ba'

    ALL = (MALE, FEMALE)


HONORIFIC_LABELS: dict[str, str] = {
    Honorific.MALE: 'ông',
    Honorific.FEMALE: 'bà',
}

# Rendered when the honorific was never chosen.
HONORIFIC_FALLBACK = 'ông/bà'


def honorific_label(value: str | None) -> str:
    return HONORIFIC_LABELS.get(value or '', HONORIFIC_FALLBACK)


class TransactionType:
    GIFT = 'tang_cho'
    SALE_OR_OTHER = 'mua_ban_khac'

    ALL = (GIFT, SALE_OR_OTHER)


class CertificateStatus:
    PRESENT = 'co'
    ABSENT = 'khong'

    ALL = (PRESENT, ABSENT)


class PropertyOrigin:
    TRANSFER = 'nhan_chuyen_nhuong'
    GIFT_OR_INHERITANCE = 'tang_cho_thua_ke'
    STATE_RECOGNITION = 'nha_nuoc_cong_nhan'

    ALL = (TRANSFER, GIFT_OR_INHERITANCE, STATE_RECOGNITION)


class MortgageStatus:
    MORTGAGED = 'dang_the_chap'
    RELEASED = 'da_giai_chap'
    NEVER = 'khong_the_chap'

    ALL = (MORTGAGED, RELEASED, NEVER)


class YesNo:
    YES = 'co'
    NO = 'khong'

    ALL = (YES, NO)


class MaritalStatus:
    SINGLE = 'doc_than'
    MARRIED = 'co_vo_chong'

    ALL = (SINGLE, MARRIED)


class SingleStatus:
    NEVER_MARRIED = 'chua_ket_hon'
    DIVORCED = 'da_ly_hon'
    WIDOWED = 'vo_chong_chet'

    ALL = (NEVER_MARRIED, DIVORCED, WIDOWED)


class MarriageOrder:
    FIRST = 'lan_dau'
    NOT_FIRST = 'khong_phai_lan_dau'

    ALL = (FIRST, NOT_FIRST)


class PriorMarriageEnd:
    DIVORCE = 'ly_hon'
    DEATH = 'chet'

    ALL = (DIVORCE, DEATH)
