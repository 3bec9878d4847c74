"""Input completeness checks for the intake wizard.

Stage 0: guidance date and transaction type.
Stage 1: certificate status.
Stage 2: owner count and household facts.
Stage 3+: one owner each (`stage - 3` indexes the owner sequence).

`validate()` returns `{field_key: message}`; an empty mapping means the stage
is complete. Field keys are the wire keys of the fact sheet. Spouse facts are
only required when the classifier guard that reads them can fire.
"""

from __future__ import annotations

from deedguide.domain.enums import CertificateStatus, PriorMarriageEnd
from deedguide.domain.facts import MarriedRecord, Owner, SingleRecord, TransactionContext

from . import guards

OWNER_STAGE_OFFSET = 3

MESSAGES = {
    'guidanceDate': 'Vui lòng nhập Ngày hướng dẫn',
    'transactionType': 'Vui lòng chọn Loại giao dịch',
    'hasCertificate': 'Vui lòng chọn tình trạng Giấy chứng nhận',
    'numberOfOwners': 'Số lượng chủ sở hữu phải ít nhất là 1',
    'propertyOrigin': 'Vui lòng chọn Nguồn gốc tài sản',
    'propertyOwnershipDate': 'Vui lòng nhập Ngày bắt đầu sở hữu',
    'isMortgaged': 'Vui lòng chọn Tình trạng thế chấp',
    'isSecured': 'Vui lòng chọn Tình trạng đăng ký giao dịch bảo đảm',
    'hasFinancialDebt': 'Vui lòng chọn Tình trạng nợ nghĩa vụ tài chính',
    'owners': 'Không tìm thấy thông tin chủ sở hữu cho bước này',
    'name': 'Vui lòng nhập Họ tên chủ sở hữu',
    'birthDate': 'Vui lòng nhập Ngày sinh chủ sở hữu',
    'gender': 'Vui lòng chọn Cách xưng hô',
    'maritalStatus': 'Vui lòng chọn Tình trạng hôn nhân',
    'singleStatusType': 'Vui lòng chọn chi tiết tình trạng độc thân',
    'divorceDate': 'Vui lòng nhập Ngày ly hôn',
    'exSpouseNameDivorce': 'Vui lòng nhập Họ tên vợ/chồng cũ',
    'exSpouseGenderDivorce': 'Vui lòng chọn Xưng hô vợ/chồng cũ',
    'spouseDeathDate': 'Vui lòng nhập Ngày vợ/chồng chết',
    'exSpouseNameDeath': 'Vui lòng nhập Họ tên vợ/chồng đã mất',
    'exSpouseGenderDeath': 'Vui lòng chọn Xưng hô vợ/chồng đã mất',
    'marriageDate': 'Vui lòng nhập Ngày đăng ký kết hôn',
    'currentSpouseName': 'Vui lòng nhập Họ tên vợ/chồng hiện tại',
    'currentSpouseGender': 'Vui lòng chọn Xưng hô vợ/chồng hiện tại',
    'marriageType': 'Vui lòng chọn Chi tiết kết hôn',
    'prevMarriageEndReason': 'Vui lòng chọn Lý do chấm dứt hôn nhân trước',
    'prevDivorceDate': 'Vui lòng nhập Ngày ly hôn trước đây',
    'prevSpouseDeathDate': 'Vui lòng nhập Ngày vợ/chồng trước chết',
    'prevSpouseName': 'Vui lòng nhập Họ tên vợ/chồng trước đây',
    'prevSpouseGender': 'Vui lòng chọn Xưng hô vợ/chồng trước đây',
}


class _Collector:
    def __init__(self) -> None:
        self.errors: dict[str, str] = {}

    def require(self, key: str, value) -> None:
        if value is None or value == '':
            self.errors[key] = MESSAGES[key]


def validate(context: TransactionContext, stage: int) -> dict[str, str]:
    c = _Collector()

    if stage == 0:
        c.require('guidanceDate', context.guidance_date)
        c.require('transactionType', context.transaction_type)
    elif stage == 1:
        c.require('hasCertificate', context.certificate_status)
    elif stage == 2:
        if not context.owner_count or context.owner_count < 1:
            c.errors['numberOfOwners'] = MESSAGES['numberOfOwners']
        c.require('propertyOrigin', context.property_origin)
        c.require('propertyOwnershipDate', context.acquisition_date)
        c.require('isMortgaged', context.mortgage_status)
        c.require('isSecured', context.secured_status)
        c.require('hasFinancialDebt', context.tax_debt_status)
    elif stage >= OWNER_STAGE_OFFSET:
        index = stage - OWNER_STAGE_OFFSET
        if index >= len(context.owners):
            c.errors['owners'] = MESSAGES['owners']
        else:
            _validate_owner(c, context.owners[index], context)

    return c.errors


def _validate_owner(c: _Collector, owner: Owner, context: TransactionContext) -> None:
    c.require('name', owner.name)
    c.require('birthDate', owner.birth_date)
    c.require('gender', owner.honorific)
    c.require('maritalStatus', owner.marital_status)

    if isinstance(owner.marital, SingleRecord):
        _validate_single(c, owner, owner.marital, context)
    elif isinstance(owner.marital, MarriedRecord):
        _validate_married(c, owner, owner.marital, context)


def _validate_single(c: _Collector, owner: Owner, single: SingleRecord, context: TransactionContext) -> None:
    c.require('singleStatusType', single.status)

    if single.is_divorced:
        c.require('divorceDate', single.divorce_date)
        if guards.acquired_before_divorce(owner, context):
            c.require('exSpouseNameDivorce', single.ex_spouse_name)
            c.require('exSpouseGenderDivorce', single.ex_spouse_honorific)
    elif single.is_widowed:
        c.require('spouseDeathDate', single.spouse_death_date)
        if guards.acquired_before_spouse_death(owner, context):
            c.require('exSpouseNameDeath', single.ex_spouse_name)
            c.require('exSpouseGenderDeath', single.ex_spouse_honorific)


def _validate_married(c: _Collector, owner: Owner, married: MarriedRecord, context: TransactionContext) -> None:
    c.require('marriageDate', married.marriage_date)
    if guards.married_before_acquisition(owner, context):
        c.require('currentSpouseName', married.spouse_name)
        c.require('currentSpouseGender', married.spouse_honorific)

    c.require('marriageType', married.marriage_order)
    if not married.is_remarriage:
        return

    c.require('prevMarriageEndReason', married.prior_end_reason)
    if married.prior_end_reason == PriorMarriageEnd.DIVORCE:
        c.require('prevDivorceDate', married.prior_end_date)
    elif married.prior_end_reason == PriorMarriageEnd.DEATH:
        c.require('prevSpouseDeathDate', married.prior_end_date)
    else:
        return

    if guards.acquired_during_prior_marriage(owner, context):
        c.require('prevSpouseName', married.prior_spouse_name)
        c.require('prevSpouseGender', married.prior_spouse_honorific)


def stage_count(context: TransactionContext) -> int:
    """Number of wizard stages for this fact sheet.

    The wizard ends after stage 1 when there is no certificate.
    """

    if context.certificate_status == CertificateStatus.ABSENT:
        return 2
    return OWNER_STAGE_OFFSET + len(context.owners)


def validate_all(context: TransactionContext) -> dict[int, dict[str, str]]:
    """Failing stages only; an empty mapping means the fact sheet is complete."""

    failures: dict[int, dict[str, str]] = {}
    for stage in range(stage_count(context)):
        errors = validate(context, stage)
        if errors:
            failures[stage] = errors
    return failures
