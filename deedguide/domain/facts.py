"""Fact-sheet records for one guidance session.

A `TransactionContext` owns its ordered `Owner` sequence. Each owner carries at
most one marital record: `SingleRecord` or `MarriedRecord`. Fields of the
variant that was not selected are never stored, so they cannot be read.

`TransactionContext.from_mapping()` parses the wire form produced by the intake
wizard (camelCase keys, `YYYY-MM-DD` dates, closed codes from `enums`).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping, Optional, Union

from deedguide.core.temporal import parse_date

from .enums import (
    CertificateStatus,
    Honorific,
    MaritalStatus,
    MarriageOrder,
    MortgageStatus,
    PriorMarriageEnd,
    PropertyOrigin,
    SingleStatus,
    TransactionType,
    YesNo,
)


# Upper bound on co-owners in one fact sheet.
MAX_OWNERS = 20


@dataclass
class SingleRecord:
    status: Optional[str] = None  # SingleStatus
    divorce_date: Optional[date] = None
    spouse_death_date: Optional[date] = None
    ex_spouse_name: str = ''
    ex_spouse_honorific: Optional[str] = None

    @property
    def is_never_married(self) -> bool:
        return self.status == SingleStatus.NEVER_MARRIED

    @property
    def is_divorced(self) -> bool:
        return self.status == SingleStatus.DIVORCED

    @property
    def is_widowed(self) -> bool:
        return self.status == SingleStatus.WIDOWED


@dataclass
class MarriedRecord:
    marriage_date: Optional[date] = None
    spouse_name: str = ''
    spouse_honorific: Optional[str] = None
    marriage_order: Optional[str] = None  # MarriageOrder
    prior_end_reason: Optional[str] = None  # PriorMarriageEnd
    prior_end_date: Optional[date] = None  # divorce date or death date, per reason
    prior_spouse_name: str = ''
    prior_spouse_honorific: Optional[str] = None

    @property
    def is_first_marriage(self) -> bool:
        return self.marriage_order == MarriageOrder.FIRST

    @property
    def is_remarriage(self) -> bool:
        return self.marriage_order == MarriageOrder.NOT_FIRST


MaritalRecord = Union[SingleRecord, MarriedRecord]


@dataclass
class Owner:
    id: int
    name: str = ''
    honorific: Optional[str] = None
    birth_date: Optional[date] = None
    marital: Optional[MaritalRecord] = None

    @property
    def marital_status(self) -> Optional[str]:
        if isinstance(self.marital, SingleRecord):
            return MaritalStatus.SINGLE
        if isinstance(self.marital, MarriedRecord):
            return MaritalStatus.MARRIED
        return None

    @property
    def single(self) -> Optional[SingleRecord]:
        return self.marital if isinstance(self.marital, SingleRecord) else None

    @property
    def married(self) -> Optional[MarriedRecord]:
        return self.marital if isinstance(self.marital, MarriedRecord) else None


@dataclass
class TransactionContext:
    guidance_date: Optional[date] = None
    transaction_type: Optional[str] = None
    certificate_status: Optional[str] = None
    owner_count: Optional[int] = None
    property_origin: Optional[str] = None
    acquisition_date: Optional[date] = None
    mortgage_status: Optional[str] = None
    secured_status: Optional[str] = None
    tax_debt_status: Optional[str] = None
    owners: list[Owner] = field(default_factory=list)

    @property
    def is_gift(self) -> bool:
        return self.transaction_type == TransactionType.GIFT

    @property
    def has_certificate(self) -> bool:
        return self.certificate_status != CertificateStatus.ABSENT

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'TransactionContext':
        if not isinstance(data, Mapping):
            raise ValueError('fact sheet must be a JSON object')

        raw_owners = data.get('owners') or []
        if not isinstance(raw_owners, (list, tuple)):
            raise ValueError('owners must be a list')

        owner_count = _count(data.get('numberOfOwners'))
        if owner_count is not None and owner_count > MAX_OWNERS:
            raise ValueError(f'numberOfOwners must not exceed {MAX_OWNERS}')
        if len(raw_owners) > MAX_OWNERS:
            raise ValueError(f'owners must not list more than {MAX_OWNERS} entries')

        return cls(
            guidance_date=_date(data, 'guidanceDate'),
            transaction_type=_code(data, 'transactionType', TransactionType.ALL),
            certificate_status=_code(data, 'hasCertificate', CertificateStatus.ALL),
            owner_count=owner_count,
            property_origin=_code(data, 'propertyOrigin', PropertyOrigin.ALL),
            acquisition_date=_date(data, 'propertyOwnershipDate'),
            mortgage_status=_code(data, 'isMortgaged', MortgageStatus.ALL),
            secured_status=_code(data, 'isSecured', YesNo.ALL),
            tax_debt_status=_code(data, 'hasFinancialDebt', YesNo.ALL),
            owners=[owner_from_mapping(o, position) for position, o in enumerate(raw_owners, start=1)],
        )


def owner_from_mapping(data: Mapping[str, Any], position: int) -> Owner:
    if not isinstance(data, Mapping):
        raise ValueError(f'owner #{position} must be a JSON object')

    owner = Owner(
        id=_count(data.get('id')) or position,
        name=_name(data.get('name')),
        honorific=_code(data, 'gender', Honorific.ALL),
        birth_date=_date(data, 'birthDate'),
    )

    status = _code(data, 'maritalStatus', MaritalStatus.ALL)
    if status == MaritalStatus.SINGLE:
        owner.marital = _single_from_mapping(data)
    elif status == MaritalStatus.MARRIED:
        owner.marital = _married_from_mapping(data)
    return owner


def _single_from_mapping(data: Mapping[str, Any]) -> SingleRecord:
    record = SingleRecord(status=_code(data, 'singleStatusType', SingleStatus.ALL))
    if record.is_divorced:
        record.divorce_date = _date(data, 'divorceDate')
        record.ex_spouse_name = _name(data.get('exSpouseNameDivorce'))
        record.ex_spouse_honorific = _code(data, 'exSpouseGenderDivorce', Honorific.ALL)
    elif record.is_widowed:
        record.spouse_death_date = _date(data, 'spouseDeathDate')
        record.ex_spouse_name = _name(data.get('exSpouseNameDeath'))
        record.ex_spouse_honorific = _code(data, 'exSpouseGenderDeath', Honorific.ALL)
    return record


def _married_from_mapping(data: Mapping[str, Any]) -> MarriedRecord:
    record = MarriedRecord(
        marriage_date=_date(data, 'marriageDate'),
        spouse_name=_name(data.get('currentSpouseName')),
        spouse_honorific=_code(data, 'currentSpouseGender', Honorific.ALL),
        marriage_order=_code(data, 'marriageType', MarriageOrder.ALL),
    )
    if record.is_remarriage:
        record.prior_end_reason = _code(data, 'prevMarriageEndReason', PriorMarriageEnd.ALL)
        if record.prior_end_reason == PriorMarriageEnd.DIVORCE:
            record.prior_end_date = _date(data, 'prevDivorceDate')
        elif record.prior_end_reason == PriorMarriageEnd.DEATH:
            record.prior_end_date = _date(data, 'prevSpouseDeathDate')
        record.prior_spouse_name = _name(data.get('prevSpouseName'))
        record.prior_spouse_honorific = _code(data, 'prevSpouseGender', Honorific.ALL)
    return record


def resize_owners(context: TransactionContext) -> TransactionContext:
    """Fix the owner sequence to the declared owner count.

    Extends with blank owners numbered by position, or truncates. A missing or
    invalid count resizes to a single owner. The count is capped at
    MAX_OWNERS.
    """

    target = context.owner_count if context.owner_count and context.owner_count >= 1 else 1
    target = min(target, MAX_OWNERS)
    current = len(context.owners)
    if target > current:
        context.owners.extend(Owner(id=i + 1) for i in range(current, target))
    elif target < current:
        del context.owners[target:]
    return context


def load_fact_sheet(data: Mapping[str, Any]) -> TransactionContext:
    """Parse a wire fact sheet and align its owners with the declared count."""

    context = TransactionContext.from_mapping(data)
    if context.owner_count and context.owner_count >= 1:
        resize_owners(context)
    return context


def _code(data: Mapping[str, Any], key: str, allowed: tuple[str, ...]) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    value = str(value).strip()
    if not value:
        return None
    if value not in allowed:
        raise ValueError(f"{key} must be one of: {', '.join(allowed)}")
    return value


def _date(data: Mapping[str, Any], key: str) -> Optional[date]:
    try:
        return parse_date(data.get(key))
    except ValueError as exc:
        raise ValueError(f'{key}: {exc}') from exc


def _name(value: Any) -> str:
    return str(value or '').strip().upper()


def _count(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None
