"""Guard predicates over one owner's facts.

The owner classifier selects a rule with these predicates and the input
validator uses the same ones to decide which spouse facts must be collected,
so "what we ask for" and "what the rules need" cannot drift apart.

Every predicate is total: an unset date makes the comparison false.
"""

from __future__ import annotations

from deedguide.domain.enums import PriorMarriageEnd, PropertyOrigin
from deedguide.domain.facts import Owner, TransactionContext

from .temporal import add_years, before, before_or_equal

AGE_OF_DISCERNMENT = 9
AGE_OF_PARTIAL_CAPACITY = 15
AGE_OF_MAJORITY = 18


def under_age(owner: Owner, context: TransactionContext, years: int) -> bool:
    """today < birth + years."""
    return before(context.guidance_date, add_years(owner.birth_date, years))


def reached_age(owner: Owner, context: TransactionContext, years: int) -> bool:
    """birth + years <= today."""
    return before_or_equal(add_years(owner.birth_date, years), context.guidance_date)


def is_minor(owner: Owner, context: TransactionContext) -> bool:
    return under_age(owner, context, AGE_OF_MAJORITY)


def is_adult(owner: Owner, context: TransactionContext) -> bool:
    return reached_age(owner, context, AGE_OF_MAJORITY)


def gift_by_minor(owner: Owner, context: TransactionContext) -> bool:
    return is_minor(owner, context) and context.is_gift


def never_married_or_gifted(owner: Owner, context: TransactionContext) -> bool:
    single = owner.single
    never_married = bool(single and single.is_never_married)
    return never_married or context.property_origin == PropertyOrigin.GIFT_OR_INHERITANCE


# -- Single owners -----------------------------------------------------------

def divorced_before_acquisition(owner: Owner, context: TransactionContext) -> bool:
    single = owner.single
    return bool(single and single.is_divorced and before(single.divorce_date, context.acquisition_date))


def widowed_before_acquisition(owner: Owner, context: TransactionContext) -> bool:
    single = owner.single
    return bool(single and single.is_widowed and before(single.spouse_death_date, context.acquisition_date))


def acquired_before_divorce(owner: Owner, context: TransactionContext) -> bool:
    single = owner.single
    return bool(single and single.is_divorced and before_or_equal(context.acquisition_date, single.divorce_date))


def acquired_before_spouse_death(owner: Owner, context: TransactionContext) -> bool:
    single = owner.single
    return bool(
        single and single.is_widowed and before_or_equal(context.acquisition_date, single.spouse_death_date)
    )


# -- Married owners ----------------------------------------------------------

def acquired_before_first_marriage(owner: Owner, context: TransactionContext) -> bool:
    married = owner.married
    return bool(
        married
        and married.is_first_marriage
        and before(context.acquisition_date, married.marriage_date)
    )


def married_before_acquisition(owner: Owner, context: TransactionContext) -> bool:
    married = owner.married
    return bool(married and before_or_equal(married.marriage_date, context.acquisition_date))


def _acquired_between_marriages(owner: Owner, context: TransactionContext, reason: str) -> bool:
    married = owner.married
    if not (married and married.is_remarriage and married.prior_end_reason == reason):
        return False
    return (
        before(married.prior_end_date, context.acquisition_date)
        and before(context.acquisition_date, married.marriage_date)
    )


def _acquired_during_prior_marriage(owner: Owner, context: TransactionContext, reason: str) -> bool:
    married = owner.married
    if not (married and married.is_remarriage and married.prior_end_reason == reason):
        return False
    return before_or_equal(context.acquisition_date, married.prior_end_date)


def acquired_between_divorce_and_remarriage(owner: Owner, context: TransactionContext) -> bool:
    return _acquired_between_marriages(owner, context, PriorMarriageEnd.DIVORCE)


def acquired_between_death_and_remarriage(owner: Owner, context: TransactionContext) -> bool:
    return _acquired_between_marriages(owner, context, PriorMarriageEnd.DEATH)


def acquired_before_prior_divorce(owner: Owner, context: TransactionContext) -> bool:
    return _acquired_during_prior_marriage(owner, context, PriorMarriageEnd.DIVORCE)


def acquired_before_prior_spouse_death(owner: Owner, context: TransactionContext) -> bool:
    return _acquired_during_prior_marriage(owner, context, PriorMarriageEnd.DEATH)


def acquired_during_prior_marriage(owner: Owner, context: TransactionContext) -> bool:
    return acquired_before_prior_divorce(owner, context) or acquired_before_prior_spouse_death(owner, context)
