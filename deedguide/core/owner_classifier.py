"""Owner classifier: legal character of one owner's share.

Rules are evaluated in a fixed order and the first match wins. The
never-married/gift rule overlaps the others and wins by order; the remaining
adult guards are mutually exclusive when a prior marriage ended before the
current one began. An owner no rule matches gets the `no_applicable_rule`
outcome.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from deedguide.domain.facts import Owner, TransactionContext

from . import guards
from . import message_engine as msg

Guard = Callable[[Owner, TransactionContext], bool]
Renderer = Callable[[Owner, TransactionContext], str]


class Category:
    GIFT_TO_MINOR_PROHIBITED = 'gift_to_minor_prohibited'
    MINOR_UNDER_9 = 'minor_under_9'
    MINOR_9_TO_15 = 'minor_9_to_15'
    MINOR_15_TO_18 = 'minor_15_to_18'
    ADULT_SEPARATE_PROPERTY = 'adult_separate_property'
    ADULT_JOINT_PROPERTY = 'adult_joint_property'
    ADULT_INHERITANCE_PENDING = 'adult_inheritance_pending'
    NO_APPLICABLE_RULE = 'no_applicable_rule'


# Signatory roles, from most to least adult involvement for minors.
PARENTS = ('parents',)
PARENTS_AND_MINOR = ('parents', 'minor')
MINOR_WITH_PARENTS_CONSENT = ('minor', 'parents_consent')
OWNER_ALONE = ('owner',)
OWNER_AND_SPOUSE = ('owner', 'spouse')
OWNER_AND_FORMER_SPOUSE = ('owner', 'former_spouse')
OWNER_AND_HEIRS = ('owner', 'heirs')


@dataclass(frozen=True)
class Rule:
    key: str
    category: str
    signers: tuple[str, ...]
    applies: Guard
    render: Renderer


@dataclass(frozen=True)
class Classification:
    category: str
    rule: str
    owner_id: int
    owner_name: str
    signers: tuple[str, ...]
    narrative: str

    @property
    def matched(self) -> bool:
        return self.category != Category.NO_APPLICABLE_RULE


def _adult(guard: Guard) -> Guard:
    def applies(owner: Owner, context: TransactionContext) -> bool:
        return guards.is_adult(owner, context) and guard(owner, context)

    applies.__name__ = guard.__name__
    return applies


def _under_9(owner: Owner, context: TransactionContext) -> bool:
    return guards.under_age(owner, context, guards.AGE_OF_DISCERNMENT)


def _age_9_to_15(owner: Owner, context: TransactionContext) -> bool:
    return guards.reached_age(owner, context, guards.AGE_OF_DISCERNMENT) and guards.under_age(
        owner, context, guards.AGE_OF_PARTIAL_CAPACITY
    )


def _age_15_to_18(owner: Owner, context: TransactionContext) -> bool:
    return guards.reached_age(owner, context, guards.AGE_OF_PARTIAL_CAPACITY) and guards.under_age(
        owner, context, guards.AGE_OF_MAJORITY
    )


MINOR_RULES: tuple[Rule, ...] = (
    Rule('gift_by_minor', Category.GIFT_TO_MINOR_PROHIBITED, (), guards.gift_by_minor, msg.gift_by_minor_message),
    Rule('under_9', Category.MINOR_UNDER_9, PARENTS, _under_9, msg.under_9_message),
    Rule('age_9_to_15', Category.MINOR_9_TO_15, PARENTS_AND_MINOR, _age_9_to_15, msg.age_9_to_15_message),
    Rule(
        'age_15_to_18',
        Category.MINOR_15_TO_18,
        MINOR_WITH_PARENTS_CONSENT,
        _age_15_to_18,
        msg.age_15_to_18_message,
    ),
)

ADULT_RULES: tuple[Rule, ...] = (
    Rule(
        'never_married_or_gifted',
        Category.ADULT_SEPARATE_PROPERTY,
        OWNER_ALONE,
        _adult(guards.never_married_or_gifted),
        msg.never_married_or_gifted_message,
    ),
    Rule(
        'divorced_before_acquisition',
        Category.ADULT_SEPARATE_PROPERTY,
        OWNER_ALONE,
        _adult(guards.divorced_before_acquisition),
        msg.divorced_before_acquisition_message,
    ),
    Rule(
        'widowed_before_acquisition',
        Category.ADULT_SEPARATE_PROPERTY,
        OWNER_ALONE,
        _adult(guards.widowed_before_acquisition),
        msg.widowed_before_acquisition_message,
    ),
    Rule(
        'acquired_before_divorce',
        Category.ADULT_JOINT_PROPERTY,
        OWNER_AND_FORMER_SPOUSE,
        _adult(guards.acquired_before_divorce),
        msg.acquired_before_divorce_message,
    ),
    Rule(
        'acquired_before_spouse_death',
        Category.ADULT_INHERITANCE_PENDING,
        OWNER_AND_HEIRS,
        _adult(guards.acquired_before_spouse_death),
        msg.acquired_before_spouse_death_message,
    ),
    Rule(
        'acquired_before_first_marriage',
        Category.ADULT_SEPARATE_PROPERTY,
        OWNER_ALONE,
        _adult(guards.acquired_before_first_marriage),
        msg.acquired_before_first_marriage_message,
    ),
    Rule(
        'married_before_acquisition',
        Category.ADULT_JOINT_PROPERTY,
        OWNER_AND_SPOUSE,
        _adult(guards.married_before_acquisition),
        msg.married_before_acquisition_message,
    ),
    Rule(
        'acquired_between_divorce_and_remarriage',
        Category.ADULT_SEPARATE_PROPERTY,
        OWNER_ALONE,
        _adult(guards.acquired_between_divorce_and_remarriage),
        msg.acquired_between_divorce_and_remarriage_message,
    ),
    Rule(
        'acquired_before_prior_divorce',
        Category.ADULT_JOINT_PROPERTY,
        OWNER_AND_FORMER_SPOUSE,
        _adult(guards.acquired_before_prior_divorce),
        msg.acquired_before_prior_divorce_message,
    ),
    Rule(
        'acquired_between_death_and_remarriage',
        Category.ADULT_SEPARATE_PROPERTY,
        OWNER_ALONE,
        _adult(guards.acquired_between_death_and_remarriage),
        msg.acquired_between_death_and_remarriage_message,
    ),
    Rule(
        'acquired_before_prior_spouse_death',
        Category.ADULT_INHERITANCE_PENDING,
        OWNER_AND_HEIRS,
        _adult(guards.acquired_before_prior_spouse_death),
        msg.acquired_before_prior_spouse_death_message,
    ),
)

RULES: tuple[Rule, ...] = MINOR_RULES + ADULT_RULES

FALLBACK_RULE_KEY = 'no_applicable_rule'


def matching_rules(owner: Owner, context: TransactionContext) -> list[Rule]:
    """Every rule whose guard holds, in evaluation order (diagnostics and tests)."""
    return [rule for rule in RULES if rule.applies(owner, context)]


def classify(owner: Owner, context: TransactionContext) -> Classification:
    for rule in RULES:
        if rule.applies(owner, context):
            return Classification(
                category=rule.category,
                rule=rule.key,
                owner_id=owner.id,
                owner_name=owner.name,
                signers=rule.signers,
                narrative=rule.render(owner, context),
            )

    return Classification(
        category=Category.NO_APPLICABLE_RULE,
        rule=FALLBACK_RULE_KEY,
        owner_id=owner.id,
        owner_name=owner.name,
        signers=(),
        narrative=msg.no_applicable_rule_message(owner, context),
    )
