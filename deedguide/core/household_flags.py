from __future__ import annotations

from dataclasses import dataclass

from deedguide.domain.enums import MortgageStatus, YesNo
from deedguide.domain.facts import TransactionContext

from . import message_engine as msg


class Flag:
    MORTGAGE_RELEASE_NEEDED = 'mortgage_release_needed'
    SECURED_TRANSACTION_CLEARANCE_NEEDED = 'secured_transaction_clearance_needed'
    TAX_DEBT_BLOCKING = 'tax_debt_blocking'

    # Output order is fixed.
    ALL = (MORTGAGE_RELEASE_NEEDED, SECURED_TRANSACTION_CLEARANCE_NEEDED, TAX_DEBT_BLOCKING)


@dataclass(frozen=True)
class FlagOutcome:
    flag: str
    narrative: str

    @property
    def blocking(self) -> bool:
        return self.flag == Flag.TAX_DEBT_BLOCKING


def evaluate_flags(context: TransactionContext) -> list[FlagOutcome]:
    """Household advisories: mortgage, then secured transaction, then tax debt."""

    outcomes: list[FlagOutcome] = []
    if context.mortgage_status == MortgageStatus.MORTGAGED:
        outcomes.append(FlagOutcome(Flag.MORTGAGE_RELEASE_NEEDED, msg.mortgage_release_message()))
    if context.secured_status == YesNo.YES:
        outcomes.append(FlagOutcome(Flag.SECURED_TRANSACTION_CLEARANCE_NEEDED, msg.secured_transaction_message()))
    if context.tax_debt_status == YesNo.YES:
        outcomes.append(FlagOutcome(Flag.TAX_DEBT_BLOCKING, msg.tax_debt_message()))
    return outcomes
