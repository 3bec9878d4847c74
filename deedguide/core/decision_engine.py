from __future__ import annotations

import logging
from dataclasses import dataclass

from deedguide.domain.facts import TransactionContext

from .household_flags import FlagOutcome, evaluate_flags
from .message_engine import NOT_ELIGIBLE_MESSAGE
from .owner_classifier import Classification, classify

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GuidanceOutput:
    classifications: list[Classification]
    flags: list[FlagOutcome]

    @property
    def narratives(self) -> list[str]:
        return [c.narrative for c in self.classifications] + [f.narrative for f in self.flags]

    @property
    def unmatched_owner_ids(self) -> list[int]:
        return [c.owner_id for c in self.classifications if not c.matched]


def evaluate(context: TransactionContext) -> GuidanceOutput:
    """Classify every owner in stored order, then append household flags."""

    classifications = []
    for owner in context.owners:
        outcome = classify(owner, context)
        if not outcome.matched:
            logger.warning('No guidance rule matched owner #%s; check dates against life events', owner.id)
        else:
            logger.debug('Owner #%s classified by rule %s', owner.id, outcome.rule)
        classifications.append(outcome)

    return GuidanceOutput(classifications=classifications, flags=evaluate_flags(context))


def generate(context: TransactionContext) -> list[str]:
    return evaluate(context).narratives


def run_guidance(context: TransactionContext) -> list[str]:
    """Narratives for a completed fact sheet.

    Without a land/house certificate the file cannot be notarised, so the
    only outcome is the ineligibility notice.
    """

    if not context.has_certificate:
        return [NOT_ELIGIBLE_MESSAGE]
    return generate(context)
