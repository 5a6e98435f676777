from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from decimal import Decimal

from fund_velocity.domain import limits
from fund_velocity.domain.messages import Decision, LoadAttempt
from fund_velocity.domain.reasons import ReasonCode
from fund_velocity.domain.time_keys import compute_time_keys
from fund_velocity.services.accepted_history import AcceptedHistory
from fund_velocity.usecases.duplicate_index import DuplicateIndex


@dataclass(frozen=True, slots=True)
class EvaluationResult:
    # Decisions are in input order; suppressed duplicates are listed separately.
    decisions: tuple[Decision, ...]
    suppressed: tuple[LoadAttempt, ...]

    @property
    def accepted_count(self) -> int:
        return sum(1 for d in self.decisions if d.accepted)

    @property
    def declined_count(self) -> int:
        return sum(1 for d in self.decisions if not d.accepted)


@dataclass
class VelocityEngine:
    """Applies duplicate suppression and velocity limits to a full batch.

    Checks run in a fixed order and stop at the first match: duplicate,
    single load amount, daily attempt count, daily amount, weekly amount.
    Only accepted attempts are appended to the history, so declines never
    influence later decisions.
    """

    history: AcceptedHistory = field(default_factory=AcceptedHistory)
    single_load_limit: Decimal = limits.SINGLE_LOAD_LIMIT
    daily_attempt_limit: int = limits.DAILY_ATTEMPT_LIMIT
    daily_amount_limit: Decimal = limits.DAILY_AMOUNT_LIMIT
    weekly_amount_limit: Decimal = limits.WEEKLY_AMOUNT_LIMIT

    def evaluate(self, attempts: Sequence[LoadAttempt]) -> EvaluationResult:
        # The duplicate index needs the whole batch, including records later in file order.
        duplicates = DuplicateIndex.build(attempts)
        decisions: list[Decision] = []
        suppressed: list[LoadAttempt] = []
        for attempt in attempts:
            if duplicates.is_duplicate(attempt):
                suppressed.append(attempt)
                continue
            decisions.append(self.decide(attempt))
        return EvaluationResult(decisions=tuple(decisions), suppressed=tuple(suppressed))

    def decide(self, attempt: LoadAttempt) -> Decision:
        # Limit checks for one non-duplicate attempt; accepts mutate history.
        amount = attempt.amount.amount
        if amount > self.single_load_limit:
            return _decline(attempt, ReasonCode.SINGLE_AMOUNT_LIMIT)

        keys = compute_time_keys(attempt.ts)
        snapshot = self.history.read_snapshot(
            customer_id=attempt.customer_id,
            day_key=keys.day_key,
            week_key=keys.week_key,
        )

        # Count excludes the current attempt; sums below include it.
        if snapshot.day_attempts_before > self.daily_attempt_limit:
            return _decline(attempt, ReasonCode.DAILY_ATTEMPT_LIMIT)

        if snapshot.day_accepted_amount_before.amount + amount > self.daily_amount_limit:
            return _decline(attempt, ReasonCode.DAILY_AMOUNT_LIMIT)

        if snapshot.week_accepted_amount_before.amount + amount > self.weekly_amount_limit:
            return _decline(attempt, ReasonCode.WEEKLY_AMOUNT_LIMIT)

        self.history.append(attempt)
        return Decision(
            line_no=attempt.line_no,
            id=attempt.id,
            customer_id=attempt.customer_id,
            accepted=True,
        )


def _decline(attempt: LoadAttempt, reason: ReasonCode) -> Decision:
    return Decision(
        line_no=attempt.line_no,
        id=attempt.id,
        customer_id=attempt.customer_id,
        accepted=False,
        reasons=(reason.value,),
    )
