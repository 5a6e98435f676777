from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import date

from fund_velocity.domain.messages import LoadAttempt
from fund_velocity.domain.money import Money, sum_money
from fund_velocity.domain.time_keys import compute_time_keys


@dataclass(frozen=True, slots=True)
class WindowSnapshot:
    # Read model for policy checks; values exclude the attempt being evaluated.
    day_attempts_before: int
    day_accepted_amount_before: Money
    week_accepted_amount_before: Money


@dataclass(frozen=True, slots=True)
class _Entry:
    attempt: LoadAttempt
    day_key: date
    week_key: date


@dataclass
class AcceptedHistory:
    # Append-only record of accepted attempts for one run, indexed by customer.
    _entries: list[LoadAttempt] = field(default_factory=list)
    _by_customer: dict[str, list[_Entry]] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LoadAttempt]:
        return iter(self._entries)

    def append(self, attempt: LoadAttempt) -> None:
        keys = compute_time_keys(attempt.ts)
        self._entries.append(attempt)
        self._by_customer.setdefault(attempt.customer_id, []).append(
            _Entry(attempt=attempt, day_key=keys.day_key, week_key=keys.week_key)
        )

    def daily_attempts(self, *, customer_id: str, day_key: date) -> list[LoadAttempt]:
        return [e.attempt for e in self._by_customer.get(customer_id, []) if e.day_key == day_key]

    def weekly_attempts(self, *, customer_id: str, week_key: date) -> list[LoadAttempt]:
        return [e.attempt for e in self._by_customer.get(customer_id, []) if e.week_key == week_key]

    def read_snapshot(self, *, customer_id: str, day_key: date, week_key: date) -> WindowSnapshot:
        daily = self.daily_attempts(customer_id=customer_id, day_key=day_key)
        weekly = self.weekly_attempts(customer_id=customer_id, week_key=week_key)
        return WindowSnapshot(
            day_attempts_before=len(daily),
            day_accepted_amount_before=sum_money(a.amount for a in daily),
            week_accepted_amount_before=sum_money(a.amount for a in weekly),
        )
