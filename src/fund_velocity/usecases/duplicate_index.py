from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime

from fund_velocity.domain.messages import LoadAttempt


@dataclass
class DuplicateIndex:
    """Earliest timestamp per (id, customer_id) over the whole input batch.

    An attempt is a duplicate when another record with the same id and
    customer exists with a strictly earlier timestamp. Only the minimum
    timestamp per key is needed to answer that, so file order is irrelevant.
    """

    _earliest: dict[tuple[str, str], datetime] = field(default_factory=dict)

    @classmethod
    def build(cls, attempts: Iterable[LoadAttempt]) -> DuplicateIndex:
        index = cls()
        for attempt in attempts:
            index.add(attempt)
        return index

    def add(self, attempt: LoadAttempt) -> None:
        key = (attempt.id, attempt.customer_id)
        current = self._earliest.get(key)
        if current is None or attempt.ts < current:
            self._earliest[key] = attempt.ts

    def is_duplicate(self, attempt: LoadAttempt) -> bool:
        earliest = self._earliest.get((attempt.id, attempt.customer_id))
        return earliest is not None and earliest < attempt.ts
