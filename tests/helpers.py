from __future__ import annotations

import json
from datetime import UTC, datetime
from decimal import Decimal

from fund_velocity.domain.messages import LoadAttempt, RawLine
from fund_velocity.domain.money import Money

_line_counter = 0


def attempt(
    id_value: str,
    customer_id: str,
    amount: str,
    ts: str,
    *,
    line_no: int | None = None,
) -> LoadAttempt:
    # Builds a parsed attempt directly, skipping JSON parsing.
    global _line_counter
    _line_counter += 1
    return LoadAttempt(
        line_no=line_no if line_no is not None else _line_counter,
        id=id_value,
        customer_id=customer_id,
        amount=Money(currency="USD", amount=Decimal(amount)),
        ts=datetime.fromisoformat(ts.replace("Z", "+00:00")).astimezone(UTC),
    )


def raw_line(line_no: int, *, id_value: str, customer_id: str, amount: str, ts: str) -> RawLine:
    payload = {"id": id_value, "customer_id": customer_id, "load_amount": amount, "time": ts}
    return RawLine(line_no=line_no, raw_text=json.dumps(payload))


def ndjson(*records: tuple[str, str, str, str]) -> str:
    # (id, customer_id, load_amount, time) tuples to NDJSON text.
    return "\n".join(
        json.dumps({"id": i, "customer_id": c, "load_amount": a, "time": t}) for i, c, a, t in records
    ) + "\n"
