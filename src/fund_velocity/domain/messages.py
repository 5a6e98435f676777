from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

from .money import Money


@dataclass(frozen=True, slots=True)
class RawLine:
    # line_no is 1-based physical position in the input file.
    line_no: int
    raw_text: str


@dataclass(frozen=True, slots=True)
class LoadAttempt:
    line_no: int
    id: str
    customer_id: str
    amount: Money
    ts: datetime
    raw: Mapping[str, Any] | None = None


@dataclass(frozen=True, slots=True)
class Decision:
    # Only id, customer_id and accepted are serialized; the rest is for diagnostics.
    line_no: int
    id: str
    customer_id: str
    accepted: bool
    reasons: tuple[str, ...] = ()
