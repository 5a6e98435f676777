from __future__ import annotations

import json
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, ValidationError

from fund_velocity.domain.errors import ParseError
from fund_velocity.domain.messages import LoadAttempt, RawLine
from fund_velocity.domain.money import MoneyParseError, parse_money
from fund_velocity.domain.reasons import ReasonCode


class _RawLoadAttempt(BaseModel):
    id: str
    customer_id: str
    load_amount: str
    time: str

    model_config = ConfigDict(extra="ignore")


class ParseLoadAttempt:
    # Malformed records are fatal: every failure raises ParseError with the line number.
    def __call__(self, msg: RawLine) -> LoadAttempt:
        try:
            payload = json.loads(msg.raw_text)
        except json.JSONDecodeError as exc:
            raise ParseError(ReasonCode.INPUT_PARSE_ERROR, line_no=msg.line_no, detail=exc.msg) from exc

        if not isinstance(payload, dict):
            raise ParseError(ReasonCode.INPUT_PARSE_ERROR, line_no=msg.line_no, detail="record must be an object")

        try:
            raw = _RawLoadAttempt.model_validate(payload)
        except ValidationError as exc:
            fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
            raise ParseError(ReasonCode.INPUT_PARSE_ERROR, line_no=msg.line_no, detail=fields) from exc

        id_value = _normalize_id(raw.id, line_no=msg.line_no)
        customer_value = _normalize_id(raw.customer_id, line_no=msg.line_no)

        try:
            ts = _parse_timestamp(raw.time)
        except ValueError as exc:
            raise ParseError(ReasonCode.INVALID_TIMESTAMP, line_no=msg.line_no, detail=raw.time) from exc

        try:
            amount = parse_money(raw.load_amount)
        except MoneyParseError as exc:
            raise ParseError(exc.reason, line_no=msg.line_no, detail=exc.detail) from exc

        return LoadAttempt(
            line_no=msg.line_no,
            id=id_value,
            customer_id=customer_value,
            amount=amount,
            ts=ts,
            raw=payload,
        )


def _normalize_id(value: str, *, line_no: int) -> str:
    # Ids are compared verbatim; whitespace-only ids are rejected.
    if not value.strip():
        raise ParseError(ReasonCode.INVALID_ID_FORMAT, line_no=line_no, detail="empty id")
    return value


def _parse_timestamp(value: str) -> datetime:
    # ISO8601 with optional Z suffix; naive timestamps are read as UTC.
    text = value.strip()
    ts = datetime.fromisoformat(text.replace("Z", "+00:00"))
    if ts.tzinfo is None:
        return ts.replace(tzinfo=UTC)
    return ts.astimezone(UTC)
