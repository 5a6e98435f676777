from __future__ import annotations

from .reasons import ReasonCode


class ParseError(ValueError):
    # Raised for any record that cannot be turned into a LoadAttempt; aborts the run.
    def __init__(self, reason: ReasonCode, *, line_no: int | None = None, detail: str | None = None) -> None:
        message = reason.value
        if line_no is not None:
            message = f"line {line_no}: {message}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.reason = reason
        self.line_no = line_no
        self.detail = detail
