from __future__ import annotations

from enum import Enum


# Stable internal reason codes; they are never written to the output file.
class ReasonCode(str, Enum):
    INPUT_PARSE_ERROR = "INPUT_PARSE_ERROR"
    INVALID_TIMESTAMP = "INVALID_TIMESTAMP"
    INVALID_AMOUNT_FORMAT = "INVALID_AMOUNT_FORMAT"
    INVALID_ID_FORMAT = "INVALID_ID_FORMAT"
    SINGLE_AMOUNT_LIMIT = "SINGLE_AMOUNT_LIMIT"
    DAILY_ATTEMPT_LIMIT = "DAILY_ATTEMPT_LIMIT"
    DAILY_AMOUNT_LIMIT = "DAILY_AMOUNT_LIMIT"
    WEEKLY_AMOUNT_LIMIT = "WEEKLY_AMOUNT_LIMIT"
