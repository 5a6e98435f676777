from .errors import ParseError
from .messages import Decision, LoadAttempt, RawLine
from .money import Money, MoneyParseError, parse_money, sum_money
from .reasons import ReasonCode

# Public domain exports keep imports explicit across layers.
__all__ = [
    "Decision",
    "LoadAttempt",
    "Money",
    "MoneyParseError",
    "ParseError",
    "RawLine",
    "ReasonCode",
    "parse_money",
    "sum_money",
]
