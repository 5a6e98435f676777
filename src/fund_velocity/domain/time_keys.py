from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from .limits import WEEK_START

_WEEKDAY_ORDER = ["MON", "TUE", "WED", "THU", "FRI", "SAT", "SUN"]


@dataclass(frozen=True, slots=True)
class TimeKeys:
    # Calendar buckets derived from a UTC timestamp.
    day_key: date
    week_key: date


def compute_time_keys(ts: datetime, week_start: str = WEEK_START) -> TimeKeys:
    # Timestamps are already normalized to UTC by the parser.
    day_key = ts.date()
    return TimeKeys(day_key=day_key, week_key=week_start_date(day_key, week_start))


def week_start_date(day_key: date, week_start: str = WEEK_START) -> date:
    # Calendar week anchored to week_start; rolling windows are not used.
    if week_start not in _WEEKDAY_ORDER:
        raise ValueError("week_start must be one of MON..SUN")

    dow = day_key.weekday()  # 0=Mon..6=Sun
    start_dow = _WEEKDAY_ORDER.index(week_start)
    delta = (dow - start_dow) % 7
    return date.fromordinal(day_key.toordinal() - delta)
