from __future__ import annotations

from decimal import Decimal

# Velocity limits are fixed for this program; they are not read from config.
SINGLE_LOAD_LIMIT = Decimal("5000.00")
DAILY_ATTEMPT_LIMIT = 3
DAILY_AMOUNT_LIMIT = Decimal("5000.00")
WEEKLY_AMOUNT_LIMIT = Decimal("20000.00")

# Calendar weeks start on Sunday 00:00 UTC.
WEEK_START = "SUN"
