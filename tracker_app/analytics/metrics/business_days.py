"""Business-day (Monday-Friday) duration computation (pure functions)."""

from __future__ import annotations

from datetime import date, datetime, timedelta

import numpy as np


def _as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def business_days(start: date | datetime | None, end: date | datetime | None) -> int:
    """Count weekdays from ``start`` to ``end``, both endpoints inclusive.

    Time of day is ignored. Returns 0 when either bound is missing or the range
    is inverted.
    """
    if start is None or end is None:
        return 0
    first = _as_date(start)
    last = _as_date(end)
    if last < first:
        return 0
    # busday_count excludes the end date, so shift it by one calendar day.
    return int(np.busday_count(first, last + timedelta(days=1)))
