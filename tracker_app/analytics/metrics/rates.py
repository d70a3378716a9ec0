"""Rounding and rate helpers shared by aggregations and reports."""

from __future__ import annotations

import math
from collections.abc import Iterable


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (Python's round() is banker's)."""
    return int(math.floor(value + 0.5))


def rounded_mean(values: Iterable[int | float]) -> int:
    """Round-half-up mean of ``values``; 0 for an empty input."""
    data = list(values)
    if not data:
        return 0
    return round_half_up(sum(data) / len(data))


def completion_rate(resolved: int, total: int) -> int:
    """Percent of ``resolved`` over ``total``; 0 when ``total`` is 0."""
    if total <= 0:
        return 0
    return round_half_up(100 * resolved / total)
