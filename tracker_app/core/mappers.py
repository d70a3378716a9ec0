"""Map raw export rows into canonical Item instances."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import asdict
from datetime import date

import pandas as pd

from tracker_app.analytics.metrics.business_days import business_days

from .config import (
    DEFAULT_ITEM_TYPE,
    HIGH_PRIORITY_KEYWORDS,
    LOW_PRIORITY_KEYWORDS,
    RESOLVED_STATUS_KEYWORDS,
    UNKNOWN_PROJECT,
    UNSPECIFIED_PERSON,
)
from .field_config import load_field_aliases
from .models import Item, Priority, RawRow, Status

# (pattern, group order as (year, month, day))
DATE_PATTERNS: tuple[tuple[re.Pattern[str], tuple[int, int, int]], ...] = (
    (re.compile(r"(\d{1,2})/(\d{1,2})/(\d{4})"), (3, 2, 1)),  # D/M/YYYY, day-first
    (re.compile(r"(\d{4})-(\d{1,2})-(\d{1,2})"), (1, 2, 3)),  # YYYY-M-D
    (re.compile(r"(\d{1,2})-(\d{1,2})-(\d{4})"), (3, 2, 1)),  # D-M-YYYY, day-first
)


def resolve_field(row: Mapping[str, str], candidates: Iterable[str]) -> str | None:
    """Return the first non-empty value among ``candidates`` (in order)."""
    for key in candidates:
        value = row.get(key)
        if value:
            return value
    return None


def normalize_status(value: str | None) -> Status:
    if not value:
        return Status.OPEN
    text = value.lower()
    if any(keyword in text for keyword in RESOLVED_STATUS_KEYWORDS):
        return Status.RESOLVED
    return Status.OPEN


def normalize_priority(value: str | None) -> Priority:
    if not value:
        return Priority.MEDIUM
    text = value.lower()
    if any(keyword in text for keyword in HIGH_PRIORITY_KEYWORDS):
        return Priority.HIGH
    if any(keyword in text for keyword in LOW_PRIORITY_KEYWORDS):
        return Priority.LOW
    return Priority.MEDIUM


def parse_date(value: str | None) -> date | None:
    """Parse an export date; ambiguous slash dates are read day-first.

    Returns ``None`` for empty input, impossible calendar dates, and anything
    neither the known patterns nor pandas can interpret.
    """
    if value is None or not str(value).strip():
        return None
    text = str(value).strip()
    for pattern, (y_idx, m_idx, d_idx) in DATE_PATTERNS:
        match = pattern.search(text)
        if match:
            try:
                return date(int(match.group(y_idx)), int(match.group(m_idx)), int(match.group(d_idx)))
            except ValueError:
                return None
    ts = pd.to_datetime(text, errors="coerce")
    if ts is None or pd.isna(ts):
        return None
    return ts.date()


def map_row(row: RawRow, now: date) -> Item:
    aliases = load_field_aliases()

    def field(name: str) -> str | None:
        return resolve_field(row, aliases.get(name, ()))

    status = normalize_status(field("status"))
    created = parse_date(field("created"))
    resolved = parse_date(field("resolved")) if status is Status.RESOLVED else None

    resolution_time = business_days(created, resolved) if created and resolved else None
    open_time = business_days(created, now) if status is Status.OPEN and created else None

    return Item(
        project=field("project") or UNKNOWN_PROJECT,
        type=field("type") or DEFAULT_ITEM_TYPE,
        responsible=field("responsible") or UNSPECIFIED_PERSON,
        reporter=field("reporter") or UNSPECIFIED_PERSON,
        priority=normalize_priority(field("priority")),
        status=status,
        created=created,
        resolved=resolved,
        resolution_time=resolution_time,
        open_time=open_time,
    )


def normalize(rows: Iterable[RawRow], now: date) -> list[Item]:
    """Normalize every raw row; ``now`` anchors the open-age computation."""
    return [map_row(row, now) for row in rows]


def items_to_dataframe(items: Iterable[Item]) -> pd.DataFrame:
    records = []
    for item in items:
        record = asdict(item)
        record["priority"] = item.priority.value
        record["status"] = item.status.value
        records.append(record)
    df = pd.DataFrame(records)
    for col in ("created", "resolved"):
        if col in df.columns:
            df[col] = pd.to_datetime(df[col], errors="coerce")
    return df
