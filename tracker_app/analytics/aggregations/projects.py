"""Project-level aggregations over normalized items."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date

from tracker_app.analytics.metrics.rates import rounded_mean
from tracker_app.core.mappers import normalize
from tracker_app.core.models import Item, Project, ProjectStats, RawRow, Status


def compute_stats(items: Sequence[Item]) -> ProjectStats:
    return ProjectStats(
        total=len(items),
        open=sum(1 for i in items if i.status is Status.OPEN),
        resolved=sum(1 for i in items if i.status is Status.RESOLVED),
        avg_resolution_time=rounded_mean(i.resolution_time for i in items if i.resolution_time is not None),
        total_open_time=rounded_mean(i.open_time for i in items if i.open_time is not None),
    )


def aggregate(items: Iterable[Item]) -> list[Project]:
    """Group items by project name, keeping first-seen project order."""
    groups: dict[str, list[Item]] = {}
    for item in items:
        groups.setdefault(item.project, []).append(item)
    return [Project(name=name, items=tuple(group), stats=compute_stats(group)) for name, group in groups.items()]


def build_projects(rows: Iterable[RawRow], now: date) -> list[Project]:
    return aggregate(normalize(rows, now))


def all_items(projects: Iterable[Project]) -> list[Item]:
    return [item for project in projects for item in project.items]
