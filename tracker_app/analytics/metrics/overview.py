"""Dashboard overview metrics derived from aggregated projects."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date

import pandas as pd

from tracker_app.analytics.aggregations.projects import all_items
from tracker_app.analytics.metrics.rates import completion_rate, rounded_mean
from tracker_app.core.config import NO_RESULT_LABEL, TREND_LABEL_FORMAT, TREND_MONTHS
from tracker_app.core.mappers import items_to_dataframe
from tracker_app.core.models import Priority, Project, Status


@dataclass(slots=True)
class DashboardTotals:
    projects: int = 0
    items: int = 0
    open: int = 0
    resolved: int = 0


@dataclass(slots=True)
class AnalyticsSummary:
    avg_resolution_time: int = 0
    resolution_rate: int = 0
    most_active_project: str = NO_RESULT_LABEL
    most_productive_user: str = NO_RESULT_LABEL


@dataclass(slots=True)
class ProjectDetails:
    name: str
    responsibles: list[str] = field(default_factory=list)
    reporters: list[str] = field(default_factory=list)
    priority_counts: dict[str, int] = field(default_factory=dict)

    @property
    def high_priority(self) -> int:
        return self.priority_counts.get(Priority.HIGH.value, 0)


def dashboard_totals(projects: Sequence[Project]) -> DashboardTotals:
    return DashboardTotals(
        projects=len(projects),
        items=sum(p.stats.total for p in projects),
        open=sum(p.stats.open for p in projects),
        resolved=sum(p.stats.resolved for p in projects),
    )


def resolved_counts_by_responsible(projects: Sequence[Project]) -> Counter[str]:
    """Resolved item count per responsible person, in first-seen order."""
    counts: Counter[str] = Counter()
    for item in all_items(projects):
        if item.status is Status.RESOLVED:
            counts[item.responsible] += 1
    return counts


def most_active_project(projects: Sequence[Project]) -> str:
    best: Project | None = None
    for project in projects:
        if project.stats.total > (best.stats.total if best else 0):
            best = project
    return best.name if best else NO_RESULT_LABEL


def most_productive_user(projects: Sequence[Project]) -> str:
    counts = resolved_counts_by_responsible(projects)
    if not counts:
        return NO_RESULT_LABEL
    # max() keeps the first maximal key; Counter preserves insertion order.
    return max(counts, key=counts.__getitem__)


def analytics_summary(projects: Sequence[Project]) -> AnalyticsSummary:
    items = all_items(projects)
    durations = [i.resolution_time for i in items if i.resolution_time is not None]
    return AnalyticsSummary(
        avg_resolution_time=rounded_mean(durations),
        resolution_rate=completion_rate(len(durations), len(items)),
        most_active_project=most_active_project(projects),
        most_productive_user=most_productive_user(projects),
    )


def monthly_trend(projects: Sequence[Project], today: date, months: int = TREND_MONTHS) -> pd.DataFrame:
    """Items created and resolved per calendar month, oldest month first.

    Covers the ``months`` months ending with the month of ``today``.
    """
    current = pd.Period(pd.Timestamp(today), freq="M")
    periods = [current - offset for offset in range(months - 1, -1, -1)]
    trend = pd.DataFrame({"month": [p.to_timestamp().strftime(TREND_LABEL_FORMAT) for p in periods]})
    df = items_to_dataframe(all_items(projects))
    for col in ("created", "resolved"):
        if df.empty or col not in df.columns:
            trend[col] = 0
            continue
        counts = df[col].dropna().dt.strftime(TREND_LABEL_FORMAT).value_counts()
        trend[col] = trend["month"].map(counts).fillna(0).astype(int)
    return trend


def project_details(project: Project) -> ProjectDetails:
    responsibles = list(dict.fromkeys(i.responsible for i in project.items))
    reporters = list(dict.fromkeys(i.reporter for i in project.items))
    priority_counts = dict(Counter(i.priority.value for i in project.items))
    return ProjectDetails(
        name=project.name,
        responsibles=responsibles,
        reporters=reporters,
        priority_counts=priority_counts,
    )
