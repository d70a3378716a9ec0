"""Pure builders for the downloadable JSON reports (no Streamlit)."""

from __future__ import annotations

import json
from collections import Counter
from collections.abc import Sequence
from datetime import date, datetime
from typing import Any

import pytz

from tracker_app.analytics.aggregations.projects import all_items
from tracker_app.analytics.metrics.overview import dashboard_totals
from tracker_app.analytics.metrics.rates import completion_rate, rounded_mean
from tracker_app.core.config import (
    LOW_COMPLETION_MIN_ITEMS,
    LOW_COMPLETION_RATE,
    MSG_ALL_NORMAL,
    MSG_LOW_COMPLETION,
    MSG_SLOW_RESOLUTION,
    MSG_WORKLOAD,
    REPORT_EXECUTIVE,
    REPORT_PERFORMANCE,
    REPORT_TIME,
    SLOW_RESOLUTION_DAYS,
    TIMESTAMP_FORMAT,
    TIMEZONE,
    TOP_PROJECTS_LIMIT,
    WORKLOAD_IMBALANCE_FACTOR,
)
from tracker_app.core.models import Project, Status

Report = dict[str, Any]


def format_timestamp(moment: datetime | None = None) -> str:
    """Locale-style (pt-BR) generation timestamp, e.g. ``19/10/2026, 10:00:00``."""
    tz = pytz.timezone(TIMEZONE)
    if moment is None:
        moment = datetime.now(tz)
    elif moment.tzinfo is None:
        moment = tz.localize(moment)
    else:
        moment = moment.astimezone(tz)
    return moment.strftime(TIMESTAMP_FORMAT)


def _resolution_times(projects: Sequence[Project]) -> list[int]:
    return [i.resolution_time for i in all_items(projects) if i.resolution_time is not None]


def performance_report(projects: Sequence[Project], timestamp: str | None = None) -> Report:
    totals = dashboard_totals(projects)
    return {
        "timestamp": timestamp or format_timestamp(),
        "summary": {
            "totalProjects": totals.projects,
            "totalItems": totals.items,
            "completionRate": completion_rate(totals.resolved, totals.items),
        },
        "projects": [
            {
                "name": p.name,
                "total": p.stats.total,
                "resolved": p.stats.resolved,
                "avgResolutionTime": p.stats.avg_resolution_time,
                "completionRate": p.stats.completion_rate,
            }
            for p in projects
        ],
    }


def time_report(projects: Sequence[Project], timestamp: str | None = None) -> Report:
    measured = [i for i in all_items(projects) if i.resolution_time is not None]
    durations = [i.resolution_time for i in measured]
    return {
        "timestamp": timestamp or format_timestamp(),
        "summary": {
            "avgResolutionTime": rounded_mean(durations),
            "fastestResolution": min(durations, default=0),
            "slowestResolution": max(durations, default=0),
        },
        "details": [
            {
                "project": i.project,
                "type": i.type,
                "responsible": i.responsible,
                "resolutionTime": i.resolution_time,
                "priority": i.priority.value,
            }
            for i in measured
        ],
    }


def top_projects(projects: Sequence[Project], limit: int = TOP_PROJECTS_LIMIT) -> list[Project]:
    # sorted() is stable, so equal totals keep aggregation order.
    return sorted(projects, key=lambda p: p.stats.total, reverse=True)[:limit]


def build_recommendations(projects: Sequence[Project]) -> list[str]:
    recommendations: list[str] = []

    low_completion = [
        p
        for p in projects
        if p.stats.total > LOW_COMPLETION_MIN_ITEMS
        and 100 * p.stats.resolved / p.stats.total < LOW_COMPLETION_RATE
    ]
    if low_completion:
        recommendations.append(MSG_LOW_COMPLETION.format(count=len(low_completion)))

    slow = [p for p in projects if p.stats.avg_resolution_time > SLOW_RESOLUTION_DAYS]
    if slow:
        recommendations.append(MSG_SLOW_RESOLUTION.format(count=len(slow), days=SLOW_RESOLUTION_DAYS))

    workload = Counter(i.responsible for i in all_items(projects) if i.status is Status.RESOLVED)
    if workload and max(workload.values()) > WORKLOAD_IMBALANCE_FACTOR * min(workload.values()):
        recommendations.append(MSG_WORKLOAD)

    return recommendations or [MSG_ALL_NORMAL]


def executive_report(projects: Sequence[Project], timestamp: str | None = None) -> Report:
    totals = dashboard_totals(projects)
    return {
        "timestamp": timestamp or format_timestamp(),
        "executiveSummary": {
            "totalProjects": totals.projects,
            "totalItems": totals.items,
            "resolvedItems": totals.resolved,
            "resolutionRate": completion_rate(totals.resolved, totals.items),
            "avgResolutionTime": rounded_mean(_resolution_times(projects)),
        },
        "topProjects": [
            {"name": p.name, "total": p.stats.total, "completionRate": p.stats.completion_rate}
            for p in top_projects(projects)
        ],
        "recommendations": build_recommendations(projects),
    }


REPORT_BUILDERS = {
    REPORT_PERFORMANCE: performance_report,
    REPORT_TIME: time_report,
    REPORT_EXECUTIVE: executive_report,
}


def serialize_report(report: Report) -> str:
    return json.dumps(report, indent=2, ensure_ascii=False)


def report_filename(kind: str, today: date | None = None) -> str:
    """``<kind>-<YYYY-MM-DD>.json``; ``today`` defaults to the local date."""
    if today is None:
        today = datetime.now(pytz.timezone(TIMEZONE)).date()
    return f"{kind}-{today.isoformat()}.json"
