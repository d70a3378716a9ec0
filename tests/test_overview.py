from datetime import date

from tracker_app.analytics.aggregations.projects import aggregate, build_projects
from tracker_app.analytics.metrics.overview import (
    analytics_summary,
    dashboard_totals,
    monthly_trend,
    project_details,
)
from tracker_app.core.config import NO_RESULT_LABEL
from tracker_app.core.models import Item, Priority, Status
from tracker_app.core.sample_data import sample_rows

NOW = date(2024, 2, 1)


def test_dashboard_totals():
    totals = dashboard_totals(build_projects(sample_rows(), NOW))
    assert (totals.projects, totals.items, totals.open, totals.resolved) == (3, 6, 2, 4)


def test_analytics_summary():
    summary = analytics_summary(build_projects(sample_rows(), NOW))
    assert summary.avg_resolution_time == 8
    assert summary.resolution_rate == 67
    # All projects tie on total; the first one wins.
    assert summary.most_active_project == "Sistema de Vendas"
    assert summary.most_productive_user == "Carlos Oliveira"


def test_analytics_summary_empty():
    summary = analytics_summary([])
    assert summary.avg_resolution_time == 0
    assert summary.resolution_rate == 0
    assert summary.most_active_project == NO_RESULT_LABEL
    assert summary.most_productive_user == NO_RESULT_LABEL


def test_monthly_trend_counts_last_six_months():
    items = [
        Item(project="A", created=date(2024, 1, 5), resolved=date(2024, 2, 2), status=Status.RESOLVED),
        Item(project="A", created=date(2024, 2, 10)),
        Item(project="A", created=date(2023, 6, 1)),  # outside the window
    ]
    trend = monthly_trend(aggregate(items), date(2024, 2, 20))
    assert list(trend["month"]) == ["09/2023", "10/2023", "11/2023", "12/2023", "01/2024", "02/2024"]
    assert list(trend["created"]) == [0, 0, 0, 0, 1, 1]
    assert list(trend["resolved"]) == [0, 0, 0, 0, 0, 1]


def test_monthly_trend_without_data():
    trend = monthly_trend([], date(2024, 2, 20), months=3)
    assert list(trend["created"]) == [0, 0, 0]
    assert list(trend["resolved"]) == [0, 0, 0]


def test_project_details():
    items = [
        Item(project="A", responsible="Ana", reporter="Rui", priority=Priority.HIGH),
        Item(project="A", responsible="Bia", reporter="Rui", priority=Priority.HIGH),
        Item(project="A", responsible="Ana", reporter="Eva", priority=Priority.LOW),
    ]
    (project,) = aggregate(items)
    details = project_details(project)
    assert details.responsibles == ["Ana", "Bia"]
    assert details.reporters == ["Rui", "Eva"]
    assert details.priority_counts == {"high": 2, "low": 1}
    assert details.high_priority == 2
