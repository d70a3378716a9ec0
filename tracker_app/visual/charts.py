"""Chart builders (Altair) for the dashboard overview."""

from __future__ import annotations

from collections.abc import Sequence

import altair as alt
import pandas as pd

from tracker_app.analytics.metrics.overview import dashboard_totals
from tracker_app.core.config import NAME_TRUNCATE_LENGTH
from tracker_app.core.models import Project

OPEN_COLOR = "#fbbf24"
RESOLVED_COLOR = "#10b981"
ACCENT_COLOR = "#667eea"


def truncate_name(name: str, limit: int = NAME_TRUNCATE_LENGTH) -> str:
    return name if len(name) <= limit else name[:limit] + "..."


def status_chart(projects: Sequence[Project]):
    totals = dashboard_totals(projects)
    if totals.items == 0:
        return None
    data = pd.DataFrame(
        {
            "status": ["Em Aberto", "Resolvidos"],
            "count": [totals.open, totals.resolved],
        }
    )
    return (
        alt.Chart(data)
        .mark_arc(innerRadius=60)
        .encode(
            theta=alt.Theta("count:Q"),
            color=alt.Color(
                "status:N",
                scale=alt.Scale(domain=["Em Aberto", "Resolvidos"], range=[OPEN_COLOR, RESOLVED_COLOR]),
                legend=alt.Legend(orient="bottom", title=None),
            ),
            tooltip=[alt.Tooltip("status:N", title="Status"), alt.Tooltip("count:Q", title="Itens")],
        )
        .properties(height=280)
    )


def resolution_time_chart(projects: Sequence[Project]):
    if not projects:
        return None
    data = pd.DataFrame(
        {
            "project": [truncate_name(p.name) for p in projects],
            "days": [p.stats.avg_resolution_time for p in projects],
        }
    )
    return (
        alt.Chart(data)
        .mark_bar(color=ACCENT_COLOR, cornerRadiusTopLeft=4, cornerRadiusTopRight=4)
        .encode(
            x=alt.X("project:N", sort=None, title=None),
            y=alt.Y("days:Q", title="Dias"),
            tooltip=[
                alt.Tooltip("project:N", title="Projeto"),
                alt.Tooltip("days:Q", title="Dias para Resolução"),
            ],
        )
        .properties(height=280)
    )


def trend_chart(trend: pd.DataFrame):
    if trend is None or trend.empty:
        return None
    long_df = trend.melt(
        id_vars="month",
        value_vars=["resolved", "created"],
        var_name="series",
        value_name="count",
    )
    long_df["series"] = long_df["series"].map({"resolved": "Itens Resolvidos", "created": "Itens Criados"})
    return (
        alt.Chart(long_df)
        .mark_line(point=True, interpolate="monotone")
        .encode(
            x=alt.X("month:N", sort=list(trend["month"]), title=None),
            y=alt.Y("count:Q", title=None),
            color=alt.Color(
                "series:N",
                scale=alt.Scale(domain=["Itens Resolvidos", "Itens Criados"], range=[RESOLVED_COLOR, ACCENT_COLOR]),
                legend=alt.Legend(orient="top", title=None),
            ),
            tooltip=["month:N", "series:N", "count:Q"],
        )
        .properties(height=280)
    )
