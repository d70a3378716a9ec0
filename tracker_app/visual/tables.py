"""Table builders for project listings."""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from tracker_app.analytics.metrics.overview import project_details
from tracker_app.core.config import DETAIL_PEOPLE_LIMIT
from tracker_app.core.models import Project

PROJECT_COLUMNS = ("Projeto", "Concluído %", "Em Aberto", "Resolvidos", "Dias Médios", "Dias em Aberto")
DETAIL_COLUMNS = ("Projeto", "Concluídos", "Responsáveis", "Relatores", "Tempo Médio", "Prioridade Alta")


def _people_summary(names: list[str], limit: int = DETAIL_PEOPLE_LIMIT) -> str:
    text = ", ".join(names[:limit])
    return text + "..." if len(names) > limit else text


def projects_table(projects: Sequence[Project]) -> pd.DataFrame:
    rows = [
        {
            "Projeto": p.name,
            "Concluído %": p.stats.completion_rate,
            "Em Aberto": p.stats.open,
            "Resolvidos": p.stats.resolved,
            "Dias Médios": p.stats.avg_resolution_time,
            "Dias em Aberto": p.stats.total_open_time,
        }
        for p in projects
    ]
    return pd.DataFrame(rows, columns=list(PROJECT_COLUMNS))


def project_details_table(projects: Sequence[Project]) -> pd.DataFrame:
    rows = []
    for p in projects:
        details = project_details(p)
        rows.append(
            {
                "Projeto": p.name,
                "Concluídos": f"{p.stats.resolved}/{p.stats.total}",
                "Responsáveis": _people_summary(details.responsibles),
                "Relatores": _people_summary(details.reporters),
                "Tempo Médio": f"{p.stats.avg_resolution_time} dias úteis",
                "Prioridade Alta": details.high_priority,
            }
        )
    return pd.DataFrame(rows, columns=list(DETAIL_COLUMNS))
