from datetime import date

from tracker_app.analytics.aggregations.projects import build_projects
from tracker_app.analytics.metrics.overview import monthly_trend
from tracker_app.core.sample_data import sample_rows
from tracker_app.pages.upload import format_file_size
from tracker_app.visual.charts import resolution_time_chart, status_chart, trend_chart, truncate_name
from tracker_app.visual.tables import project_details_table, projects_table

NOW = date(2024, 2, 1)


def _sample_projects():
    return build_projects(sample_rows(), NOW)


def test_charts_build():
    projects = _sample_projects()
    assert status_chart(projects) is not None
    assert resolution_time_chart(projects) is not None
    assert trend_chart(monthly_trend(projects, NOW)) is not None


def test_charts_empty():
    assert status_chart([]) is None
    assert resolution_time_chart([]) is None


def test_truncate_name():
    assert truncate_name("Portal do Cliente") == "Portal do Clien..."
    assert truncate_name("App Mobile") == "App Mobile"


def test_project_tables():
    projects = _sample_projects()
    summary = projects_table(projects)
    assert list(summary["Projeto"]) == ["Sistema de Vendas", "Portal do Cliente", "App Mobile"]
    assert list(summary["Concluído %"]) == [50, 50, 100]
    details = project_details_table(projects)
    assert details.loc[0, "Concluídos"] == "1/2"
    assert details.loc[0, "Prioridade Alta"] == 1
    assert projects_table([]).empty


def test_format_file_size():
    assert format_file_size(0) == "0 Bytes"
    assert format_file_size(512) == "512 Bytes"
    assert format_file_size(1536) == "1.5 KB"
    assert format_file_size(5 * 1024 * 1024) == "5 MB"
