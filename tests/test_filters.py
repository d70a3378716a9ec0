from tracker_app.analytics.aggregations.projects import aggregate
from tracker_app.analytics.segments.filters import (
    filter_projects,
    parse_priority_filter,
    parse_status_filter,
    search_projects,
)
from tracker_app.core.models import FilterCriteria, Item, Priority, Project, Status


def _sample_projects():
    items = [
        Item(project="Sistema de Vendas", status=Status.RESOLVED, priority=Priority.HIGH),
        Item(project="Sistema de Vendas", status=Status.OPEN, priority=Priority.MEDIUM),
        Item(project="Portal do Cliente", status=Status.RESOLVED, priority=Priority.LOW),
        Item(project="App Mobile", status=Status.OPEN, priority=Priority.HIGH),
    ]
    return aggregate(items)


def _names(projects):
    return [p.name for p in projects]


def test_search_is_case_insensitive_substring():
    projects = _sample_projects()
    assert _names(filter_projects(projects, FilterCriteria(search_term="SISTEMA"))) == ["Sistema de Vendas"]
    assert _names(filter_projects(projects, FilterCriteria())) == _names(projects)


def test_status_filters():
    projects = _sample_projects()
    open_only = filter_projects(projects, FilterCriteria(status=Status.OPEN))
    assert _names(open_only) == ["Sistema de Vendas", "App Mobile"]
    resolved = filter_projects(projects, FilterCriteria(status=Status.RESOLVED))
    assert _names(resolved) == ["Portal do Cliente"]


def test_fully_resolved_includes_empty_project():
    empty = Project(name="Vazio")
    assert empty.stats.total == 0
    assert filter_projects([empty], FilterCriteria(status=Status.RESOLVED)) == [empty]
    assert filter_projects([empty], FilterCriteria(status=Status.OPEN)) == []


def test_priority_filter_matches_any_item():
    projects = _sample_projects()
    high = filter_projects(projects, FilterCriteria(priority=Priority.HIGH))
    assert _names(high) == ["Sistema de Vendas", "App Mobile"]


def test_predicates_are_anded():
    projects = _sample_projects()
    criteria = FilterCriteria(search_term="a", status=Status.OPEN, priority=Priority.HIGH)
    assert _names(filter_projects(projects, criteria)) == ["Sistema de Vendas", "App Mobile"]
    criteria = FilterCriteria(search_term="portal", status=Status.OPEN)
    assert filter_projects(projects, criteria) == []


def test_search_projects_ignores_other_criteria():
    projects = _sample_projects()
    assert _names(search_projects(projects, "E")) == ["Sistema de Vendas", "Portal do Cliente", "App Mobile"]


def test_parse_filter_values():
    assert parse_status_filter("") is None
    assert parse_status_filter("aberto") is Status.OPEN
    assert parse_status_filter("Resolved") is Status.RESOLVED
    assert parse_status_filter("bogus") is None
    assert parse_priority_filter("alta") is Priority.HIGH
    assert parse_priority_filter("média") is Priority.MEDIUM
    assert parse_priority_filter(None) is None
