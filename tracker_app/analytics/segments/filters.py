"""Project filters for the dashboard project lists."""

from __future__ import annotations

from collections.abc import Iterable

from tracker_app.core.config import PRIORITY_FILTER_ALIASES, STATUS_FILTER_ALIASES
from tracker_app.core.models import FilterCriteria, Priority, Project, Status


def parse_status_filter(value: str | None) -> Status | None:
    """Map a UI status choice ("", "aberto", "resolved", ...) to ``Status``."""
    if not value:
        return None
    key = STATUS_FILTER_ALIASES.get(str(value).strip().lower())
    return Status(key) if key else None


def parse_priority_filter(value: str | None) -> Priority | None:
    if not value:
        return None
    key = PRIORITY_FILTER_ALIASES.get(str(value).strip().lower())
    return Priority(key) if key else None


def matches_search(project: Project, search_term: str) -> bool:
    if not search_term:
        return True
    return search_term.lower() in project.name.lower()


def matches_status(project: Project, status: Status | None) -> bool:
    if status is None:
        return True
    if status is Status.OPEN:
        return project.stats.open > 0
    # Fully resolved, including the vacuous case of an empty project.
    return project.stats.resolved == project.stats.total


def matches_priority(project: Project, priority: Priority | None) -> bool:
    if priority is None:
        return True
    return any(item.priority is priority for item in project.items)


def filter_projects(projects: Iterable[Project], criteria: FilterCriteria) -> list[Project]:
    return [
        p
        for p in projects
        if matches_search(p, criteria.search_term)
        and matches_status(p, criteria.status)
        and matches_priority(p, criteria.priority)
    ]


def search_projects(projects: Iterable[Project], search_term: str) -> list[Project]:
    """Text-only search; any status/priority criteria must be reapplied afterwards."""
    return [p for p in projects if matches_search(p, search_term)]
