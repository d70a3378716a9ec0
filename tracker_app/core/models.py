"""Domain data models for tracked items, projects, and filter criteria."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from tracker_app.analytics.metrics.rates import completion_rate

from .config import DEFAULT_ITEM_TYPE, UNKNOWN_PROJECT, UNSPECIFIED_PERSON

RawRow = dict[str, str]


class Status(str, Enum):
    OPEN = "open"
    RESOLVED = "resolved"


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True, slots=True)
class SourceFile:
    name: str
    content: str
    mime_type: str | None = None


@dataclass(frozen=True, slots=True)
class Item:
    project: str = UNKNOWN_PROJECT
    type: str = DEFAULT_ITEM_TYPE
    responsible: str = UNSPECIFIED_PERSON
    reporter: str = UNSPECIFIED_PERSON
    priority: Priority = Priority.MEDIUM
    status: Status = Status.OPEN
    created: date | None = None
    resolved: date | None = None

    # Derived durations in business days (populated by the normalizer)
    resolution_time: int | None = None
    open_time: int | None = None


@dataclass(frozen=True, slots=True)
class ProjectStats:
    total: int = 0
    open: int = 0
    resolved: int = 0
    avg_resolution_time: int = 0
    # Legacy name: holds the average open age of currently open items, not a sum.
    total_open_time: int = 0

    @property
    def completion_rate(self) -> int:
        return completion_rate(self.resolved, self.total)


@dataclass(frozen=True, slots=True)
class Project:
    name: str
    items: tuple[Item, ...] = ()
    stats: ProjectStats = field(default_factory=ProjectStats)


@dataclass(frozen=True, slots=True)
class FilterCriteria:
    search_term: str = ""
    status: Status | None = None
    priority: Priority | None = None

    @property
    def is_text_only(self) -> bool:
        return self.status is None and self.priority is None
