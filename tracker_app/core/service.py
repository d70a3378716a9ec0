"""DashboardService: owns the working dataset and orchestrates the pipeline."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path

import pytz

from tracker_app.analytics.aggregations.projects import build_projects
from tracker_app.analytics.segments.filters import filter_projects, search_projects

from .config import ACCEPTED_EXTENSIONS, ACCEPTED_MIME_TYPES, SETTINGS, TIMEZONE
from .errors import FormatError, ProcessingInProgressError, ReadError, TrackerError
from .models import FilterCriteria, Project, RawRow, SourceFile
from .parsers import parse_tabular
from .sample_data import sample_rows

logger = logging.getLogger(__name__)


def local_today(now: datetime | None = None) -> date:
    """Current calendar date in the configured time zone."""
    tz = pytz.timezone(TIMEZONE)
    if now is None:
        return datetime.now(tz).date()
    if now.tzinfo is None:
        return now.date()
    return now.astimezone(tz).date()


def is_supported_file(name: str, mime_type: str | None = None) -> bool:
    if mime_type and mime_type in ACCEPTED_MIME_TYPES:
        return True
    return name.lower().endswith(tuple(ACCEPTED_EXTENSIONS))


def read_sources(paths: Iterable[str | Path], encoding: str | None = None) -> list[SourceFile]:
    """Read every path as text; a single failure aborts the whole batch."""
    encoding = encoding or SETTINGS.file_encoding
    sources: list[SourceFile] = []
    for raw_path in paths:
        path = Path(raw_path)
        try:
            content = path.read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadError(f"Erro ao ler arquivo: {exc}", path.name) from exc
        sources.append(SourceFile(name=path.name, content=content))
    return sources


@dataclass(slots=True)
class ProcessingResult:
    files: int
    records: int
    projects: int


@dataclass
class DashboardState:
    projects: list[Project] = field(default_factory=list)
    filtered: list[Project] = field(default_factory=list)
    criteria: FilterCriteria = field(default_factory=FilterCriteria)


class DashboardService:
    def __init__(self):
        self._state = DashboardState()
        self._lock = threading.Lock()

    @property
    def projects(self) -> list[Project]:
        return self._state.projects

    @property
    def filtered(self) -> list[Project]:
        return self._state.filtered

    @property
    def criteria(self) -> FilterCriteria:
        return self._state.criteria

    # ------------------ Dataset replacement ------------------
    def process_files(self, sources: Sequence[SourceFile], now: date | None = None) -> ProcessingResult:
        """Parse, normalize and aggregate ``sources`` as one batch.

        Every file is parsed before the working dataset is touched, so a
        ``FormatError`` in any of them leaves the previous dataset in place.
        """
        if not sources:
            raise TrackerError("Nenhum arquivo selecionado")
        with self._exclusive():
            rows: list[RawRow] = []
            for source in sources:
                try:
                    if not is_supported_file(source.name, source.mime_type):
                        raise FormatError("Formato de arquivo não suportado", source.name)
                    rows.extend(parse_tabular(source.name, source.content))
                except FormatError:
                    logger.warning("Aborting batch of %s file(s): %s is not valid", len(sources), source.name)
                    raise
            projects = self._replace(rows, now=now)
            result = ProcessingResult(files=len(sources), records=len(rows), projects=len(projects))
            logger.info(
                "Processed %s record(s) from %s file(s) into %s project(s)",
                result.records,
                result.files,
                result.projects,
            )
            return result

    def process_paths(self, paths: Iterable[str | Path], now: date | None = None) -> ProcessingResult:
        return self.process_files(read_sources(paths), now=now)

    def load_sample(self, now: date | None = None) -> list[Project]:
        with self._exclusive():
            return self._replace(sample_rows(), now=now)

    @contextmanager
    def _exclusive(self):
        if not self._lock.acquire(blocking=False):
            raise ProcessingInProgressError("Processamento já em andamento")
        try:
            yield
        finally:
            self._lock.release()

    def _replace(self, rows: Iterable[RawRow], now: date | None = None) -> list[Project]:
        """Rebuild the dataset from ``rows`` and reset the filtered view."""
        projects = build_projects(rows, now or local_today())
        self._state = DashboardState(projects=projects, filtered=list(projects))
        return projects

    # ------------------ Filtering ------------------
    def apply_filter(self, criteria: FilterCriteria) -> list[Project]:
        self._state.criteria = criteria
        self._state.filtered = filter_projects(self._state.projects, criteria)
        return self._state.filtered

    def search(self, search_term: str) -> list[Project]:
        """Plain text search; discards any status/priority criteria."""
        self._state.criteria = FilterCriteria(search_term=search_term)
        self._state.filtered = search_projects(self._state.projects, search_term)
        return self._state.filtered
