"""Central configuration, vocabulary tables, and shared defaults."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

# =============================================================================
# Locale / Time Settings
# =============================================================================
TIMEZONE = "America/Sao_Paulo"
TIMESTAMP_FORMAT = "%d/%m/%Y, %H:%M:%S"
TREND_LABEL_FORMAT = "%m/%Y"

# =============================================================================
# Default values for missing fields
# =============================================================================
UNKNOWN_PROJECT = "Projeto Desconhecido"
DEFAULT_ITEM_TYPE = "Tarefa"
UNSPECIFIED_PERSON = "Não informado"
NO_RESULT_LABEL = "Nenhum"

# =============================================================================
# Source field names
# Ordered candidate keys per canonical field (Portuguese first). Lookup is
# case-sensitive; the first candidate carrying a non-empty value wins.
# =============================================================================
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "project": ("Nome do projeto", "projeto", "project"),
    "status": ("Status", "status"),
    "priority": ("Prioridade", "prioridade", "priority"),
    "created": ("Criado", "criado", "created"),
    "resolved": ("Resolvido", "resolvido", "resolved"),
    "responsible": ("Responsavel", "responsavel", "responsible"),
    "reporter": ("Relator", "relator", "reporter"),
    "type": ("Tipo de item", "tipo", "type"),
}

# =============================================================================
# Status / Priority vocabulary (lowercase, substring match)
# =============================================================================
RESOLVED_STATUS_KEYWORDS: Sequence[str] = ("resolvido", "fechado", "concluido", "done")
HIGH_PRIORITY_KEYWORDS: Sequence[str] = ("alta", "high", "critica")
LOW_PRIORITY_KEYWORDS: Sequence[str] = ("baixa", "low")

# UI filter values -> canonical enum values
STATUS_FILTER_ALIASES: dict[str, str] = {
    "open": "open",
    "aberto": "open",
    "resolved": "resolved",
    "resolvido": "resolved",
}
PRIORITY_FILTER_ALIASES: dict[str, str] = {
    "low": "low",
    "baixa": "low",
    "medium": "medium",
    "media": "medium",
    "média": "medium",
    "high": "high",
    "alta": "high",
}

# =============================================================================
# Input files
# =============================================================================
ACCEPTED_EXTENSIONS: Sequence[str] = (".csv", ".xml")
ACCEPTED_MIME_TYPES: frozenset[str] = frozenset({"text/csv", "application/xml", "text/xml"})
CSV_SEPARATORS = r"[,;]"
XML_ROW_TAGS: Sequence[str] = ("item", "row")

# =============================================================================
# Reports
# =============================================================================
REPORT_PERFORMANCE = "relatorio-performance"
REPORT_TIME = "relatorio-tempo"
REPORT_EXECUTIVE = "relatorio-executivo"
REPORT_KINDS: Sequence[str] = (REPORT_PERFORMANCE, REPORT_TIME, REPORT_EXECUTIVE)

TOP_PROJECTS_LIMIT: int = 5
LOW_COMPLETION_RATE: int = 50  # percent
LOW_COMPLETION_MIN_ITEMS: int = 5
SLOW_RESOLUTION_DAYS: int = 30
WORKLOAD_IMBALANCE_FACTOR: int = 3

MSG_LOW_COMPLETION = "{count} projeto(s) com baixa taxa de conclusão precisam de atenção"
MSG_SLOW_RESOLUTION = "{count} projeto(s) com tempo de resolução acima de {days} dias"
MSG_WORKLOAD = "Considere redistribuir a carga de trabalho entre os responsáveis"
MSG_ALL_NORMAL = "Todos os indicadores estão dentro dos parâmetros normais"

# =============================================================================
# Dashboard defaults
# =============================================================================
TREND_MONTHS: int = 6
NAME_TRUNCATE_LENGTH: int = 15
DETAIL_PEOPLE_LIMIT: int = 3


@dataclass(slots=True)
class AppSettings:
    max_table_rows: int = 1000
    download_encoding: str = "utf-8"
    file_encoding: str = "utf-8-sig"


SETTINGS = AppSettings()
