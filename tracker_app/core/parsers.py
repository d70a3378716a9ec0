"""Turn raw CSV/XML export text into loosely typed row mappings."""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET

from .config import CSV_SEPARATORS, XML_ROW_TAGS
from .errors import FormatError
from .models import RawRow

logger = logging.getLogger(__name__)

_SEPARATOR_RE = re.compile(CSV_SEPARATORS)


def _split_line(line: str) -> list[str]:
    return [value.strip().replace('"', "") for value in _SEPARATOR_RE.split(line)]


def parse_csv(content: str, file_name: str | None = None) -> list[RawRow]:
    """Parse comma/semicolon separated text.

    Quoting is not interpreted: separators inside quotes still split, and quotes
    are simply removed. Rows whose field count differs from the header are
    dropped.
    """
    lines = [line for line in content.split("\n") if line.strip()]
    if len(lines) < 2:
        raise FormatError("Arquivo CSV vazio ou inválido", file_name)

    headers = _split_line(lines[0])
    rows: list[RawRow] = []
    dropped = 0
    for line in lines[1:]:
        values = _split_line(line)
        if len(values) != len(headers):
            dropped += 1
            continue
        rows.append(dict(zip(headers, values, strict=True)))
    if dropped:
        logger.debug("Dropped %s CSV row(s) with mismatched column count in %s", dropped, file_name)
    return rows


def parse_xml(content: str, file_name: str | None = None) -> list[RawRow]:
    """Parse ``<item>`` (or, failing that, ``<row>``) elements into mappings."""
    try:
        root = ET.fromstring(content)
    except ET.ParseError as exc:
        raise FormatError(f"XML inválido: {exc}", file_name) from exc

    elements: list[ET.Element] = []
    for tag in XML_ROW_TAGS:
        elements = list(root.iter(tag))
        if elements:
            break

    rows: list[RawRow] = []
    for element in elements:
        row: RawRow = {}
        for child in element:
            row[child.tag] = "".join(child.itertext())
        rows.append(row)
    return rows


def parse_tabular(file_name: str, content: str) -> list[RawRow]:
    """Dispatch on the file extension; unsupported extensions raise ``FormatError``."""
    content = content.removeprefix("\ufeff")
    lowered = file_name.lower()
    if lowered.endswith(".csv"):
        rows = parse_csv(content, file_name)
    elif lowered.endswith(".xml"):
        rows = parse_xml(content, file_name)
    else:
        raise FormatError("Formato de arquivo não suportado", file_name)
    logger.debug("Parsed %s row(s) from %s", len(rows), file_name)
    return rows
