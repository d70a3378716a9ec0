"""Load and expose source field aliases from YAML (with fallbacks)."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from .config import FIELD_ALIASES

logger = logging.getLogger(__name__)

_CACHE: dict[str, tuple[str, ...]] | None = None


def _read_aliases(yaml_path: Path) -> dict[str, tuple[str, ...]]:
    aliases = {name: tuple(keys) for name, keys in FIELD_ALIASES.items()}
    if not yaml_path.exists():
        return aliases
    try:
        data = yaml.safe_load(yaml_path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Ignoring unreadable field config %s: %s", yaml_path, exc)
        return aliases
    overrides = data.get("fields") if isinstance(data, dict) else None
    for name, keys in (overrides or {}).items():
        if name not in aliases:
            logger.debug("Unknown field %r in %s", name, yaml_path)
            continue
        if isinstance(keys, list) and keys:
            aliases[name] = tuple(str(k) for k in keys)
    return aliases


def load_field_aliases(base_path: str | Path | None = None) -> dict[str, tuple[str, ...]]:
    """Return the ordered candidate source keys for every canonical field.

    ``fields.yaml`` may override the candidate list of any field; fields it
    does not mention keep the built-in table from ``config.FIELD_ALIASES``.
    Only the packaged file is cached; an explicit ``base_path`` is always read.
    """
    global _CACHE
    if base_path is not None:
        return _read_aliases(Path(base_path) / "fields.yaml")
    if _CACHE is None:
        _CACHE = _read_aliases(Path(__file__).resolve().parent.parent / "fields.yaml")
    return _CACHE


def get_aliases(field_name: str) -> tuple[str, ...]:
    return load_field_aliases().get(field_name, ())
