"""Load and expose table column sets from YAML (with fallbacks)."""

from __future__ import annotations

from pathlib import Path

import yaml

from .config import RECORD_TABLE_COLUMNS, REGION_SUMMARY_COLUMNS

_CACHE: dict[str, list[str]] | None = None


def _defaults() -> dict[str, list[str]]:
    return {
        "region_summary": list(REGION_SUMMARY_COLUMNS),
        "records": list(RECORD_TABLE_COLUMNS),
    }


def _read_sets(base: Path) -> dict[str, list[str]]:
    yaml_path = base / "columns.yaml"
    if not yaml_path.exists():
        return _defaults()
    try:
        data = yaml.safe_load(yaml_path.read_text()) or {}
    except yaml.YAMLError:
        return _defaults()
    sets = data.get("sets", {}) if isinstance(data, dict) else {}
    if not isinstance(sets, dict):
        sets = {}
    defaults = _defaults()
    return {
        "region_summary": list(sets.get("region_summary") or defaults["region_summary"]),
        "records": list(sets.get("records") or defaults["records"]),
    }


def load_column_sets(base_path: str | Path | None = None, *, refresh: bool = False):
    """Column sets from ``columns.yaml``.

    Only the package-level file is cached; an explicit ``base_path`` is read
    fresh and leaves the cache untouched.
    """
    global _CACHE
    if base_path is not None:
        return _read_sets(Path(base_path))
    if _CACHE is None or refresh:
        _CACHE = _read_sets(Path(__file__).resolve().parent.parent)
    return _CACHE


def get_columns(set_name: str) -> list[str]:
    sets = load_column_sets()
    return sets.get(set_name, [])
