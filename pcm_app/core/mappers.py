"""Mapping raw spreadsheet rows into FaultRecord instances and DataFrames."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import asdict
from typing import Any

import numpy as np
import pandas as pd

from .config import IMPACT_NSA, IMPACT_SA, NSA_MARKER, RECORD_COLUMNS, SOURCE_COLUMNS
from .models import FaultRecord


def _normalize_cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        # Non-scalar cell (list/dict); fall through to str()
        pass
    if isinstance(value, float | np.floating) and float(value).is_integer():
        return str(int(value))
    return str(value)


def classify_impact(impact: str | None) -> str:
    """Return the impact class for a raw impact description.

    Text containing ``"NSA"`` anywhere (case-sensitive) is NSA; everything
    else, including empty text, is SA.

    Examples
    --------
    >>> classify_impact("NSA-Fault")
    'NSA'
    >>> classify_impact("SA-Fault")
    'SA'
    >>> classify_impact(None)
    'SA'
    """
    if impact and NSA_MARKER in impact:
        return IMPACT_NSA
    return IMPACT_SA


def nsa_mask(impacts: pd.Series) -> pd.Series:
    """Boolean Series, True where the impact text classifies as NSA."""
    if impacts.empty:
        return pd.Series(False, index=impacts.index, dtype=bool)
    text = impacts.fillna("").astype(str)
    return text.str.contains(NSA_MARKER, regex=False).astype(bool)


def impact_classes(impacts: pd.Series) -> pd.Series:
    """Vectorized ``classify_impact`` preserving the input index."""
    mask = nsa_mask(impacts)
    return pd.Series(np.where(mask, IMPACT_NSA, IMPACT_SA), index=impacts.index, dtype=object)


def map_row(row: Mapping[str, Any]) -> FaultRecord:
    values = {field: _normalize_cell(row.get(column)) for column, field in SOURCE_COLUMNS.items()}
    return FaultRecord(**values)


def rows_to_records(rows: Iterable[Mapping[str, Any]]) -> list[FaultRecord]:
    return [map_row(row) for row in rows]


def records_to_dataframe(records: Iterable[FaultRecord]) -> pd.DataFrame:
    data = [asdict(r) for r in records]
    df = pd.DataFrame(data, columns=list(RECORD_COLUMNS))
    if df.empty:
        return pd.DataFrame({col: pd.Series(dtype=object) for col in RECORD_COLUMNS})
    return df.reset_index(drop=True)


def rows_to_dataframe(rows: Iterable[Mapping[str, Any]]) -> pd.DataFrame:
    return records_to_dataframe(rows_to_records(rows))


def dataframe_to_records(df: pd.DataFrame) -> list[FaultRecord]:
    if df.empty:
        return []
    cols = [c for c in RECORD_COLUMNS if c in df.columns]
    out: list[FaultRecord] = []
    for row in df[cols].to_dict(orient="records"):
        out.append(FaultRecord(**{k: _normalize_cell(v) for k, v in row.items()}))
    return out
