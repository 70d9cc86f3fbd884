"""Reusable table helpers for Streamlit rendering."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from pcm_app.core.column_config import get_columns
from pcm_app.core.config import SETTINGS
from pcm_app.core.mappers import impact_classes
from pcm_app.visual.column_metadata import apply_column_metadata


def _display_columns(table: pd.DataFrame, set_name: str) -> list[str]:
    canonical = get_columns(set_name) or []
    display_cols = [col for col in canonical if col in table.columns]
    if not display_cols:
        display_cols = list(table.columns)
    return display_cols


def prepare_region_table(table: pd.DataFrame) -> tuple[pd.DataFrame, list[str], dict[str, object]]:
    if table.empty:
        return table, [], {}
    display_cols = _display_columns(table, "region_summary")
    return table, display_cols, apply_column_metadata(display_cols)


def prepare_record_table(df: pd.DataFrame) -> tuple[pd.DataFrame, list[str], dict[str, object]]:
    """Filtered records with their derived impact class for display only."""
    if df.empty:
        return df, [], {}
    out = df.copy()
    if "impact" in out.columns:
        out["impact_class"] = impact_classes(out["impact"])
    display_cols = _display_columns(out, "records")
    return out, display_cols, apply_column_metadata(display_cols)


def table_csv(table: pd.DataFrame, columns: list[str] | None = None) -> bytes:
    cols = columns or list(table.columns)
    return table[cols].to_csv(index=False).encode(SETTINGS.download_encoding)


def render_table(table: pd.DataFrame, display_cols: list[str], cfg: dict[str, object], limit: int | None = None):
    limit = limit or SETTINGS.max_table_rows
    st.dataframe(table[display_cols].head(limit), hide_index=True, column_config=cfg, width="stretch")
