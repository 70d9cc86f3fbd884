"""Central column metadata and helpers for table rendering."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import streamlit as st

# Mapping of raw column keys to (label, help text, format key)
# format key: "int" -> integer, None -> default text column
COLUMN_METADATA: dict[str, tuple[str, str, str | None]] = {
    # Region summary table
    "Region": ("Region", "Facility / region label from the uploaded sheet.", None),
    "SA": ("SA", "Service affecting tickets (impact text without 'NSA').", "int"),
    "NSA": ("NSA", "Non service affecting tickets (impact text containing 'NSA').", "int"),
    "Total": ("Total", "SA + NSA tickets for the region.", "int"),
    # Record fields
    "region": ("Region", "Facility / region label from the uploaded sheet.", None),
    "domain": ("Domain", "Sub project the ticket belongs to.", None),
    "severity": ("Fault Level", "Emergency, Critical, Major or Minor.", None),
    "impact": ("Impact", "Impact description as written in the sheet.", None),
    "impact_class": ("Impact Class", "SA or NSA, derived from the impact description.", None),
}


def apply_column_metadata(columns: Iterable[str], base_config: dict[str, Any] | None = None) -> dict[str, Any]:
    """Return a Streamlit column_config dict with labels/help for known columns."""
    config: dict[str, Any] = dict(base_config or {})
    for column in columns:
        if column in config:
            continue
        meta = COLUMN_METADATA.get(column)
        if meta is None:
            continue
        label, help_text, fmt = meta
        if fmt == "int":
            config[column] = st.column_config.NumberColumn(label, help=help_text, format="%d")
        else:
            config[column] = st.column_config.TextColumn(label, help=help_text)
    return config
