"""Central configuration, constants, and shared column definitions."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

# =============================================================================
# Dashboard Identity
# =============================================================================
DASHBOARD_TITLE = "PCMs Dashboard"
TIMEZONE = "America/Santiago"

# =============================================================================
# Spreadsheet Columns
# Recognized input headers mapped to the record field they populate.
# =============================================================================
SOURCE_COLUMNS: dict[str, str] = {
    "Region": "region",
    "Impact": "impact",
    "Sub Project": "domain",
    "Fault Level": "severity",
}

# Canonical record field order (DataFrame column order)
RECORD_COLUMNS: Sequence[str] = ("region", "impact", "domain", "severity")

# Accepted upload extensions (first sheet is read for workbooks)
UPLOAD_TYPES: Sequence[str] = ("xlsx", "csv")

# =============================================================================
# Classification Vocabulary
# =============================================================================
# Impact text containing this marker (case-sensitive) is Non Service Affecting
NSA_MARKER = "NSA"

IMPACT_SA = "SA"
IMPACT_NSA = "NSA"
IMPACT_CLASSES: Sequence[str] = (IMPACT_SA, IMPACT_NSA)

# Closed fault level vocabulary, in display order
SEVERITY_LEVELS: Sequence[str] = (
    "Emergency",
    "Critical",
    "Major",
    "Minor",
)

# =============================================================================
# Cards
# (key, title) in display order; keys match AggregateSummary.as_dict()
# =============================================================================
CARD_DEFINITIONS: Sequence[tuple[str, str]] = (
    ("total", "Running Tickets"),
    ("sa", "SA Tickets"),
    ("sa_emergency", "Emergency SA"),
    ("sa_critical", "Critical SA"),
    ("sa_major", "Major SA"),
    ("sa_minor", "Minor SA"),
    ("nsa", "NSA Tickets"),
    ("nsa_emergency", "Emergency NSA"),
    ("nsa_critical", "Critical NSA"),
    ("nsa_major", "Major NSA"),
    ("nsa_minor", "Minor NSA"),
)

# =============================================================================
# Charts
# =============================================================================
IMPACT_COLORS: dict[str, str] = {
    IMPACT_SA: "#10B981",  # emerald-500
    IMPACT_NSA: "#2563EB",  # blue-600
}
REGION_CHART_HEIGHT: int = 400

# =============================================================================
# Engine Tuning
# =============================================================================
# Number of distinct selections whose results a session keeps memoized.
# Dropped whenever a new dataset is loaded.
SELECTION_CACHE_SIZE: int = 32

# =============================================================================
# Table Column Sets
# =============================================================================
REGION_SUMMARY_COLUMNS: Sequence[str] = ("Region", "SA", "NSA", "Total")

RECORD_TABLE_COLUMNS: Sequence[str] = (
    "region",
    "domain",
    "severity",
    "impact",
    "impact_class",
)


@dataclass(slots=True)
class AppSettings:
    max_table_rows: int = 1000
    download_encoding: str = "utf-8"
    large_dataset_warn_rows: int = 50000


SETTINGS = AppSettings()
