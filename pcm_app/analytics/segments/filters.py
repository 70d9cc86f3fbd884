"""Facet filters: independent conjunctive restrictions on the record frame."""

from __future__ import annotations

import logging

import pandas as pd

from pcm_app.core.mappers import impact_classes
from pcm_app.core.models import FacetSelection

logger = logging.getLogger(__name__)


def _membership(df: pd.DataFrame, column: str, allowed: frozenset[str]) -> pd.Series:
    if not allowed:
        return pd.Series(True, index=df.index, dtype=bool)
    if column not in df.columns:
        return pd.Series(False, index=df.index, dtype=bool)
    return df[column].isin(list(allowed)).astype(bool)


def region_mask(df: pd.DataFrame, regions: frozenset[str]) -> pd.Series:
    return _membership(df, "region", regions)


def domain_mask(df: pd.DataFrame, domains: frozenset[str]) -> pd.Series:
    return _membership(df, "domain", domains)


def severity_mask(df: pd.DataFrame, severities: frozenset[str]) -> pd.Series:
    return _membership(df, "severity", severities)


def impact_mask(df: pd.DataFrame, impacts: frozenset[str]) -> pd.Series:
    if not impacts:
        return pd.Series(True, index=df.index, dtype=bool)
    if "impact" in df.columns:
        classes = impact_classes(df["impact"])
    else:
        # Absent impact text classifies as SA
        classes = impact_classes(pd.Series("", index=df.index, dtype=object))
    return classes.isin(list(impacts)).astype(bool)


def filter_records(df: pd.DataFrame, selection: FacetSelection) -> pd.DataFrame:
    """Rows satisfying every non-empty facet of ``selection``, in original order.

    Parameters
    ----------
    df : pd.DataFrame
        Record frame with ``region``, ``impact``, ``domain`` and ``severity``.
    selection : FacetSelection
        Chosen values per facet; an empty facet does not restrict.

    Returns
    -------
    pd.DataFrame
        Surviving rows with their original index labels. May be empty.
    """
    if df.empty or selection.is_empty:
        return df.copy()
    mask = (
        region_mask(df, selection.regions)
        & domain_mask(df, selection.domains)
        & impact_mask(df, selection.impacts)
        & severity_mask(df, selection.severities)
    )
    out = df[mask.to_numpy()].copy()
    logger.debug("Filtered %s -> %s rows", len(df), len(out))
    return out
