"""Facet catalog derived from the full loaded dataset."""

from __future__ import annotations

import pandas as pd

from pcm_app.core.models import FacetCatalog


def distinct_values(df: pd.DataFrame, column: str) -> tuple[str, ...]:
    """Sorted distinct non-blank values of ``column``.

    Whitespace-only values count as blank. Kept values are returned verbatim.
    A bare truthiness test would keep ``"  "`` as a selectable region; here it
    is dropped from the catalog, though its rows still count in summaries.
    """
    if df.empty or column not in df.columns:
        return ()
    values = df[column].dropna().astype(str)
    values = values[values.str.strip() != ""]
    return tuple(sorted(set(values)))


def derive_facets(df: pd.DataFrame) -> FacetCatalog:
    return FacetCatalog(
        regions=distinct_values(df, "region"),
        domains=distinct_values(df, "domain"),
    )
