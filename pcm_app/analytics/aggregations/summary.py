"""Summary counts: overall, per impact class, per impact class x severity."""

from __future__ import annotations

import pandas as pd

from pcm_app.core.config import IMPACT_CLASSES, IMPACT_NSA, IMPACT_SA, SEVERITY_LEVELS
from pcm_app.core.mappers import impact_classes
from pcm_app.core.models import AggregateSummary


def _classes(df: pd.DataFrame) -> pd.Series:
    if "impact" in df.columns:
        return impact_classes(df["impact"])
    return impact_classes(pd.Series("", index=df.index, dtype=object))


def impact_severity_counts(df: pd.DataFrame) -> pd.DataFrame:
    """Impact class x severity count grid (rows: SA, NSA; columns: vocabulary).

    Severities outside the closed vocabulary are dropped from the grid.
    """
    grid = pd.DataFrame(0, index=list(IMPACT_CLASSES), columns=list(SEVERITY_LEVELS), dtype=int)
    if df.empty or "severity" not in df.columns:
        return grid
    work = pd.DataFrame({"impact_class": _classes(df), "severity": df["severity"]})
    work = work[work["severity"].isin(SEVERITY_LEVELS)]
    if work.empty:
        return grid
    counts = work.groupby(["impact_class", "severity"]).size().unstack(fill_value=0)
    counts = counts.reindex(index=list(IMPACT_CLASSES), columns=list(SEVERITY_LEVELS), fill_value=0)
    return counts.astype(int)


def summarize(df: pd.DataFrame) -> AggregateSummary:
    if df.empty:
        return AggregateSummary()
    classes = _classes(df)
    nsa = int((classes == IMPACT_NSA).sum())
    grid = impact_severity_counts(df)
    cells: dict[str, int] = {}
    for impact in IMPACT_CLASSES:
        for severity in SEVERITY_LEVELS:
            cells[f"{impact.lower()}_{severity.lower()}"] = int(grid.loc[impact, severity])
    return AggregateSummary(
        total=int(len(df)),
        sa=int((classes == IMPACT_SA).sum()),
        nsa=nsa,
        **cells,
    )
