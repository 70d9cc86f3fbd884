"""Region-based aggregations."""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from pcm_app.core.config import IMPACT_CLASSES, IMPACT_NSA, IMPACT_SA, REGION_SUMMARY_COLUMNS
from pcm_app.core.mappers import impact_classes
from pcm_app.core.models import RegionBreakdown


def breakdown_by_region(df: pd.DataFrame, regions: Sequence[str]) -> list[RegionBreakdown]:
    """SA/NSA counts for every catalog region, in catalog order.

    Regions with no rows in ``df`` are still listed with zero counts. Rows
    whose region is not in ``regions`` contribute to no entry.
    """
    regions = list(regions)
    if not regions:
        return []
    if df.empty or "region" not in df.columns:
        return [RegionBreakdown(region) for region in regions]
    impacts = df["impact"] if "impact" in df.columns else pd.Series("", index=df.index, dtype=object)
    work = pd.DataFrame({"region": df["region"], "impact_class": impact_classes(impacts)})
    work = work[work["region"].isin(regions)]
    if work.empty:
        return [RegionBreakdown(region) for region in regions]
    counts = (
        work.groupby(["region", "impact_class"])
        .size()
        .unstack(fill_value=0)
        .reindex(index=regions, columns=list(IMPACT_CLASSES), fill_value=0)
        .fillna(0)
        .astype(int)
    )
    return [
        RegionBreakdown(
            region=region,
            sa_count=int(counts.iloc[pos][IMPACT_SA]),
            nsa_count=int(counts.iloc[pos][IMPACT_NSA]),
        )
        for pos, region in enumerate(regions)
    ]


def breakdown_frame(breakdowns: Sequence[RegionBreakdown]) -> pd.DataFrame:
    """Summary table rows (Region, SA, NSA, Total) in breakdown order."""
    region_col, sa_col, nsa_col, total_col = REGION_SUMMARY_COLUMNS
    if not breakdowns:
        return pd.DataFrame(columns=list(REGION_SUMMARY_COLUMNS))
    return pd.DataFrame(
        {
            region_col: [b.region for b in breakdowns],
            sa_col: [b.sa_count for b in breakdowns],
            nsa_col: [b.nsa_count for b in breakdowns],
            total_col: [b.total for b in breakdowns],
        }
    )
