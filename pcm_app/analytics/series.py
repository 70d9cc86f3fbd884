"""Reshape region breakdowns into chart-ready series."""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from pcm_app.core.config import IMPACT_NSA, IMPACT_SA
from pcm_app.core.models import ChartSeries, RegionBreakdown, SeriesEntry


def build_series(breakdowns: Sequence[RegionBreakdown]) -> ChartSeries:
    return ChartSeries(
        labels=tuple(b.region for b in breakdowns),
        series=(
            SeriesEntry(name=IMPACT_SA, values=tuple(b.sa_count for b in breakdowns)),
            SeriesEntry(name=IMPACT_NSA, values=tuple(b.nsa_count for b in breakdowns)),
        ),
    )


def series_to_frame(chart: ChartSeries) -> pd.DataFrame:
    """Long-form (region, impact, count) rows, labels order first then series order."""
    rows: list[dict[str, object]] = []
    for entry in chart.series:
        for label, value in zip(chart.labels, entry.values, strict=True):
            rows.append({"region": label, "impact": entry.name, "count": int(value)})
    return pd.DataFrame(rows, columns=["region", "impact", "count"])
