"""Pure helpers to build dashboard context for testing (no Streamlit)."""

from __future__ import annotations

from dataclasses import dataclass, field

import pandas as pd

from pcm_app.analytics.aggregations.region import breakdown_frame
from pcm_app.analytics.series import series_to_frame
from pcm_app.core.config import CARD_DEFINITIONS
from pcm_app.core.models import AggregateSummary, ChartSeries, FacetSelection, RegionBreakdown
from pcm_app.core.service import DashboardSession


@dataclass(frozen=True, slots=True)
class Card:
    key: str
    title: str
    value: int


@dataclass(slots=True)
class DashboardContext:
    selection: FacetSelection
    summary: AggregateSummary
    breakdown: tuple[RegionBreakdown, ...]
    series: ChartSeries
    cards: list[Card] = field(default_factory=list)
    region_table: pd.DataFrame = field(default_factory=pd.DataFrame)
    chart_data: pd.DataFrame = field(default_factory=pd.DataFrame)
    has_data: bool = False


def build_cards(summary: AggregateSummary) -> list[Card]:
    values = summary.as_dict()
    return [Card(key=key, title=title, value=int(values.get(key, 0))) for key, title in CARD_DEFINITIONS]


def build_context(session: DashboardSession, selection: FacetSelection | None = None) -> DashboardContext:
    selection = selection or FacetSelection()
    result = session.apply_selection(selection)
    return DashboardContext(
        selection=selection,
        summary=result.summary,
        breakdown=result.breakdown,
        series=result.series,
        cards=build_cards(result.summary),
        region_table=breakdown_frame(result.breakdown),
        chart_data=series_to_frame(result.series),
        has_data=session.row_count > 0,
    )
