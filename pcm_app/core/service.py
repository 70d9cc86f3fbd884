"""DashboardSession: owns the working dataset and recomputes views on demand."""

from __future__ import annotations

import logging
from collections import OrderedDict
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

import pandas as pd
import pytz

from pcm_app.analytics.aggregations.region import breakdown_by_region
from pcm_app.analytics.aggregations.summary import summarize
from pcm_app.analytics.facets import derive_facets
from pcm_app.analytics.segments.filters import filter_records
from pcm_app.analytics.series import build_series

from .config import SELECTION_CACHE_SIZE, TIMEZONE
from .loader import load_workbook_rows
from .mappers import records_to_dataframe, rows_to_records
from .models import AggregateSummary, ChartSeries, FacetCatalog, FacetSelection, RegionBreakdown

ProgressCallback = Callable[[str, int | None, int | None], None]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LoadResult:
    facets: FacetCatalog
    row_count: int


@dataclass(frozen=True, slots=True)
class SelectionResult:
    summary: AggregateSummary
    breakdown: tuple[RegionBreakdown, ...]
    series: ChartSeries


@dataclass(slots=True)
class _DatasetState:
    frame: pd.DataFrame
    facets: FacetCatalog
    loaded_at: datetime | None = None
    source_name: str | None = None
    memo: OrderedDict[FacetSelection, SelectionResult] = field(default_factory=OrderedDict)


def _empty_state() -> _DatasetState:
    return _DatasetState(frame=records_to_dataframe([]), facets=FacetCatalog())


class DashboardSession:
    """Working dataset plus the computation entry points used by the dashboard.

    The dataset is replaced wholesale by :meth:`load_dataset`; every other
    method is a read-only recomputation over it.
    """

    def __init__(self, cache_size: int = SELECTION_CACHE_SIZE):
        self._tz = pytz.timezone(TIMEZONE)
        self._cache_size = max(0, int(cache_size))
        self._state = _empty_state()

    # ------------------ Dataset ------------------
    @property
    def frame(self) -> pd.DataFrame:
        return self._state.frame

    @property
    def facets(self) -> FacetCatalog:
        return self._state.facets

    @property
    def row_count(self) -> int:
        return len(self._state.frame)

    @property
    def is_loaded(self) -> bool:
        return self._state.loaded_at is not None

    @property
    def loaded_at(self) -> datetime | None:
        return self._state.loaded_at

    @property
    def source_name(self) -> str | None:
        return self._state.source_name

    def load_dataset(
        self,
        rows: Iterable[Mapping[str, Any]],
        *,
        source_name: str | None = None,
        progress: ProgressCallback | None = None,
    ) -> LoadResult:
        """Replace the working dataset with ``rows`` and derive its facet catalog."""
        return self._ingest(rows, source_name=source_name, progress=progress, done=0, total=2)

    def load_file(
        self,
        source: Any,
        filename: str | None = None,
        *,
        progress: ProgressCallback | None = None,
    ) -> LoadResult:
        """Read ``source`` and load its rows.

        Progress is reported as three steps: read, map, build filters. On a
        read failure the previous dataset is kept and
        :class:`~pcm_app.core.loader.WorkbookReadError` propagates.
        """
        name = filename or getattr(source, "name", None)
        if progress:
            progress(f"Reading {name or 'uploaded file'}", 0, 3)
        rows = load_workbook_rows(source, filename)
        if progress:
            progress(f"Read {len(rows)} row(s)", 1, 3)
        return self._ingest(rows, source_name=name, progress=progress, done=1, total=3)

    def _ingest(
        self,
        rows: Iterable[Mapping[str, Any]],
        *,
        source_name: str | None,
        progress: ProgressCallback | None,
        done: int,
        total: int,
    ) -> LoadResult:
        records = rows_to_records(rows)
        frame = records_to_dataframe(records)
        if progress:
            progress("Mapped spreadsheet rows", done + 1, total)
        facets = derive_facets(frame)
        if progress:
            progress("Built region and domain filters", done + 2, total)
        # Single assignment: readers never see a half-replaced dataset
        self._state = _DatasetState(
            frame=frame,
            facets=facets,
            loaded_at=datetime.now(self._tz),
            source_name=source_name,
        )
        logger.debug(
            "Loaded %s rows (%s regions, %s domains) from %s",
            len(frame),
            len(facets.regions),
            len(facets.domains),
            source_name or "<rows>",
        )
        return LoadResult(facets=facets, row_count=len(frame))

    def clear(self) -> None:
        """Drop the working dataset, returning to the empty state."""
        self._state = _empty_state()

    # ------------------ Views ------------------
    def filtered(self, selection: FacetSelection | None = None) -> pd.DataFrame:
        return filter_records(self._state.frame, selection or FacetSelection())

    def apply_selection(self, selection: FacetSelection | None = None) -> SelectionResult:
        """Summary, region breakdown and chart series for ``selection``."""
        selection = selection or FacetSelection()
        state = self._state
        cached = state.memo.get(selection)
        if cached is not None:
            state.memo.move_to_end(selection)
            return cached
        result = compute_selection(state.frame, state.facets, selection)
        if self._cache_size:
            state.memo[selection] = result
            while len(state.memo) > self._cache_size:
                state.memo.popitem(last=False)
        return result


def compute_selection(
    frame: pd.DataFrame,
    facets: FacetCatalog,
    selection: FacetSelection,
) -> SelectionResult:
    filtered = filter_records(frame, selection)
    breakdown = tuple(breakdown_by_region(filtered, facets.regions))
    return SelectionResult(
        summary=summarize(filtered),
        breakdown=breakdown,
        series=build_series(breakdown),
    )
