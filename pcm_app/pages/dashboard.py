"""PCMs dashboard page.

Upload a fault spreadsheet, narrow it with the region / domain / impact /
severity filters, and review summary cards plus the per-region chart and
table. Everything below the filters is recomputed from the full dataset on
every rerun.
"""

from __future__ import annotations

import logging

import streamlit as st

from pcm_app.app import register_page
from pcm_app.core.config import DASHBOARD_TITLE, IMPACT_CLASSES, SETTINGS, SEVERITY_LEVELS, UPLOAD_TYPES
from pcm_app.core.loader import WorkbookReadError
from pcm_app.core.models import FacetSelection
from pcm_app.core.service import DashboardSession
from pcm_app.features.dashboard.context import build_context
from pcm_app.visual.cards import render_cards
from pcm_app.visual.charts import region_distribution_chart
from pcm_app.visual.progress import ProgressReporter
from pcm_app.visual.tables import prepare_record_table, prepare_region_table, render_table, table_csv

logger = logging.getLogger(__name__)

SESSION_KEY = "dashboard_session"
UPLOAD_SIGNATURE_KEY = "dashboard_upload_signature"
FILTER_KEYS = {
    "regions": "filter_regions",
    "domains": "filter_domains",
    "impacts": "filter_impacts",
    "severities": "filter_severities",
}


def _get_session() -> DashboardSession:
    session = st.session_state.get(SESSION_KEY)
    if session is None:
        session = DashboardSession()
        st.session_state[SESSION_KEY] = session
    return session


def _reset_filters() -> None:
    for key in FILTER_KEYS.values():
        st.session_state.pop(key, None)


def _handle_upload(session: DashboardSession) -> None:
    uploaded = st.file_uploader(
        "Upload Data",
        type=list(UPLOAD_TYPES),
        help="The first worksheet is read. Recognized columns: Region, Impact, Sub Project, Fault Level.",
    )
    if uploaded is None:
        # Uploader emptied: drop the previous file's data and filters
        if st.session_state.pop(UPLOAD_SIGNATURE_KEY, None) is not None:
            session.clear()
            _reset_filters()
            logger.info("Upload removed; dataset cleared")
        return
    signature = getattr(uploaded, "file_id", None) or (uploaded.name, uploaded.size)
    if st.session_state.get(UPLOAD_SIGNATURE_KEY) == signature:
        return
    reporter = ProgressReporter(f"Loading {uploaded.name}")
    try:
        result = session.load_file(uploaded, progress=reporter.callback)
    except WorkbookReadError as exc:
        logger.error("Upload rejected: %s", exc)
        reporter.error(str(exc))
        # Do not retry the same broken file on every rerun
        st.session_state[UPLOAD_SIGNATURE_KEY] = signature
        return
    st.session_state[UPLOAD_SIGNATURE_KEY] = signature
    _reset_filters()
    reporter.complete(
        f"Loaded {result.row_count} ticket(s) across {len(result.facets.regions)} region(s) "
        f"and {len(result.facets.domains)} domain(s)."
    )
    if result.row_count > SETTINGS.large_dataset_warn_rows:
        st.warning(f"Large dataset loaded ({result.row_count} rows). This may impact UI responsiveness.")


def _render_filters(session: DashboardSession) -> FacetSelection:
    facets = session.facets
    col_region, col_domain, col_impact, col_severity = st.columns(4)
    with col_region:
        regions = st.multiselect("Select Region", list(facets.regions), key=FILTER_KEYS["regions"])
    with col_domain:
        domains = st.multiselect("Select Domain", list(facets.domains), key=FILTER_KEYS["domains"])
    with col_impact:
        impacts = st.multiselect("Select Impact", list(IMPACT_CLASSES), key=FILTER_KEYS["impacts"])
    with col_severity:
        severities = st.multiselect("Select Severity", list(SEVERITY_LEVELS), key=FILTER_KEYS["severities"])
    return FacetSelection.from_lists(regions, domains, impacts, severities)


@register_page("Dashboard")
def dashboard_page():
    st.title(DASHBOARD_TITLE)
    session = _get_session()
    _handle_upload(session)
    if session.is_loaded and session.loaded_at is not None:
        st.caption(
            f"Source: {session.source_name or 'uploaded file'} | {session.row_count} row(s) | "
            f"loaded {session.loaded_at.strftime('%Y-%m-%d %H:%M %Z')}"
        )

    st.markdown("---")
    selection = _render_filters(session)
    ctx = build_context(session, selection)

    st.markdown("---")
    render_cards(ctx.cards)

    st.markdown("---")
    chart_col, table_col = st.columns(2)
    with chart_col:
        st.subheader("PCMs Distribution by Region")
        chart = region_distribution_chart(ctx.chart_data) if ctx.has_data else None
        if chart is None:
            st.info("Upload data to view the chart")
        else:
            st.altair_chart(chart, width="stretch")
    with table_col:
        st.subheader("PCMs Summary by Region")
        table, display_cols, cfg = prepare_region_table(ctx.region_table)
        if not display_cols:
            st.info("No regions available.")
        else:
            render_table(table, display_cols, cfg)
            st.download_button(
                "Download Region Summary CSV",
                data=table_csv(table, display_cols),
                file_name="pcm_region_summary.csv",
                mime="text/csv",
            )

    if ctx.has_data:
        with st.expander(f"Filtered tickets ({ctx.summary.total})"):
            records, record_cols, record_cfg = prepare_record_table(session.filtered(selection))
            if not record_cols:
                st.info("No tickets match the current filters.")
            else:
                render_table(records, record_cols, record_cfg)
