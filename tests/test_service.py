from io import BytesIO

import pytest

from pcm_app.core.loader import WorkbookReadError
from pcm_app.core.models import FacetSelection
from pcm_app.core.service import DashboardSession


def _rows():
    return [
        {"Region": "North", "Impact": "SA-Fault", "Sub Project": "Core", "Fault Level": "Critical"},
        {"Region": "North", "Impact": "NSA-Fault", "Sub Project": "Core", "Fault Level": "Minor"},
        {"Region": "South", "Impact": "SA-Fault", "Sub Project": "Edge", "Fault Level": "Critical"},
    ]


def test_empty_session():
    session = DashboardSession()
    assert not session.is_loaded
    assert session.facets.regions == ()
    result = session.apply_selection()
    assert result.summary.total == 0
    assert result.breakdown == ()
    assert result.series.labels == ()


def test_load_dataset_returns_facets():
    session = DashboardSession()
    result = session.load_dataset(_rows(), source_name="faults.xlsx")
    assert result.row_count == 3
    assert result.facets.regions == ("North", "South")
    assert result.facets.domains == ("Core", "Edge")
    assert session.is_loaded
    assert session.source_name == "faults.xlsx"
    assert session.loaded_at is not None


def test_apply_selection_scenario():
    session = DashboardSession()
    session.load_dataset(_rows())
    result = session.apply_selection(FacetSelection.from_lists(regions=["North"]))
    assert (result.summary.total, result.summary.sa, result.summary.nsa) == (2, 1, 1)
    assert [(b.region, b.sa_count, b.nsa_count) for b in result.breakdown] == [
        ("North", 1, 1),
        ("South", 0, 0),
    ]
    assert result.series.labels == ("North", "South")


def test_apply_selection_does_not_mutate_dataset():
    session = DashboardSession()
    session.load_dataset(_rows())
    before = session.frame.copy()
    session.apply_selection(FacetSelection.from_lists(impacts=["NSA"]))
    assert session.frame.equals(before)


def test_memoized_and_fresh_results_match():
    cached = DashboardSession()
    uncached = DashboardSession(cache_size=0)
    for session in (cached, uncached):
        session.load_dataset(_rows())
    selection = FacetSelection.from_lists(severities=["Critical"])
    first = cached.apply_selection(selection)
    assert cached.apply_selection(FacetSelection.from_lists(severities=["Critical"])) == first
    assert uncached.apply_selection(selection) == first


def test_reload_replaces_dataset_and_drops_memo():
    session = DashboardSession()
    session.load_dataset(_rows())
    old = session.apply_selection()
    session.load_dataset([{"Region": "West", "Impact": "NSA", "Sub Project": "Core", "Fault Level": "Major"}])
    new = session.apply_selection()
    assert old.summary.total == 3
    assert new.summary.total == 1
    assert session.facets.regions == ("West",)
    assert [b.region for b in new.breakdown] == ["West"]


def test_memo_is_bounded():
    session = DashboardSession(cache_size=2)
    session.load_dataset(_rows())
    for region in ("North", "South", "East"):
        session.apply_selection(FacetSelection.from_lists(regions=[region]))
    assert len(session._state.memo) == 2


def test_load_file_failure_keeps_previous_dataset():
    session = DashboardSession()
    session.load_dataset(_rows())
    with pytest.raises(WorkbookReadError):
        session.load_file(BytesIO(b"not a workbook"), filename="broken.xlsx")
    assert session.row_count == 3


def test_load_file_csv():
    session = DashboardSession()
    content = b"Region,Impact,Sub Project,Fault Level\nNorth,NSA-Fault,Core,Minor\n,SA,Edge,Major\n"
    result = session.load_file(BytesIO(content), filename="faults.csv")
    assert result.row_count == 2
    assert result.facets.regions == ("North",)
    summary = session.apply_selection().summary
    assert (summary.total, summary.sa, summary.nsa) == (2, 1, 1)


def test_progress_counts_steps_for_rows():
    steps = []
    session = DashboardSession()
    session.load_dataset(_rows(), progress=lambda msg, cur, tot: steps.append((cur, tot)))
    assert steps == [(1, 2), (2, 2)]


def test_progress_counts_steps_for_file():
    steps = []
    session = DashboardSession()
    content = b"Region,Impact,Sub Project,Fault Level\nNorth,SA,Core,Minor\n"
    session.load_file(
        BytesIO(content),
        filename="faults.csv",
        progress=lambda msg, cur, tot: steps.append((msg, cur, tot)),
    )
    assert [(cur, tot) for _, cur, tot in steps] == [(0, 3), (1, 3), (2, 3), (3, 3)]
    assert steps[1][0] == "Read 1 row(s)"


def test_clear_returns_to_empty_state():
    session = DashboardSession()
    session.load_dataset(_rows())
    session.apply_selection()
    session.clear()
    assert not session.is_loaded
    assert session.row_count == 0
    assert session.source_name is None
    assert session.facets.regions == ()
    assert session.apply_selection().summary.total == 0
