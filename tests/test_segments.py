import pandas as pd

from pcm_app.analytics.segments import filters as seg
from pcm_app.core.mappers import classify_impact, rows_to_dataframe
from pcm_app.core.models import FacetSelection


def _sample_df():
    rows = [
        {"Region": "North", "Impact": "SA-Fault", "Sub Project": "Core", "Fault Level": "Critical"},
        {"Region": "North", "Impact": "NSA-Fault", "Sub Project": "Core", "Fault Level": "Minor"},
        {"Region": "South", "Impact": "SA-Fault", "Sub Project": "Edge", "Fault Level": "Critical"},
        {"Region": "South", "Impact": "NSA", "Sub Project": "Core", "Fault Level": "Emergency"},
        {"Region": "East", "Impact": "", "Sub Project": "Edge", "Fault Level": "major"},
        {"Region": "", "Impact": "NSA-Fault", "Sub Project": "Edge", "Fault Level": "Major"},
    ]
    return rows_to_dataframe(rows)


def _all_selections(df):
    regions = ["North", "South", "East"]
    domains = ["Core", "Edge"]
    return [
        FacetSelection(),
        FacetSelection.from_lists(regions=["North"]),
        FacetSelection.from_lists(regions=regions[:2], domains=["Edge"]),
        FacetSelection.from_lists(impacts=["NSA"]),
        FacetSelection.from_lists(impacts=["SA"], severities=["Critical", "Major"]),
        FacetSelection.from_lists(regions=["Nowhere"]),
        FacetSelection.from_lists(domains=domains, impacts=["SA", "NSA"]),
    ]


def test_empty_selection_is_identity():
    df = _sample_df()
    out = seg.filter_records(df, FacetSelection())
    pd.testing.assert_frame_equal(out, df)


def test_filter_never_grows():
    df = _sample_df()
    for selection in _all_selections(df):
        assert len(seg.filter_records(df, selection)) <= len(df)


def test_filter_preserves_order():
    df = _sample_df()
    out = seg.filter_records(df, FacetSelection.from_lists(domains=["Edge"]))
    assert out.index.tolist() == [2, 4, 5]


def test_each_facet_restricts():
    df = _sample_df()
    assert seg.filter_records(df, FacetSelection.from_lists(regions=["North"])).index.tolist() == [0, 1]
    assert seg.filter_records(df, FacetSelection.from_lists(domains=["Core"])).index.tolist() == [0, 1, 3]
    assert seg.filter_records(df, FacetSelection.from_lists(impacts=["NSA"])).index.tolist() == [1, 3, 5]
    assert seg.filter_records(df, FacetSelection.from_lists(impacts=["SA"])).index.tolist() == [0, 2, 4]
    assert seg.filter_records(df, FacetSelection.from_lists(severities=["Critical"])).index.tolist() == [0, 2]


def test_facets_combine_conjunctively():
    df = _sample_df()
    selection = FacetSelection.from_lists(regions=["North", "South"], impacts=["SA"], severities=["Critical"])
    out = seg.filter_records(df, selection)
    assert out.index.tolist() == [0, 2]
    for _, row in out.iterrows():
        assert row["region"] in selection.regions
        assert classify_impact(row["impact"]) in selection.impacts
        assert row["severity"] in selection.severities


def test_adding_a_facet_narrows_result():
    df = _sample_df()
    base = FacetSelection.from_lists(domains=["Core", "Edge"])
    narrowed = FacetSelection.from_lists(domains=["Core", "Edge"], severities=["Critical"])
    base_idx = set(seg.filter_records(df, base).index)
    narrowed_idx = set(seg.filter_records(df, narrowed).index)
    assert narrowed_idx <= base_idx


def test_no_case_normalization():
    df = _sample_df()
    assert seg.filter_records(df, FacetSelection.from_lists(severities=["Major"])).index.tolist() == [5]
    assert seg.filter_records(df, FacetSelection.from_lists(regions=["north"])).empty


def test_empty_dataset_and_no_matches():
    empty = rows_to_dataframe([])
    assert seg.filter_records(empty, FacetSelection.from_lists(regions=["North"])).empty
    assert seg.filter_records(_sample_df(), FacetSelection.from_lists(regions=["Nowhere"])).empty


def test_filter_does_not_add_columns():
    df = _sample_df()
    out = seg.filter_records(df, FacetSelection.from_lists(impacts=["NSA"]))
    assert list(out.columns) == list(df.columns)
