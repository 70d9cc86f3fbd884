from pcm_app.analytics.aggregations.summary import summarize
from pcm_app.analytics.facets import derive_facets
from pcm_app.core.mappers import rows_to_dataframe


def _sample_df():
    rows = [
        {"Region": "South", "Impact": "SA", "Sub Project": "Edge", "Fault Level": "Major"},
        {"Region": "North", "Impact": "NSA", "Sub Project": "Core", "Fault Level": "Minor"},
        {"Region": "", "Impact": "SA", "Sub Project": "Core", "Fault Level": "Minor"},
        {"Region": "   ", "Impact": "SA", "Sub Project": "", "Fault Level": "Critical"},
        {"Region": "North", "Impact": "SA", "Fault Level": "Critical"},
        {"Impact": "SA"},
    ]
    return rows_to_dataframe(rows)


def test_facets_sorted_and_deduplicated():
    facets = derive_facets(_sample_df())
    assert facets.regions == ("North", "South")
    assert facets.domains == ("Core", "Edge")


def test_facets_empty_dataset():
    facets = derive_facets(rows_to_dataframe([]))
    assert facets.regions == ()
    assert facets.domains == ()


def test_facets_use_default_string_ordering():
    rows = [{"Region": r} for r in ["b", "B", "a", "A10", "A2"]]
    facets = derive_facets(rows_to_dataframe(rows))
    assert facets.regions == ("A10", "A2", "B", "a", "b")


def test_whitespace_region_is_not_selectable_but_still_counted():
    df = rows_to_dataframe([{"Region": "  ", "Impact": "NSA"}, {"Region": "East", "Impact": "SA"}])
    assert derive_facets(df).regions == ("East",)
    assert summarize(df).total == 2
