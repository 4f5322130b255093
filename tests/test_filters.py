import pytest

from futures_core.pipeline.filters import (
    UNCONSTRAINED_EXCLUSIONS,
    Filter,
    apply_filters,
    normalize_filters,
    set_filter,
)
from futures_core.pipeline.model import Record


def rec(region, scenario="Base", variable="Wind", year=2020, value=1.0):
    return Record(region=region, scenario=scenario, variable=variable, year=year, value=value)


@pytest.fixture
def records():
    return [
        rec("ON", "Base", "Wind", 2020, 5.0),
        rec("QC", "Base", "Hydro", 2020, 50.0),
        rec("ON", "Higher Carbon Price", "Wind", 2021, 6.0),
        rec("Canada", "Base", "Wind", 2020, 100.0),
        rec("ON", "Base", "Solar", 2021, 1.0),
    ]


def test_empty_filters_is_identity(records):
    for empty in ({}, None, []):
        out = apply_filters(records, empty)
        assert out == records
        assert out is not records


def test_region_all_drops_canada(records):
    out = apply_filters(records, {"Region": "All"})
    assert [r.region for r in out] == ["ON", "QC", "ON", "ON"]


def test_region_all_without_canada_is_unchanged():
    records = [rec("ON", year=2020, value=5.0), rec("ON", year=2021, value=7.0)]
    assert apply_filters(records, {"Region": "All"}) == records


def test_exclusion_can_be_disabled(records):
    assert apply_filters(records, {"Region": "All"}, exclusions={}) == records


def test_exclusion_applies_to_region_only():
    records = [rec("ON", scenario="Canada"), rec("ON", variable="Canada")]
    assert apply_filters(records, {"Scenario": "All", "Variable": "All"}) == records
    assert set(UNCONSTRAINED_EXCLUSIONS) == {"Region"}


def test_explicit_canada_selection_still_matches(records):
    out = apply_filters(records, {"Region": "Canada"})
    assert [r.value for r in out] == [100.0]


def test_exact_case_sensitive_match(records):
    assert apply_filters(records, {"Region": "on"}) == []
    assert [r.value for r in apply_filters(records, {"Variable": "Wind", "Region": "ON"})] == [5.0, 6.0]


def test_year_matches_display_string(records):
    out = apply_filters(records, {"Year": "2021"})
    assert [r.value for r in out] == [6.0, 1.0]


def test_filters_are_conjunctive(records):
    first = {"Region": "ON"}
    second = {"Scenario": "Base"}

    both = apply_filters(records, {**first, **second})
    stepwise = apply_filters(apply_filters(records, first), second)

    assert both == stepwise
    assert [r.variable for r in both] == ["Wind", "Solar"]


def test_output_preserves_input_order(records):
    out = apply_filters(records, {"Scenario": "Base", "Region": "All"})
    positions = [records.index(r) for r in out]
    assert positions == sorted(positions)


def test_accepts_filter_objects(records):
    out = apply_filters(records, [Filter("Region", "QC")])
    assert [r.variable for r in out] == ["Hydro"]


def test_set_filter_replaces_without_mutating():
    filters = {"Region": "ON", "Scenario": "Base"}
    out = set_filter(filters, "Region", "QC")

    assert out == {"Region": "QC", "Scenario": "Base"}
    assert filters == {"Region": "ON", "Scenario": "Base"}


def test_normalize_filters_last_filter_wins_and_coerces():
    out = normalize_filters([Filter("Region", "ON"), Filter("Year", "2020"), Filter("Region", "QC")])
    assert out == {"Region": "QC", "Year": "2020"}

    assert normalize_filters({"Year": 2020, "Region": None}) == {"Year": "2020", "Region": "All"}


def test_unknown_dimension_raises():
    with pytest.raises(ValueError):
        Filter("Unit", "GWh")
    with pytest.raises(ValueError):
        apply_filters([], {"Unit": "GWh"})
    with pytest.raises(ValueError):
        set_filter({}, "Value", "1")
