from futures_core.pipeline.dimensions import dimension_options, distinct_values
from futures_core.pipeline.model import Record


def rec(region, scenario="Base", variable="Wind", year=2020, value=1.0):
    return Record(region=region, scenario=scenario, variable=variable, year=year, value=value)


def test_dimension_options_none_when_not_loaded():
    assert dimension_options(None) is None
    assert dimension_options(None, include_year=True) is None


def test_dimension_options_empty_records():
    assert dimension_options([]) == {"Region": ["All"], "Scenario": ["All"], "Variable": ["All"]}


def test_dimension_options_sample():
    records = [rec("ON", year=2020), rec("ON", year=2021, value=7.0)]
    opts = dimension_options(records)

    assert opts["Region"] == ["All", "ON"]
    assert opts["Scenario"] == ["All", "Base"]
    assert opts["Variable"] == ["All", "Wind"]
    assert list(opts) == ["Region", "Scenario", "Variable"]


def test_dimension_options_distinct_sorted_with_all_first():
    records = [
        rec("QC", "Higher Carbon Price", "Solar"),
        rec("AB", "Base", "Wind"),
        rec("QC", "Base", "Hydro"),
        rec("BC", "Higher Carbon Price", "Wind"),
        rec("AB", "Base", "Wind"),
    ]
    opts = dimension_options(records)

    for dim, attr in (("Region", "region"), ("Scenario", "scenario"), ("Variable", "variable")):
        distinct = {getattr(r, attr) for r in records}
        assert opts[dim][0] == "All"
        assert opts[dim][1:] == sorted(distinct)
        assert len(opts[dim]) == len(distinct) + 1

    assert opts["Region"] == ["All", "AB", "BC", "QC"]


def test_sort_is_case_sensitive_lexicographic():
    assert distinct_values([rec("b"), rec("B"), rec("a")], "Region") == ["B", "a", "b"]


def test_year_options_are_strings_in_numeric_order():
    records = [rec("ON", year=2050), rec("ON", year=999), rec("ON", year=2020), rec("ON", year=2050)]
    opts = dimension_options(records, include_year=True)

    assert opts["Year"] == ["All", "999", "2020", "2050"]
    assert list(opts) == ["Region", "Scenario", "Variable", "Year"]
