from pathlib import Path

import pytest

from futures_core.config import DEFAULT_CSV_PATH, load_settings


def test_defaults():
    s = load_settings({})
    assert s.csv_path == DEFAULT_CSV_PATH
    assert s.data_url is None
    assert s.partition_url is None
    assert s.excluded_regions == ("Canada",)
    assert s.exclusions == {"Region": frozenset({"Canada"})}
    assert s.http_timeout == 60.0


def test_values_from_environment():
    s = load_settings({
        "FUTURES_CSV_PATH": "/tmp/x.csv",
        "FUTURES_DATA_URL": " https://example.org/data.csv ",
        "FUTURES_PARTITION_URL": "https://example.org/public/",
        "FUTURES_EXCLUDED_REGIONS": "Canada, Total ,",
        "FUTURES_HTTP_TIMEOUT": "5",
    })
    assert s.csv_path == Path("/tmp/x.csv")
    assert s.data_url == "https://example.org/data.csv"
    assert s.partition_url == "https://example.org/public"
    assert s.excluded_regions == ("Canada", "Total")
    assert s.http_timeout == 5.0


def test_empty_exclusion_list_disables_rule():
    s = load_settings({"FUTURES_EXCLUDED_REGIONS": ""})
    assert s.excluded_regions == ()
    assert s.exclusions == {}


@pytest.mark.parametrize("raw", ["soon", "0", "-1"])
def test_bad_timeout_raises(raw):
    with pytest.raises(ValueError):
        load_settings({"FUTURES_HTTP_TIMEOUT": raw})
