from futures_core.charts import EMPTY_LABEL, chart_data_figure, series_figure
from futures_core.pipeline.model import Record
from futures_core.pipeline.series import Series


def rec(region, year, value):
    return Record(region=region, scenario="Base", variable="Wind", year=year, value=value)


def test_series_figure_one_trace_per_series():
    series = [
        Series("ON", (rec("ON", 2020, 5.0), rec("ON", 2021, 7.0))),
        Series("QC", (rec("QC", 2020, 1.0),)),
    ]
    fig = series_figure(series, title="Wind")

    assert [t.name for t in fig.data] == ["ON", "QC"]
    assert list(fig.data[0].x) == [2020, 2021]
    assert list(fig.data[0].y) == [5.0, 7.0]
    assert fig.layout.title.text == "Wind"
    assert fig.layout.xaxis.title.text == "Year"
    assert fig.layout.yaxis.title.text == "Value"


def test_empty_label_gets_a_legend_name():
    fig = series_figure([Series("", (rec("ON", 2020, 5.0),))])
    assert fig.data[0].name == EMPTY_LABEL


def test_chart_data_figure_from_grouped_rows():
    data = [
        {"label": "Wind", "data": [{"year": 2020, "value": 1.0}, {"year": 2021, "value": 2.0}]},
        {"label": "Solar", "data": [{"year": 2020, "value": 3.0}]},
    ]
    fig = chart_data_figure(data, value_label="GWh")

    assert len(fig.data) == 2
    assert list(fig.data[1].y) == [3.0]
    assert fig.layout.yaxis.title.text == "GWh"


def test_chart_data_figure_empty():
    fig = chart_data_figure([])
    assert len(fig.data) == 0
