from __future__ import annotations

from typing import Optional, Sequence

import plotly.graph_objects as go

from futures_core.pipeline.series import Series, series_points

EMPTY_LABEL = "All records"


def chart_data_figure(
    chart_data: Sequence[dict],
    title: Optional[str] = None,
    *,
    value_label: str = "Value",
    height: int = 480,
) -> go.Figure:
    """
    One line per {"label", "data": [{"year", "value"}, ...]} entry.
    Year on the x axis, value on the y axis.
    """
    fig = go.Figure()
    for entry in chart_data:
        points = entry["data"]
        fig.add_trace(
            go.Scatter(
                x=[p["year"] for p in points],
                y=[p["value"] for p in points],
                mode="lines+markers",
                name=entry["label"] or EMPTY_LABEL,
            )
        )
    fig.update_layout(
        height=height,
        margin=dict(l=10, r=10, t=40, b=10),
        title=title,
        xaxis_title="Year",
        yaxis_title=value_label,
        hovermode="x",
        showlegend=len(chart_data) > 0,
    )
    return fig


def series_figure(series: Sequence[Series], title: Optional[str] = None, **kwargs) -> go.Figure:
    data = [{"label": s.label, "data": series_points(s)} for s in series]
    return chart_data_figure(data, title, **kwargs)
