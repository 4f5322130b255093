
# pages/99_About.py
import streamlit as st

st.title("About")

st.markdown(
    """
**Energy Futures Explorer** loads a flat scenario table and turns any selection into chart series.

**Pipeline**
- `futures_core.loaders.records` — CSV text → validated `Record`s (pydantic), sorted by year.
- `futures_core.pipeline.dimensions` — option lists per dimension, with **All** first.
- `futures_core.pipeline.filters` — AND of all selected filters; **All** = unconstrained.
- `futures_core.pipeline.series` — one line per combination of the dimensions left on **All**.
- `futures_core.charts` — Plotly figure for the series.

**Configuration** (environment variables)
- `FUTURES_CSV_PATH`, `FUTURES_DATA_URL`, `FUTURES_PARTITION_URL`
- `FUTURES_EXCLUDED_REGIONS` (default `Canada`; empty string disables)
- `FUTURES_HTTP_TIMEOUT` (seconds, default 60)
"""
)

st.caption("Built with Streamlit, pandas, pydantic, requests and Plotly.")
