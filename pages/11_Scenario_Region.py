
# pages/11_Scenario_Region.py
import streamlit as st

from futures_core.charts import chart_data_figure
from futures_core.config import load_settings
from futures_core.loaders.remote import DimensionDataClient, fetch_dimensions
from futures_core.pipeline.errors import PipelineError
from futures_core.pipeline.series import group_dimension_data

st.title("Scenario & Region")
st.caption("Pre-partitioned files: one JSON per (scenario, region), fetched on demand and kept for the session.")

settings = load_settings()
if not settings.partition_url:
    st.info("Set `FUTURES_PARTITION_URL` to the folder written by `partition_loader.py` (served over HTTP).")
    st.stop()


@st.cache_data(ttl=3600, show_spinner=False)
def manifest(base_url: str, timeout: float) -> dict[str, list[str]]:
    return fetch_dimensions(base_url, timeout).model_dump(by_alias=True)


@st.cache_resource
def get_client(base_url: str, timeout: float) -> DimensionDataClient:
    return DimensionDataClient(base_url, timeout=timeout)


try:
    dims = manifest(settings.partition_url, settings.http_timeout)
except PipelineError as exc:
    st.error(f"Could not load dimensions: {exc}")
    st.stop()

left, right = st.columns(2)
with left:
    scenario = st.selectbox("Scenarios", dims["Scenarios"], index=0 if dims["Scenarios"] else None)
with right:
    region = st.selectbox("Regions", dims["Regions"], index=0 if dims["Regions"] else None)

client = get_client(settings.partition_url, settings.http_timeout)
try:
    rows = client.get(scenario, region)
except PipelineError as exc:
    st.error(f"Could not load {scenario} / {region}: {exc}")
    st.stop()

chart_data = group_dimension_data(rows)
if chart_data is None:
    st.info("Choose a scenario and a region.")
elif not chart_data:
    st.info("No rows for this selection.")
else:
    st.plotly_chart(chart_data_figure(chart_data, title=f"{region} — {scenario}"), use_container_width=True)
