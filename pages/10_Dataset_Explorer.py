
# pages/10_Dataset_Explorer.py
import streamlit as st

from futures_core.charts import series_figure
from futures_core.config import load_settings
from futures_core.loaders.data_io import load_data
from futures_core.loaders.records import records_frame, records_to_csv
from futures_core.pipeline.dimensions import dimension_options
from futures_core.pipeline.errors import PipelineError
from futures_core.pipeline.filters import apply_filters, set_filter
from futures_core.pipeline.model import ALL
from futures_core.pipeline.series import group_series, series_summary

st.title("Dataset Explorer")
st.caption("Narrow the dataset with one selector per dimension. Every dimension left on **All** splits the chart into more lines.")

settings = load_settings()


# Load (cached); a failed load stops the page
try:
    with st.spinner("Loading dataset…"):
        records = load_data(settings.csv_path, settings.data_url, settings.http_timeout)
except FileNotFoundError:
    st.error(f"Dataset not found: `{settings.csv_path}`. Set `FUTURES_CSV_PATH` or `FUTURES_DATA_URL`.")
    st.stop()
except PipelineError as exc:
    st.error(f"Could not load the dataset: {exc}")
    st.stop()

if st.button("Reload dataset", icon=":material/refresh:"):
    load_data.clear()
    st.rerun()


# Selectors
by_year = st.toggle("Filter by year", value=False)
options = dimension_options(records, include_year=by_year)

filters: dict[str, str] = {}
cols = st.columns(len(options))
for col, (dim, opts) in zip(cols, options.items()):
    with col:
        filters = set_filter(filters, dim, st.selectbox(dim, opts, key=f"filter_{dim}"))


# Derived views, recomputed on every rerun
filtered = apply_filters(records, filters, exclusions=settings.exclusions)
series = group_series(filtered, filters)

if filters.get("Region") == ALL and settings.excluded_regions:
    st.caption("Region = All leaves out: " + ", ".join(settings.excluded_regions))

st.subheader(f"{len(filtered):,} of {len(records):,} rows — {len(series)} series")
if not series:
    st.info("No rows match this selection.")
else:
    fig = series_figure(series, title=" / ".join(f"{d}: {v}" for d, v in filters.items() if v != ALL) or None)
    st.plotly_chart(fig, use_container_width=True)

    with st.expander("Rows per series"):
        st.dataframe(
            [{"Series": label or "All records", "Rows": n} for label, n in series_summary(series).items()],
            hide_index=True,
            use_container_width=True,
        )


# Table + download
with st.expander("Filtered rows", expanded=False):
    st.dataframe(
        records_frame(filtered),
        hide_index=True,
        use_container_width=True,
        column_config={
            "Year": st.column_config.NumberColumn("Year", format="%d"),
            "Value": st.column_config.NumberColumn("Value", format="%.2f"),
        },
    )
    st.download_button(
        "Download CSV",
        data=records_to_csv(filtered),
        file_name="filtered.csv",
        mime="text/csv",
        icon=":material/download:",
    )
