
# pages/01_Home.py
import streamlit as st


st.title("Energy Futures Explorer")
st.caption("Interactive exploration of electricity scenarios by region, variable and year.")


st.divider()
st.page_link("pages/10_Dataset_Explorer.py", label="Open the Dataset Explorer (recommended first step)", icon=":material/insights:")
st.page_link("pages/11_Scenario_Region.py", label="Scenario & Region (pre-partitioned files)", icon=":material/bolt:")
st.divider()


st.markdown(
    """
### What this app helps you do
- **Filter** the dataset by Region, Scenario, Variable and (optionally) Year.
- **Compare** every combination left on *All* as separate lines on one Plotly chart.
- **Download** the filtered rows as CSV.
"""
)

with st.expander("Quick start", expanded=True):
    st.markdown(
        """
1) Put the CSV at `data/electricity-generation-2023.csv` (or set `FUTURES_CSV_PATH` / `FUTURES_DATA_URL`).  
2) Open **Dataset Explorer** and pick one value per dimension, or leave it on **All**.  
3) Optional: run `python partition_loader.py <csv> public`, serve `public/` and set `FUTURES_PARTITION_URL`
   to browse one scenario/region file at a time.
        """
    )


st.markdown(
    """
### Data & assumptions
- **Columns:** `Region, Scenario, Variable, Year, Value`; the header row is required.
- **Quoting:** a field wrapped in double quotes is unquoted; commas inside fields are not supported.
- **Validation:** one bad row (non-numeric Year/Value, wrong number of fields) rejects the whole file.
- **Region = All** leaves out the national total (`Canada`, see `FUTURES_EXCLUDED_REGIONS`).
"""
)
