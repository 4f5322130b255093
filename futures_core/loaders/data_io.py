
from pathlib import Path
from typing import Optional, Tuple, Union

import streamlit as st

from futures_core.config import DEFAULT_CSV_PATH, DEFAULT_HTTP_TIMEOUT
from futures_core.loaders.records import load_records
from futures_core.loaders.remote import load_remote_records
from futures_core.pipeline.model import Record


@st.cache_data(show_spinner=False)
def load_data(
    csv_path: Union[str, Path] = DEFAULT_CSV_PATH,
    data_url: Optional[str] = None,
    timeout: float = DEFAULT_HTTP_TIMEOUT,
) -> Tuple[Record, ...]:
    """Load the dataset from data_url when given, else from the local CSV. Cached for speed."""
    if data_url:
        return tuple(load_remote_records(data_url, timeout=timeout))
    return tuple(load_records(csv_path))
