from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from futures_core.pipeline.model import ALL, CATEGORICAL_DIMENSIONS, Record


def _year_key(value: str):
    # years are whole numbers once parsed; sort them numerically
    return int(value)


def distinct_values(records: Sequence[Record], dimension: str) -> List[str]:
    """Sorted distinct display values of one dimension (Year in numeric order)."""
    values = {r.display(dimension) for r in records}
    if dimension == "Year":
        return sorted(values, key=_year_key)
    return sorted(values)


def dimension_options(
    records: Optional[Sequence[Record]],
    *,
    include_year: bool = False,
) -> Optional[Dict[str, List[str]]]:
    """
    Option lists for each dimension: "All" followed by the sorted distinct values.
    Returns None when records is None (dataset not loaded yet).
    """
    if records is None:
        return None

    dims = CATEGORICAL_DIMENSIONS + (("Year",) if include_year else ())
    return {d: [ALL, *distinct_values(records, d)] for d in dims}
