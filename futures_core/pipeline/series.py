from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from futures_core.pipeline.filters import FilterInput, normalize_filters
from futures_core.pipeline.model import ALL, Record

# (Region free, Variable free, Scenario free) -> label template.
# A dimension is "free" when its filter is "All" (or absent).
LABEL_TEMPLATES: Dict[Tuple[bool, bool, bool], str] = {
    (True, True, True): "{Region} - {Variable} ({Scenario})",
    (True, True, False): "{Region} - {Variable}",
    (True, False, True): "{Region} ({Scenario})",
    (True, False, False): "{Region}",
    (False, True, True): "{Variable} ({Scenario})",
    (False, True, False): "{Variable}",
    (False, False, True): "{Scenario}",
    (False, False, False): "",
}


@dataclass(frozen=True)
class Series:
    label: str
    data: Tuple[Record, ...]


def unconstrained_dimensions(filters: Optional[FilterInput]) -> Tuple[bool, bool, bool]:
    """Decision-table key for the active filters. Year never takes part."""
    active = normalize_filters(filters)
    return tuple(active.get(d, ALL) == ALL for d in ("Region", "Variable", "Scenario"))


def label_template(filters: Optional[FilterInput]) -> str:
    return LABEL_TEMPLATES[unconstrained_dimensions(filters)]


def series_label(record: Record, template: str) -> str:
    return template.format(
        Region=record.region,
        Variable=record.variable,
        Scenario=record.scenario,
    )


def group_series(records: Sequence[Record], filters: Optional[FilterInput] = None) -> List[Series]:
    """
    Partition filtered records into labeled series.
    Groups keep the record order of the input; series are ordered by the
    first appearance of their label.
    """
    template = label_template(filters)

    groups: Dict[str, List[Record]] = {}
    for r in records:
        groups.setdefault(series_label(r, template), []).append(r)

    return [Series(label, tuple(rows)) for label, rows in groups.items()]


def series_points(series: Series) -> List[dict]:
    return [{"year": r.year, "value": r.value} for r in series.data]


def group_dimension_data(rows: Optional[Iterable[Sequence]]) -> Optional[List[dict]]:
    """
    Group pre-partitioned (variable, year, value) rows by variable.
    Returns [{"label": variable, "data": [{"year", "value"}, ...]}, ...] in
    first-seen order, or None when rows is None.
    """
    if rows is None:
        return None

    groups: Dict[str, List[dict]] = {}
    for variable, year, value in rows:
        groups.setdefault(variable, []).append({"year": year, "value": value})
    return [{"label": label, "data": data} for label, data in groups.items()]


def series_summary(series: Sequence[Series]) -> Mapping[str, int]:
    """Record count per series label."""
    return {s.label: len(s.data) for s in series}
