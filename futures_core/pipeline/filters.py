from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from futures_core.pipeline.model import ALL, DIMENSIONS, Record

Exclusions = Mapping[str, AbstractSet[str]]

# Values still dropped when their dimension is set to "All". Only Region has one.
UNCONSTRAINED_EXCLUSIONS: Dict[str, frozenset] = {"Region": frozenset({"Canada"})}


@dataclass(frozen=True)
class Filter:
    dimension: str
    value: str = ALL

    def __post_init__(self):
        if self.dimension not in DIMENSIONS:
            raise ValueError(f"unknown dimension {self.dimension!r}; expected one of {DIMENSIONS}")

    @property
    def unconstrained(self) -> bool:
        return self.value == ALL


FilterInput = Union[Mapping[str, object], Iterable[Filter]]


def normalize_filters(raw: Optional[FilterInput]) -> Dict[str, str]:
    """
    Coerce a mapping or an iterable of Filter into {dimension: value}.
    A later Filter on the same dimension replaces an earlier one.
    """
    if not raw:
        return {}
    items = raw.items() if isinstance(raw, Mapping) else ((f.dimension, f.value) for f in raw)

    out: Dict[str, str] = {}
    for dimension, value in items:
        f = Filter(str(dimension), ALL if value is None else str(value))
        out[f.dimension] = f.value
    return out


def set_filter(filters: Mapping[str, str], dimension: str, value: str) -> Dict[str, str]:
    """New filter mapping with the filter on `dimension` replaced."""
    f = Filter(dimension, value)
    out = dict(filters)
    out[f.dimension] = f.value
    return out


def _matches(record: Record, dimension: str, value: str, exclusions: Exclusions) -> bool:
    if value == ALL:
        excluded = exclusions.get(dimension)
        return not excluded or record.display(dimension) not in excluded
    return record.display(dimension) == value


def apply_filters(
    records: Sequence[Record],
    filters: Optional[FilterInput] = None,
    *,
    exclusions: Optional[Exclusions] = None,
) -> List[Record]:
    """
    Keep records matching every active filter (logical AND), in input order.
    "All" leaves a dimension unconstrained apart from the values listed for it
    in `exclusions` (defaults to UNCONSTRAINED_EXCLUSIONS; pass {} to disable).
    """
    active = normalize_filters(filters)
    if not active:
        return list(records)

    excl = UNCONSTRAINED_EXCLUSIONS if exclusions is None else exclusions
    return [
        r for r in records
        if all(_matches(r, dim, value, excl) for dim, value in active.items())
    ]
