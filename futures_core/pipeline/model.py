from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat, field_validator

ALL = "All"
COLUMNS: tuple[str, ...] = ("Region", "Scenario", "Variable", "Year", "Value")
DIMENSIONS: tuple[str, ...] = ("Region", "Scenario", "Variable", "Year")
CATEGORICAL_DIMENSIONS: tuple[str, ...] = ("Region", "Scenario", "Variable")


def _number_from_text(value, column: str) -> float:
    try:
        num = float(value.strip())
    except ValueError:
        raise ValueError(f"{column} {value!r} is not a number") from None
    if not math.isfinite(num):
        raise ValueError(f"{column} {value!r} is not a finite number")
    return num


class Record(BaseModel):
    """One row of the dataset. Field aliases are the CSV column names."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    region: str = Field(alias="Region")
    scenario: str = Field(alias="Scenario")
    variable: str = Field(alias="Variable")
    year: int = Field(alias="Year")
    value: FiniteFloat = Field(alias="Value")

    @field_validator("region", "scenario", "variable")
    @classmethod
    def reject_sentinel(cls, v: str) -> str:
        if v == ALL:
            raise ValueError(f"{ALL!r} is reserved for the unconstrained selection")
        return v

    @field_validator("year", mode="before")
    @classmethod
    def coerce_year(cls, v):
        if isinstance(v, str):
            num = _number_from_text(v, "Year")
            if not num.is_integer():
                raise ValueError(f"Year {v!r} is not a whole number")
            return int(num)
        return v

    @field_validator("value", mode="before")
    @classmethod
    def coerce_value(cls, v):
        if isinstance(v, str):
            return _number_from_text(v, "Value")
        return v

    def get(self, dimension: str):
        """Field value for a dimension/column name, e.g. record.get("Region")."""
        if dimension not in COLUMNS:
            raise KeyError(f"unknown dimension {dimension!r}")
        return getattr(self, dimension.lower())

    def display(self, dimension: str) -> str:
        """String form used for option lists, filter matching and labels."""
        return str(self.get(dimension))
