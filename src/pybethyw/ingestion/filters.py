"""Import filters.

Each filter is independent and means "include everything" when absent or
empty.  A year range of ``(0, 0)`` is likewise unrestricted.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pybethyw._constants import ALL_YEARS
from pybethyw.exceptions import BethYwInvalidArgumentError
from pybethyw.ingestion.normalize import lower_all


class ImportFilters(BaseModel):
    """Area, measure and year restrictions applied while importing."""

    model_config = ConfigDict(frozen=True)

    areas: frozenset[str] = Field(default_factory=frozenset, description="Allowed local authority codes")
    measures: frozenset[str] = Field(default_factory=frozenset, description="Allowed measure codenames (lowercase)")
    years: tuple[int, int] = Field(default=ALL_YEARS, description="Inclusive year range")

    def __init__(self, **data: Any) -> None:
        super().__init__(**data)
        start, end = self.years
        if not 0 <= start <= end:
            raise BethYwInvalidArgumentError(f"Invalid year range {start}-{end}")

    @classmethod
    def of(
        cls,
        areas_filter: Iterable[str] | None = None,
        measures_filter: Iterable[str] | None = None,
        years_filter: tuple[int, int] | None = None,
    ) -> ImportFilters:
        return cls(
            areas=frozenset(areas_filter or ()),
            measures=lower_all(measures_filter),
            years=years_filter or ALL_YEARS,
        )

    @field_validator("measures")
    @classmethod
    def _lower_measures(cls, value: frozenset[str]) -> frozenset[str]:
        return lower_all(value)

    @property
    def all_areas(self) -> bool:
        return not self.areas

    @property
    def all_measures(self) -> bool:
        return not self.measures

    @property
    def all_years(self) -> bool:
        return self.years == ALL_YEARS

    def allows_area(self, code: str) -> bool:
        return self.all_areas or code in self.areas

    def allows_measure(self, codename: str) -> bool:
        return self.all_measures or codename.lower() in self.measures

    def allows_year(self, year: int) -> bool:
        start, end = self.years
        return self.all_years or start <= year <= end
