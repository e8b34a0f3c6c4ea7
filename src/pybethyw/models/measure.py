"""Measure data model: one statistical indicator tracked across years."""

from __future__ import annotations

import math
from typing import Any

from pydantic import Field, field_validator

from pybethyw.exceptions import BethYwNotFoundError
from pybethyw.models._base import BethYwBaseModel, dump_json


class Measure(BethYwBaseModel):
    """A codenamed timeseries of readings keyed by year.

    Parameters
    ----------
    codename : str
        Short code for the measure, e.g. ``"pop"``.  Lowercased on
        construction and never changed afterwards.
    label : str
        Human readable label, e.g. ``"Population"``.
    readings : dict[int, float]
        Value per year.  At most one reading per year.

    Examples
    --------
    >>> measure = Measure("Pop", "Population")
    >>> measure.set_value(1999, 12345678.9)
    >>> measure.codename
    'pop'
    """

    codename: str = Field(frozen=True)
    label: str = ""
    readings: dict[int, float] = Field(default_factory=dict)

    def __init__(self, codename: str, label: str = "", **data: Any) -> None:
        super().__init__(codename=codename, label=label, **data)

    @field_validator("codename")
    @classmethod
    def _lower_codename(cls, value: str) -> str:
        return value.lower()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Measure):
            return NotImplemented
        return self.codename == other.codename and self.label == other.label and self.readings == other.readings

    def __str__(self) -> str:
        from pybethyw.render import render_measure

        return render_measure(self)

    def set_label(self, label: str) -> None:
        self.label = label

    def get_value(self, year: int) -> float:
        """Return the reading for *year*.

        Raises :class:`BethYwNotFoundError` if there is no reading.
        """
        try:
            return self.readings[year]
        except KeyError:
            raise BethYwNotFoundError(f"No value found for year {year}", key=year) from None

    def set_value(self, year: int, value: float) -> None:
        """Insert or overwrite the reading for *year*."""
        self.readings[int(year)] = float(value)

    def size(self) -> int:
        return len(self.readings)

    def __len__(self) -> int:
        return len(self.readings)

    def sorted_readings(self) -> list[tuple[int, float]]:
        """Readings in chronological order."""
        return sorted(self.readings.items())

    def get_average(self) -> float:
        if not self.readings:
            return 0.0
        return math.fsum(self.readings.values()) / len(self.readings)

    def get_difference(self) -> float:
        """Value at the latest year minus value at the earliest year."""
        if len(self.readings) < 2:
            return 0.0
        return self.readings[max(self.readings)] - self.readings[min(self.readings)]

    def get_difference_as_percentage(self) -> float:
        """Difference relative to the earliest reading, in percent.

        Returns 0 whenever the raw difference is exactly 0.  A non-zero
        difference from a first reading of 0 yields signed infinity.
        """
        difference = self.get_difference()
        if difference == 0:
            return 0.0
        first = self.readings[min(self.readings)]
        if first == 0:
            return math.copysign(math.inf, difference)
        return difference / first * 100

    def merge(self, other: Measure) -> None:
        """Fill gaps in this measure's readings from *other*.

        Readings already present here take precedence.
        """
        for year, value in other.readings.items():
            self.readings.setdefault(year, value)

    def to_dict(self) -> dict[str, float]:
        """Readings as ``{"<year>": value}`` in chronological order."""
        return {str(year): value for year, value in self.sorted_readings()}

    def to_json(self, *, indent: int | None = None) -> str:
        return dump_json(self.to_dict(), indent=indent)
