"""Normalization helpers.

Centralizes parsing of the numeric, year and code fields shared by all
source formats.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any

from pybethyw._constants import YEAR_PATTERN
from pybethyw.exceptions import BethYwValueParseError


def is_blank(value: Any) -> bool:
    """Return True for cells that mean "no reading"."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def parse_value(value: Any) -> float:
    """Coerce a reading to ``float``.

    Sources encode readings either as native numbers or as numeric strings,
    both are accepted.  Booleans, blanks, NaN and infinities are rejected.
    """
    if isinstance(value, bool):
        raise BethYwValueParseError(f"Expected a numeric value, got {value!r}", value=value)
    if isinstance(value, (int, float)):
        result = float(value)
    elif isinstance(value, str) and value.strip():
        try:
            result = float(value.strip())
        except ValueError as exc:
            raise BethYwValueParseError(f"Expected a numeric value, got {value!r}", value=value) from exc
    else:
        raise BethYwValueParseError(f"Expected a numeric value, got {value!r}", value=value)
    if not math.isfinite(result):
        raise BethYwValueParseError(f"Expected a numeric value, got {value!r}", value=value)
    return result


def parse_year(value: Any) -> int:
    """Validate a four digit year given as a string or an integer."""
    if isinstance(value, bool):
        raise BethYwValueParseError(f"Invalid year {value!r}", value=value)
    if isinstance(value, int):
        text = str(value)
    elif isinstance(value, str):
        text = value.strip()
    else:
        raise BethYwValueParseError(f"Invalid year {value!r}", value=value)
    if not YEAR_PATTERN.fullmatch(text):
        raise BethYwValueParseError(f"Invalid year {value!r}", value=value)
    return int(text)


def lower_all(values: Iterable[str] | None) -> frozenset[str]:
    if not values:
        return frozenset()
    return frozenset(value.lower() for value in values)
