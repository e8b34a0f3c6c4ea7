"""Source data types and the column mapping vocabulary.

A :data:`ColumnMapping` tells a parser which header (CSV) or key (JSON)
holds each logical field for one particular dataset.  For the single
measure columns the mapped value is not a header but the literal
code/label of the one measure the file covers.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum

from pybethyw.exceptions import BethYwStructuralError


class SourceDataType(StrEnum):
    AUTHORITY_CODE_CSV = "AuthorityCodeCSV"
    AUTHORITY_BY_YEAR_CSV = "AuthorityByYearCSV"
    WELSH_STATS_JSON = "WelshStatsJSON"


class SourceColumn(StrEnum):
    AUTH_CODE = "auth_code"
    AUTH_NAME_ENG = "auth_name_eng"
    AUTH_NAME_CYM = "auth_name_cym"
    MEASURE_CODE = "measure_code"
    MEASURE_NAME = "measure_name"
    SINGLE_MEASURE_CODE = "single_measure_code"
    SINGLE_MEASURE_NAME = "single_measure_name"
    YEAR = "year"
    VALUE = "value"


ColumnMapping = Mapping[SourceColumn, str]

MIN_COLUMNS: dict[SourceDataType, int] = {
    SourceDataType.AUTHORITY_CODE_CSV: 3,
    SourceDataType.AUTHORITY_BY_YEAR_CSV: 3,
    SourceDataType.WELSH_STATS_JSON: 6,
}


def check_column_count(cols: ColumnMapping, data_type: SourceDataType) -> None:
    """Raise unless *cols* maps enough fields for *data_type*."""
    required = MIN_COLUMNS[data_type]
    if len(cols) < required:
        raise BethYwStructuralError(
            f"{data_type} needs at least {required} mapped columns, got {len(cols)}"
        )


def require_column(cols: ColumnMapping, column: SourceColumn, data_type: SourceDataType) -> str:
    try:
        return cols[column]
    except KeyError:
        raise BethYwStructuralError(f"{data_type} column mapping is missing {column}") from None
