"""StatsWales JSON ingestion.

StatsWales exports hold one flat object per observation under a top-level
``"value"`` array::

    {"value": [
        {"Localauthority_Code": "W06000001",
         "Localauthority_ItemName_ENG": "Isle of Anglesey",
         "Measure_Code": "Hectare",
         "Measure_ItemName_ENG": "Persons per hectare",
         "Year_Code": "1991",
         "Data": 0.98},
        ...
    ]}

Files that cover a single measure omit the measure keys; the column mapping
then supplies the measure's code and label through the single measure
columns.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from typing import IO, Any

from pybethyw._constants import LANG_ENGLISH, STATS_JSON_RECORDS_KEY
from pybethyw.exceptions import BethYwStreamError, BethYwStructuralError
from pybethyw.ingestion._common import ensure_readable
from pybethyw.ingestion.columns import (
    ColumnMapping,
    SourceColumn,
    SourceDataType,
    check_column_count,
    require_column,
)
from pybethyw.ingestion.filters import ImportFilters
from pybethyw.ingestion.normalize import parse_value, parse_year
from pybethyw.models.area import Area
from pybethyw.models.measure import Measure
from pybethyw.state.store import AreaStore

_logger = logging.getLogger(__name__)

_DATA_TYPE = SourceDataType.WELSH_STATS_JSON


def _load_records(stream: IO[str]) -> list[Any]:
    try:
        document = json.load(stream)
    except UnicodeDecodeError as exc:
        raise BethYwStreamError(f"Input stream is not valid text: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise BethYwStructuralError(f"Malformed JSON: {exc}") from exc
    except OSError as exc:
        raise BethYwStreamError(f"Failed reading input stream: {exc}") from exc

    if not isinstance(document, dict) or not isinstance(document.get(STATS_JSON_RECORDS_KEY), list):
        raise BethYwStructuralError(f"Expected a JSON object with a {STATS_JSON_RECORDS_KEY!r} array")
    return document[STATS_JSON_RECORDS_KEY]


def _field(record: Mapping[str, Any], key: str, index: int) -> Any:
    try:
        return record[key]
    except KeyError:
        raise BethYwStructuralError(f"Record {index} has no {key!r} field") from None


class _MeasureResolver:
    """Resolves a record's measure code/label, falling back to the file's single measure."""

    def __init__(self, cols: ColumnMapping) -> None:
        self.code_key = cols.get(SourceColumn.MEASURE_CODE)
        self.name_key = cols.get(SourceColumn.MEASURE_NAME)
        self.single_code = cols.get(SourceColumn.SINGLE_MEASURE_CODE)
        self.single_name = cols.get(SourceColumn.SINGLE_MEASURE_NAME)
        if self.code_key is None and self.single_code is None:
            raise BethYwStructuralError(
                f"{_DATA_TYPE} column mapping needs {SourceColumn.MEASURE_CODE} or {SourceColumn.SINGLE_MEASURE_CODE}"
            )

    def resolve(self, record: Mapping[str, Any], index: int) -> tuple[str, str]:
        if self.code_key is not None and self.code_key in record:
            code = str(record[self.code_key])
        elif self.single_code is not None:
            code = self.single_code
        else:
            raise BethYwStructuralError(f"Record {index} has no {self.code_key!r} field")

        if self.name_key is not None and self.name_key in record:
            name = str(record[self.name_key])
        elif self.single_name is not None:
            name = self.single_name
        else:
            name = code
        return code, name


def populate_from_welsh_stats_json(
    store: AreaStore,
    stream: IO[str],
    cols: ColumnMapping,
    *,
    areas_filter: Iterable[str] | None = None,
    measures_filter: Iterable[str] | None = None,
    years_filter: tuple[int, int] | None = None,
) -> None:
    """Import every observation of a StatsWales JSON document into *store*.

    An Area is created (with its English name) the first time its code is
    seen.  Each observation then contributes at most one reading to the
    Area's measure; readings already stored for other years are kept.

    Raises
    ------
    BethYwStructuralError
        If *cols* maps fewer than six fields, the document is not valid
        JSON, the ``"value"`` array is missing, or a record lacks a mapped
        field.
    BethYwStreamError
        If *stream* is not readable.
    BethYwValueParseError
        If a record's value or year cannot be parsed.
    """
    check_column_count(cols, _DATA_TYPE)
    code_key = require_column(cols, SourceColumn.AUTH_CODE, _DATA_TYPE)
    name_key = require_column(cols, SourceColumn.AUTH_NAME_ENG, _DATA_TYPE)
    year_key = require_column(cols, SourceColumn.YEAR, _DATA_TYPE)
    value_key = require_column(cols, SourceColumn.VALUE, _DATA_TYPE)
    measures = _MeasureResolver(cols)
    ensure_readable(stream)
    filters = ImportFilters.of(areas_filter, measures_filter, years_filter)

    records = _load_records(stream)
    readings = skipped = 0
    for index, record in enumerate(records):
        if not isinstance(record, Mapping):
            raise BethYwStructuralError(f"Record {index} is not an object")

        code = str(_field(record, code_key, index))
        if not filters.allows_area(code):
            skipped += 1
            continue

        if code not in store:
            area = Area(code)
            area.set_name(LANG_ENGLISH, str(_field(record, name_key, index)))
            store.set_area(code, area)

        measure_code, measure_name = measures.resolve(record, index)
        if not filters.allows_measure(measure_code):
            skipped += 1
            continue

        value = parse_value(_field(record, value_key, index))
        year = parse_year(_field(record, year_key, index))

        measure = Measure(measure_code, measure_name)
        if filters.allows_year(year):
            measure.set_value(year, value)
            readings += 1
        store.get_area(code).set_measure(measure_code, measure)

    _logger.debug(
        "Imported %d readings from %d records (%d filtered out)",
        readings,
        len(records),
        skipped,
    )
