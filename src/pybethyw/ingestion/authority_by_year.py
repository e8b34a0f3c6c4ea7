"""Authority-by-year CSV ingestion.

These files hold a single measure: one row per local authority, one column
per year, a blank cell meaning no reading::

    AuthorityCode,1991,1992,1993
    W06000001,69.8,70.1,

Area names are not present; they come from the authority code CSV.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import IO

from pybethyw.ingestion._common import ensure_readable, iter_csv_rows
from pybethyw.ingestion.columns import (
    ColumnMapping,
    SourceColumn,
    SourceDataType,
    check_column_count,
    require_column,
)
from pybethyw.ingestion.filters import ImportFilters
from pybethyw.ingestion.normalize import is_blank, parse_value, parse_year
from pybethyw.models.area import Area
from pybethyw.models.measure import Measure
from pybethyw.state.store import AreaStore

_logger = logging.getLogger(__name__)


def populate_from_authority_by_year_csv(
    store: AreaStore,
    stream: IO[str],
    cols: ColumnMapping,
    *,
    areas_filter: Iterable[str] | None = None,
    measures_filter: Iterable[str] | None = None,
    years_filter: tuple[int, int] | None = None,
) -> None:
    """Import a wide single-measure CSV into *store*.

    The measure's codename and label come from
    ``cols[SINGLE_MEASURE_CODE]`` and ``cols[SINGLE_MEASURE_NAME]``.  If the
    measure is excluded by *measures_filter* the stream is left unread.

    Raises
    ------
    BethYwStructuralError
        If *cols* is too small or lacks the single measure fields.
    BethYwStreamError
        If *stream* is not readable.
    BethYwValueParseError
        If a header year or a non-blank cell is not numeric.
    """
    data_type = SourceDataType.AUTHORITY_BY_YEAR_CSV
    check_column_count(cols, data_type)
    codename = require_column(cols, SourceColumn.SINGLE_MEASURE_CODE, data_type)
    label = require_column(cols, SourceColumn.SINGLE_MEASURE_NAME, data_type)
    ensure_readable(stream)
    filters = ImportFilters.of(areas_filter, measures_filter, years_filter)

    if not filters.allows_measure(codename):
        _logger.debug("Measure %s excluded by filter; skipping file", codename)
        return

    rows = iter_csv_rows(stream)
    header = next(rows, None)
    if header is None:
        _logger.debug("Empty authority-by-year file for %s", codename)
        return
    years = [parse_year(cell) for cell in header[1:]]

    imported = skipped = 0
    for cells in rows:
        code = cells[0]
        if not filters.allows_area(code):
            skipped += 1
            continue

        measure = Measure(codename, label)
        for year, cell in zip(years, cells[1:], strict=False):
            if is_blank(cell) or not filters.allows_year(year):
                continue
            measure.set_value(year, parse_value(cell))

        area = Area(code)
        area.set_measure(codename, measure)
        store.set_area(code, area)
        imported += 1

    _logger.debug(
        "Imported %s for %d areas across %d years (%d areas filtered out)",
        codename,
        imported,
        len(years),
        skipped,
    )
