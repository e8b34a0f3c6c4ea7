"""Authority code CSV ingestion.

Parses the reference file of local authority codes and their English and
Welsh names::

    Local Authority Code,Name (eng),Name (cym)
    W06000001,Isle of Anglesey,Ynys Môn

The three columns are always in this order; the header row is skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import IO

from pybethyw._constants import LANG_ENGLISH, LANG_WELSH
from pybethyw.exceptions import BethYwStructuralError
from pybethyw.ingestion._common import ensure_readable, iter_csv_rows
from pybethyw.ingestion.columns import ColumnMapping, SourceDataType, check_column_count
from pybethyw.ingestion.filters import ImportFilters
from pybethyw.models.area import Area
from pybethyw.state.store import AreaStore

_logger = logging.getLogger(__name__)


def populate_from_authority_code_csv(
    store: AreaStore,
    stream: IO[str],
    cols: ColumnMapping,
    *,
    areas_filter: Iterable[str] | None = None,
) -> None:
    """Create an Area with English and Welsh names for every data row.

    Parameters
    ----------
    store
        Store the Areas are merged into.
    stream
        Open text stream positioned at the header row.
    cols
        Column mapping; must map at least three fields.
    areas_filter
        Local authority codes to import.  Absent or empty imports all.

    Raises
    ------
    BethYwStructuralError
        If *cols* maps fewer than three fields or a row has fewer than
        three cells.
    BethYwStreamError
        If *stream* is not readable.
    """
    check_column_count(cols, SourceDataType.AUTHORITY_CODE_CSV)
    ensure_readable(stream)
    filters = ImportFilters.of(areas_filter)

    rows = iter_csv_rows(stream)
    next(rows, None)  # header

    imported = skipped = 0
    for row_no, cells in enumerate(rows, start=1):
        if len(cells) < 3:
            raise BethYwStructuralError(f"Data row {row_no}: expected 3 fields, got {len(cells)}")
        code, name_eng, name_cym = cells[:3]
        if not filters.allows_area(code):
            skipped += 1
            continue
        area = Area(code)
        area.set_name(LANG_ENGLISH, name_eng)
        area.set_name(LANG_WELSH, name_cym)
        store.set_area(code, area)
        imported += 1

    _logger.debug("Imported %d authority codes (%d filtered out)", imported, skipped)
