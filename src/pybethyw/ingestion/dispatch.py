"""Dispatch a source stream to the population routine for its data type."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import IO

from pybethyw.exceptions import BethYwStructuralError
from pybethyw.ingestion.authority_by_year import populate_from_authority_by_year_csv
from pybethyw.ingestion.authority_codes import populate_from_authority_code_csv
from pybethyw.ingestion.columns import ColumnMapping, SourceDataType, check_column_count
from pybethyw.ingestion.stats_json import populate_from_welsh_stats_json
from pybethyw.state.store import AreaStore

_logger = logging.getLogger(__name__)


def _coerce_type(data_type: SourceDataType | str) -> SourceDataType:
    try:
        return SourceDataType(data_type)
    except ValueError:
        raise BethYwStructuralError(f"Unexpected data type: {data_type!r}") from None


def populate(
    store: AreaStore,
    stream: IO[str],
    data_type: SourceDataType | str,
    cols: ColumnMapping,
    *,
    areas_filter: Iterable[str] | None = None,
    measures_filter: Iterable[str] | None = None,
    years_filter: tuple[int, int] | None = None,
) -> None:
    """Parse *stream* of the given *data_type* into *store*.

    Without filters everything in the stream is imported; this is how the
    reference file of area names is loaded.  The authority code CSV only
    honours *areas_filter*.

    Raises
    ------
    BethYwStructuralError
        For an unknown *data_type* or a column mapping that is too small
        for it.
    BethYwStreamError
        If *stream* is not readable.
    """
    source_type = _coerce_type(data_type)
    check_column_count(cols, source_type)
    _logger.debug("Populating from %s source", source_type)

    if source_type is SourceDataType.AUTHORITY_CODE_CSV:
        populate_from_authority_code_csv(store, stream, cols, areas_filter=areas_filter)
    elif source_type is SourceDataType.AUTHORITY_BY_YEAR_CSV:
        populate_from_authority_by_year_csv(
            store,
            stream,
            cols,
            areas_filter=areas_filter,
            measures_filter=measures_filter,
            years_filter=years_filter,
        )
    elif source_type is SourceDataType.WELSH_STATS_JSON:
        populate_from_welsh_stats_json(
            store,
            stream,
            cols,
            areas_filter=areas_filter,
            measures_filter=measures_filter,
            years_filter=years_filter,
        )
    else:  # pragma: no cover - every member is handled above
        raise BethYwStructuralError(f"Unexpected data type: {source_type!r}")
