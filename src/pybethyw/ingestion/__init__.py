"""Ingestion layer.

Parsers for the three source formats (authority code CSV, authority-by-year
CSV and StatsWales JSON) that build Areas and Measures and merge them into
an :class:`pybethyw.state.store.AreaStore`.
"""

from pybethyw.ingestion.authority_by_year import populate_from_authority_by_year_csv
from pybethyw.ingestion.authority_codes import populate_from_authority_code_csv
from pybethyw.ingestion.columns import ColumnMapping, SourceColumn, SourceDataType
from pybethyw.ingestion.dispatch import populate
from pybethyw.ingestion.filters import ImportFilters
from pybethyw.ingestion.stats_json import populate_from_welsh_stats_json

__all__ = [
    "ColumnMapping",
    "ImportFilters",
    "SourceColumn",
    "SourceDataType",
    "populate",
    "populate_from_authority_by_year_csv",
    "populate_from_authority_code_csv",
    "populate_from_welsh_stats_json",
]
