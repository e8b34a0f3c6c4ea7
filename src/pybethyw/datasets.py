"""Catalogue of the StatsWales source files pybethyw knows how to import.

Each :class:`InputFileSource` names a file, its data type, and the column
mapping its parser needs.  ``AREAS`` is the reference file of area names and
is always imported first; ``DATASETS`` holds the measure datasets keyed by
their short code.
"""

from __future__ import annotations

from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field

from pybethyw.exceptions import BethYwNotFoundError
from pybethyw.ingestion.columns import SourceColumn, SourceDataType


class InputFileSource(BaseModel):
    """Description of one importable source file."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Human readable dataset name")
    code: str = Field(..., description="Short code used on the command line")
    file: str = Field(..., description="File name relative to the data directory")
    type: SourceDataType
    cols: dict[SourceColumn, str] = Field(default_factory=dict)


AREAS = InputFileSource(
    name="Areas",
    code="areas",
    file="areas.csv",
    type=SourceDataType.AUTHORITY_CODE_CSV,
    cols={
        SourceColumn.AUTH_CODE: "Local Authority Code",
        SourceColumn.AUTH_NAME_ENG: "Name (eng)",
        SourceColumn.AUTH_NAME_CYM: "Name (cym)",
    },
)

POPDEN = InputFileSource(
    name="Population density",
    code="popden",
    file="popu1009.json",
    type=SourceDataType.WELSH_STATS_JSON,
    cols={
        SourceColumn.AUTH_CODE: "Localauthority_Code",
        SourceColumn.AUTH_NAME_ENG: "Localauthority_ItemName_ENG",
        SourceColumn.MEASURE_CODE: "Measure_Code",
        SourceColumn.MEASURE_NAME: "Measure_ItemName_ENG",
        SourceColumn.YEAR: "Year_Code",
        SourceColumn.VALUE: "Data",
    },
)

BIZ = InputFileSource(
    name="Active Businesses",
    code="biz",
    file="econ0080.json",
    type=SourceDataType.WELSH_STATS_JSON,
    cols={
        SourceColumn.AUTH_CODE: "Area_Code",
        SourceColumn.AUTH_NAME_ENG: "Area_ItemName_ENG",
        SourceColumn.MEASURE_CODE: "Variable_Code",
        SourceColumn.MEASURE_NAME: "Variable_ItemName_ENG",
        SourceColumn.YEAR: "Year_Code",
        SourceColumn.VALUE: "Data",
    },
)

AQI = InputFileSource(
    name="Air Quality Indicators",
    code="aqi",
    file="envi0201.json",
    type=SourceDataType.WELSH_STATS_JSON,
    cols={
        SourceColumn.AUTH_CODE: "Area_Code",
        SourceColumn.AUTH_NAME_ENG: "Area_ItemName_ENG",
        SourceColumn.MEASURE_CODE: "Pollutant_ItemName_ENG",
        SourceColumn.MEASURE_NAME: "Pollutant_ItemName_ENG",
        SourceColumn.YEAR: "Year_Code",
        SourceColumn.VALUE: "Data",
    },
)

TRAINS = InputFileSource(
    name="Rail passenger journeys",
    code="trains",
    file="tran0152.json",
    type=SourceDataType.WELSH_STATS_JSON,
    cols={
        SourceColumn.AUTH_CODE: "LocalAuthority_Code",
        SourceColumn.AUTH_NAME_ENG: "LocalAuthority_ItemName_ENG",
        SourceColumn.SINGLE_MEASURE_CODE: "rail",
        SourceColumn.SINGLE_MEASURE_NAME: "Rail passenger journeys",
        SourceColumn.YEAR: "Year_Code",
        SourceColumn.VALUE: "Data",
    },
)

COMPLETE_POPDEN = InputFileSource(
    name="Population density",
    code="complete-popden",
    file="complete-popu1009-popden.csv",
    type=SourceDataType.AUTHORITY_BY_YEAR_CSV,
    cols={
        SourceColumn.AUTH_CODE: "AuthorityCode",
        SourceColumn.SINGLE_MEASURE_CODE: "dens",
        SourceColumn.SINGLE_MEASURE_NAME: "Population density",
    },
)

COMPLETE_POP = InputFileSource(
    name="Population",
    code="complete-pop",
    file="complete-popu1009-pop.csv",
    type=SourceDataType.AUTHORITY_BY_YEAR_CSV,
    cols={
        SourceColumn.AUTH_CODE: "AuthorityCode",
        SourceColumn.SINGLE_MEASURE_CODE: "pop",
        SourceColumn.SINGLE_MEASURE_NAME: "Population",
    },
)

COMPLETE_AREA = InputFileSource(
    name="Land area",
    code="complete-area",
    file="complete-popu1009-area.csv",
    type=SourceDataType.AUTHORITY_BY_YEAR_CSV,
    cols={
        SourceColumn.AUTH_CODE: "AuthorityCode",
        SourceColumn.SINGLE_MEASURE_CODE: "area",
        SourceColumn.SINGLE_MEASURE_NAME: "Land area",
    },
)

DATASETS: MappingProxyType[str, InputFileSource] = MappingProxyType(
    {
        source.code: source
        for source in (
            POPDEN,
            BIZ,
            AQI,
            TRAINS,
            COMPLETE_POPDEN,
            COMPLETE_POP,
            COMPLETE_AREA,
        )
    }
)


def get_dataset(code: str) -> InputFileSource:
    """Look up a dataset by its short code (case-insensitive)."""
    try:
        return DATASETS[code.lower()]
    except KeyError:
        raise BethYwNotFoundError(f"No dataset found matching {code}", key=code) from None
