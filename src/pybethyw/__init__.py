"""pybethyw - Welsh Government statistics importer and summariser."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pybethyw")
except PackageNotFoundError:
    __version__ = "0+local"
from pybethyw.config import BethYwConfig
from pybethyw.datasets import AREAS, DATASETS, InputFileSource, get_dataset
from pybethyw.exceptions import (
    BethYwError,
    BethYwInvalidArgumentError,
    BethYwNotFoundError,
    BethYwStreamError,
    BethYwStructuralError,
    BethYwValueParseError,
)
from pybethyw.ingestion import (
    ColumnMapping,
    ImportFilters,
    SourceColumn,
    SourceDataType,
    populate,
)
from pybethyw.input import InputFile
from pybethyw.models import Area, Measure
from pybethyw.state import AreaStore

__all__ = [
    "__version__",
    "AREAS",
    "Area",
    "AreaStore",
    "BethYwConfig",
    "BethYwError",
    "BethYwInvalidArgumentError",
    "BethYwNotFoundError",
    "BethYwStreamError",
    "BethYwStructuralError",
    "BethYwValueParseError",
    "ColumnMapping",
    "DATASETS",
    "ImportFilters",
    "InputFile",
    "InputFileSource",
    "Measure",
    "SourceColumn",
    "SourceDataType",
    "get_dataset",
    "populate",
]
