"""Command line interface.

Usage
-----
    pybethyw --datasets popden,biz --areas W06000023 --years 2010-2015
    pybethyw -d all -m pop --json

Options::

    -d, --datasets LIST   Dataset codes to import, or "all" (default: all)
    -a, --areas LIST      Local authority codes to import, or "all"
    -m, --measures LIST   Measure codenames to import, or "all"
    -y, --years RANGE     "YYYY", "YYYY-YYYY", or "0" for all years
    -j, --json            Print JSON instead of tables
    --dir PATH            Directory holding the dataset files
    -v, --verbose         Enable debug logging
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from pybethyw._constants import ALL_YEARS
from pybethyw.config import BethYwConfig
from pybethyw.datasets import AREAS, DATASETS, InputFileSource, get_dataset
from pybethyw.exceptions import BethYwError, BethYwInvalidArgumentError, BethYwNotFoundError
from pybethyw.input import InputFile
from pybethyw.state.store import AreaStore

_logger = logging.getLogger(__name__)

_ALL = "all"


def _split(values: Sequence[str] | None) -> list[str]:
    """Flatten repeated and comma separated arguments."""
    items: list[str] = []
    for value in values or ():
        items.extend(part.strip() for part in value.split(",") if part.strip())
    return items


def parse_datasets_arg(values: Sequence[str] | None) -> list[InputFileSource]:
    """Resolve dataset codes; no value or ``all`` selects every dataset."""
    codes = _split(values)
    if not codes or any(code.lower() == _ALL for code in codes):
        return list(DATASETS.values())
    try:
        return [get_dataset(code) for code in codes]
    except BethYwNotFoundError as exc:
        raise BethYwInvalidArgumentError(f"No dataset matches key: {exc.key}") from exc


def parse_areas_arg(values: Sequence[str] | None) -> frozenset[str]:
    """An empty result means "all areas"."""
    codes = _split(values)
    if any(code.lower() == _ALL for code in codes):
        return frozenset()
    return frozenset(codes)


def parse_measures_arg(values: Sequence[str] | None) -> frozenset[str]:
    """An empty result means "all measures"."""
    codes = [code.lower() for code in _split(values)]
    if _ALL in codes:
        return frozenset()
    return frozenset(codes)


def parse_years_arg(value: str | None) -> tuple[int, int]:
    """Parse ``YYYY``, ``YYYY-YYYY`` or ``0``/``0-0`` (all years)."""
    if value is None or not value.strip():
        return ALL_YEARS
    parts = value.strip().split("-")
    if len(parts) > 2 or not all(part.isdigit() for part in parts):
        raise BethYwInvalidArgumentError(f"Invalid input for years argument: {value!r}")
    years = [int(part) for part in parts]
    if len(years) == 1:
        years.append(years[0])
    start, end = years
    if (start, end) == ALL_YEARS:
        return ALL_YEARS
    if not all(len(part) == 4 for part in parts) or start > end:
        raise BethYwInvalidArgumentError(f"Invalid input for years argument: {value!r}")
    return start, end


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pybethyw",
        description="Import and summarise Welsh Government statistical datasets.",
    )
    parser.add_argument("--datasets", "-d", action="append", help='Dataset codes, or "all"')
    parser.add_argument("--areas", "-a", action="append", help='Local authority codes, or "all"')
    parser.add_argument("--measures", "-m", action="append", help='Measure codenames, or "all"')
    parser.add_argument("--years", "-y", help='"YYYY", "YYYY-YYYY", or "0" for all years')
    parser.add_argument("--json", "-j", action="store_true", dest="json_mode", help="Output JSON")
    parser.add_argument("--dir", dest="data_dir", help="Directory holding the dataset files")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def load_store(
    config: BethYwConfig,
    datasets: Sequence[InputFileSource],
    *,
    areas_filter: frozenset[str] = frozenset(),
    measures_filter: frozenset[str] = frozenset(),
    years_filter: tuple[int, int] = ALL_YEARS,
) -> AreaStore:
    """Import the area names file and then each dataset into a new store."""
    store = AreaStore()

    with InputFile(config.data_dir / AREAS.file, encoding=config.encoding).open() as stream:
        store.populate(stream, AREAS.type, AREAS.cols, areas_filter=areas_filter)

    for source in datasets:
        _logger.info("Importing %s from %s", source.name, source.file)
        with InputFile(config.data_dir / source.file, encoding=config.encoding).open() as stream:
            store.populate(
                stream,
                source.type,
                source.cols,
                areas_filter=areas_filter,
                measures_filter=measures_filter,
                years_filter=years_filter,
            )
    return store


def run(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    try:
        config = BethYwConfig.from_env(data_dir=args.data_dir)
        datasets = parse_datasets_arg(args.datasets)
        store = load_store(
            config,
            datasets,
            areas_filter=parse_areas_arg(args.areas),
            measures_filter=parse_measures_arg(args.measures),
            years_filter=parse_years_arg(args.years),
        )
    except BethYwError as exc:
        print(f"Error importing data: {exc}", file=sys.stderr)
        return 1

    if args.json_mode:
        print(store.to_json(indent=config.json_indent))
    else:
        print(store, end="")
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
