"""Shared helpers for the population routines."""

from __future__ import annotations

import csv
from collections.abc import Iterator
from typing import IO

from pybethyw.exceptions import BethYwStreamError


def ensure_readable(stream: IO[str]) -> None:
    """Raise :class:`BethYwStreamError` unless *stream* can be read."""
    if stream is None:
        raise BethYwStreamError("No input stream given")
    if getattr(stream, "closed", False):
        raise BethYwStreamError("Input stream is closed")
    readable = getattr(stream, "readable", None)
    try:
        ok = readable() if callable(readable) else hasattr(stream, "read")
    except ValueError as exc:
        raise BethYwStreamError(f"Input stream is not usable: {exc}") from exc
    if not ok:
        raise BethYwStreamError("Input stream is not readable")


def iter_csv_rows(stream: IO[str]) -> Iterator[list[str]]:
    """Yield stripped cells per line, skipping blank lines."""
    try:
        for row in csv.reader(stream):
            cells = [cell.strip() for cell in row]
            if not any(cells):
                continue
            yield cells
    except UnicodeDecodeError as exc:
        raise BethYwStreamError(f"Input stream is not valid text: {exc}") from exc
    except OSError as exc:
        raise BethYwStreamError(f"Failed reading input stream: {exc}") from exc
