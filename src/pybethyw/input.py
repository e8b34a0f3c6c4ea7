"""Opening dataset files as text streams."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO

from pybethyw.exceptions import BethYwStreamError

_logger = logging.getLogger(__name__)


class InputFile:
    """A dataset file on disk.

    Example::

        with InputFile("datasets/areas.csv").open() as stream:
            store.populate(stream, AREAS.type, AREAS.cols)
    """

    def __init__(self, path: str | Path, *, encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding

    def __repr__(self) -> str:
        return f"InputFile({str(self.path)!r})"

    def open(self) -> IO[str]:
        """Open the file for reading.

        Raises :class:`BethYwStreamError` if it cannot be opened.
        """
        _logger.debug("Opening %s", self.path)
        try:
            # newline="" lets the csv module handle line endings.
            return self.path.open("r", encoding=self.encoding, newline="")
        except OSError as exc:
            raise BethYwStreamError(f"Failed to open file {self.path}: {exc.strerror or exc}") from exc
