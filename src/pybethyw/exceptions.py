"""Custom exception hierarchy for pybethyw."""

from __future__ import annotations


class BethYwError(Exception):
    """Base exception for all pybethyw errors."""


class BethYwNotFoundError(BethYwError, KeyError):
    """A requested name, measure, area, year or dataset is not stored."""

    def __init__(self, message: str, *, key: object = None) -> None:
        self.key = key
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class BethYwInvalidArgumentError(BethYwError, ValueError):
    """An argument failed validation (e.g. a malformed language code)."""


class BethYwStructuralError(BethYwError):
    """Source data or its column mapping does not have the expected shape.

    Raised when a column mapping lacks fields required by a source format,
    when an unknown source data type is requested, or when a file is
    malformed beyond what the parser can locate fields in.
    """


class BethYwStreamError(BethYwError):
    """Input stream is closed, unreadable or could not be opened."""


class BethYwValueParseError(BethYwError, ValueError):
    """A field expected to hold a number or a year could not be parsed."""

    def __init__(self, message: str, *, value: object = None) -> None:
        self.value = value
        super().__init__(message)
