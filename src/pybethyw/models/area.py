"""Area data model: one local authority with its names and measures."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from pybethyw._constants import LANG_CODE_PATTERN
from pybethyw.exceptions import BethYwInvalidArgumentError, BethYwNotFoundError
from pybethyw.models._base import BethYwBaseModel, dump_json
from pybethyw.models.measure import Measure


class Area(BethYwBaseModel):
    """A local authority area.

    Parameters
    ----------
    code : str
        Local authority code, e.g. ``"W06000023"``.  Fixed at construction.
    names : dict[str, str]
        Display name per lowercase ISO 639-3 language code (``eng``, ``cym``).
    measures : dict[str, Measure]
        Measures keyed by lowercase codename.  The Area owns these objects;
        :meth:`set_measure` stores a copy of what it is given.
    """

    code: str = Field(frozen=True)
    names: dict[str, str] = Field(default_factory=dict)
    measures: dict[str, Measure] = Field(default_factory=dict)

    def __init__(self, code: str, **data: Any) -> None:
        super().__init__(code=code, **data)

    @classmethod
    def from_dict(cls, code: str, data: dict[str, Any]) -> Area:
        """Rebuild an Area from its :meth:`to_dict` form."""
        area = cls(code)
        for lang, name in data.get("names", {}).items():
            area.set_name(lang, name)
        for codename, readings in data.get("measures", {}).items():
            area.set_measure(codename, Measure(codename, readings=readings))
        return area

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Area):
            return NotImplemented
        return self.code == other.code and self.names == other.names and self.measures == other.measures

    def __str__(self) -> str:
        from pybethyw.render import render_area

        return render_area(self)

    # ------------------------------------------------------------------
    # Names
    # ------------------------------------------------------------------

    def get_name(self, lang: str) -> str:
        key = lang.lower()
        try:
            return self.names[key]
        except KeyError:
            raise BethYwNotFoundError(f"No name found for language {key}", key=key) from None

    def set_name(self, lang: str, name: str) -> None:
        """Store *name* under the lowercased three letter code *lang*.

        Raises :class:`BethYwInvalidArgumentError` unless *lang* is exactly
        three alphabetic characters.
        """
        if not isinstance(lang, str) or not LANG_CODE_PATTERN.fullmatch(lang):
            raise BethYwInvalidArgumentError(
                f"Area.set_name: language code must be three alphabetical letters only, got {lang!r}"
            )
        self.names[lang.lower()] = name

    # ------------------------------------------------------------------
    # Measures
    # ------------------------------------------------------------------

    def get_measure(self, codename: str) -> Measure:
        key = codename.lower()
        try:
            return self.measures[key]
        except KeyError:
            raise BethYwNotFoundError(f"No measure found matching {codename}", key=key) from None

    def set_measure(self, codename: str, measure: Measure) -> None:
        """Insert *measure*, merging with any measure stored under *codename*.

        Readings in *measure* win over those already stored for the same
        year; stored years missing from *measure* are kept.
        """
        key = codename.lower()
        incoming = measure.model_copy(deep=True)
        existing = self.measures.get(key)
        if existing is not None:
            incoming.merge(existing)
        self.measures[key] = incoming

    def size(self) -> int:
        return len(self.measures)

    def __len__(self) -> int:
        return len(self.measures)

    def merge(self, other: Area) -> None:
        """Fill gaps in this area from *other*; entries here take precedence."""
        for lang, name in other.names.items():
            self.names.setdefault(lang, name)
        for key, measure in other.measures.items():
            mine = self.measures.get(key)
            if mine is None:
                self.measures[key] = measure.model_copy(deep=True)
            else:
                mine.merge(measure)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "names": dict(sorted(self.names.items())),
            "measures": {key: self.measures[key].to_dict() for key in sorted(self.measures)},
        }

    def to_json(self, *, indent: int | None = None) -> str:
        return dump_json(self.to_dict(), indent=indent)
