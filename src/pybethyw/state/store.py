"""In-memory area store.

This is the only component that registers Areas; ingestion routines build
Area objects and hand them to :meth:`AreaStore.set_area`, which merges them
with whatever is already stored.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import IO, TYPE_CHECKING, Any

from pybethyw.exceptions import BethYwNotFoundError
from pybethyw.models._base import dump_json
from pybethyw.models.area import Area

if TYPE_CHECKING:
    from pybethyw.ingestion.columns import ColumnMapping, SourceDataType


class AreaStore:
    """Registry of :class:`Area` objects keyed by local authority code.

    Merging is deterministic: an Area inserted under an existing code wins
    on every name, measure and reading it carries, and the previously
    stored Area fills the gaps.
    """

    def __init__(self) -> None:
        self._areas: dict[str, Area] = {}

    def __len__(self) -> int:
        return len(self._areas)

    def __contains__(self, code: object) -> bool:
        return code in self._areas

    def __iter__(self) -> Iterator[str]:
        """Iterate over local authority codes in sorted order."""
        return iter(sorted(self._areas))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AreaStore):
            return NotImplemented
        return self._areas == other._areas

    def __str__(self) -> str:
        from pybethyw.render import render_store

        return render_store(self)

    def size(self) -> int:
        return len(self._areas)

    def set_area(self, code: str, area: Area) -> None:
        """Insert a copy of *area*, merging with any Area stored under *code*."""
        incoming = area.model_copy(deep=True)
        existing = self._areas.get(code)
        if existing is not None:
            incoming.merge(existing)
        self._areas[code] = incoming

    def get_area(self, code: str) -> Area:
        try:
            return self._areas[code]
        except KeyError:
            raise BethYwNotFoundError(f"No area found matching {code}", key=code) from None

    def areas(self) -> list[Area]:
        return [self._areas[code] for code in self]

    def populate(
        self,
        stream: IO[str],
        data_type: SourceDataType,
        cols: ColumnMapping,
        *,
        areas_filter: Iterable[str] | None = None,
        measures_filter: Iterable[str] | None = None,
        years_filter: tuple[int, int] | None = None,
    ) -> None:
        """Import *stream* into this store.  See :func:`pybethyw.ingestion.dispatch.populate`."""
        # Import lazily to avoid coupling the store back into ingestion.
        from pybethyw.ingestion.dispatch import populate

        populate(
            self,
            stream,
            data_type,
            cols,
            areas_filter=areas_filter,
            measures_filter=measures_filter,
            years_filter=years_filter,
        )

    def to_dict(self) -> dict[str, Any]:
        return {code: self._areas[code].to_dict() for code in self}

    def to_json(self, *, indent: int | None = None) -> str:
        return dump_json(self.to_dict(), indent=indent)
