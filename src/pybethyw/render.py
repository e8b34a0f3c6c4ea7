"""Human readable text rendering of areas and measures.

Measure blocks are laid out as a right-aligned table::

    Population (pop)
          2015       2016    Average     Diff.   % Diff.
    100.000000 110.000000 105.000000 10.000000 10.000000
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pybethyw._constants import LANG_ENGLISH, LANG_WELSH, NO_DATA, NO_MEASURES, UNNAMED

if TYPE_CHECKING:
    from pybethyw.models.area import Area
    from pybethyw.models.measure import Measure
    from pybethyw.state.store import AreaStore

_SUMMARY_HEADERS = ("Average", "Diff.", "% Diff.")


def _fmt(value: float) -> str:
    return f"{value:.6f}"


def render_measure(measure: Measure) -> str:
    lines = [f"{measure.label} ({measure.codename})"]
    if not measure.readings:
        lines.append(NO_DATA)
        return "\n".join(lines) + "\n"

    readings = measure.sorted_readings()
    headers = [str(year) for year, _ in readings] + list(_SUMMARY_HEADERS)
    values = [_fmt(value) for _, value in readings] + [
        _fmt(measure.get_average()),
        _fmt(measure.get_difference()),
        _fmt(measure.get_difference_as_percentage()),
    ]
    widths = [max(len(header), len(value)) for header, value in zip(headers, values, strict=True)]
    lines.append(" ".join(header.rjust(width) for header, width in zip(headers, widths, strict=True)))
    lines.append(" ".join(value.rjust(width) for value, width in zip(values, widths, strict=True)))
    return "\n".join(lines) + "\n"


def _area_title(area: Area) -> str:
    eng = area.names.get(LANG_ENGLISH)
    cym = area.names.get(LANG_WELSH)
    if eng and cym:
        title = f"{eng} / {cym}"
    elif eng or cym:
        title = eng or cym or ""
    elif area.names:
        # Neither English nor Welsh: use the first stored language.
        title = area.names[sorted(area.names)[0]]
    else:
        title = UNNAMED
    return f"{title} ({area.code})"


def render_area(area: Area) -> str:
    parts = [_area_title(area) + "\n"]
    if not area.measures:
        parts.append(NO_MEASURES + "\n")
        return "".join(parts)
    for key in sorted(area.measures):
        parts.append(render_measure(area.measures[key]))
        parts.append("\n")
    return "".join(parts)


def render_store(store: AreaStore) -> str:
    return "\n".join(render_area(store.get_area(code)) for code in store)
