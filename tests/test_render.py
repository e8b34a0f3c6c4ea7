from __future__ import annotations

from pybethyw.models.area import Area
from pybethyw.models.measure import Measure
from pybethyw.render import render_area, render_measure, render_store
from pybethyw.state.store import AreaStore


def _population() -> Measure:
    measure = Measure("pop", "Population")
    measure.set_value(2016, 110.0)
    measure.set_value(2015, 100.0)
    return measure


def test_measure_table_is_right_aligned_and_chronological() -> None:
    assert render_measure(_population()) == (
        "Population (pop)\n"
        "      2015       2016    Average     Diff.   % Diff.\n"
        "100.000000 110.000000 105.000000 10.000000 10.000000\n"
    )


def test_measure_without_readings() -> None:
    assert str(Measure("dens", "Population density")) == "Population density (dens)\n<no data>\n"


def test_area_with_both_names_and_sorted_measures() -> None:
    area = Area("W06000023")
    area.set_name("eng", "Powys")
    area.set_name("cym", "Powys")
    area.set_measure("pop", _population())
    area.set_measure("dens", Measure("dens", "Population density"))

    text = render_area(area)

    assert text.startswith("Powys / Powys (W06000023)\n")
    assert text.index("(dens)") < text.index("(pop)")


def test_area_with_single_name() -> None:
    area = Area("W06000011")
    area.set_name("cym", "Abertawe")
    assert render_area(area) == "Abertawe (W06000011)\n<no measures>\n"


def test_unnamed_area() -> None:
    assert str(Area("W06000099")) == "Unnamed (W06000099)\n<no measures>\n"


def test_store_renders_areas_in_code_order() -> None:
    store = AreaStore()
    store.set_area("W06000023", Area("W06000023"))
    store.set_area("W06000001", Area("W06000001"))
    text = render_store(store)
    assert text.index("W06000001") < text.index("W06000023")
    assert str(store) == text


def test_empty_store_renders_nothing() -> None:
    assert str(AreaStore()) == ""
