from __future__ import annotations

import json

import pytest

from pybethyw.exceptions import BethYwNotFoundError
from pybethyw.models.area import Area
from pybethyw.models.measure import Measure
from pybethyw.state.store import AreaStore


def _area(code: str, names: dict[str, str], readings: dict[int, float] | None = None) -> Area:
    area = Area(code)
    for lang, name in names.items():
        area.set_name(lang, name)
    if readings is not None:
        measure = Measure("pop", "Population")
        for year, value in readings.items():
            measure.set_value(year, value)
        area.set_measure("pop", measure)
    return area


def test_empty_store_serializes_to_empty_object() -> None:
    store = AreaStore()
    assert store.to_json() == "{}"
    assert store.size() == 0


def test_get_missing_area_raises_not_found() -> None:
    with pytest.raises(BethYwNotFoundError, match="W06000099"):
        AreaStore().get_area("W06000099")


def test_set_area_merges_names_and_readings() -> None:
    store = AreaStore()
    store.set_area("W06000023", _area("W06000023", {"eng": "Powys", "cym": "Powys"}))
    store.set_area("W06000023", _area("W06000023", {"eng": "Powys County"}, {2015: 1.0}))
    store.set_area("W06000023", _area("W06000023", {}, {2015: 2.0, 2016: 3.0}))

    area = store.get_area("W06000023")
    assert store.size() == 1
    assert area.names == {"eng": "Powys County", "cym": "Powys"}
    assert area.get_measure("pop").readings == {2015: 2.0, 2016: 3.0}


def test_set_area_is_idempotent() -> None:
    store = AreaStore()
    area = _area("W06000023", {"eng": "Powys"}, {2015: 1.0})
    store.set_area("W06000023", area)
    store.set_area("W06000023", area)
    assert store.get_area("W06000023") == area


def test_iteration_is_in_code_order() -> None:
    store = AreaStore()
    for code in ("W06000023", "W06000001", "W06000011"):
        store.set_area(code, Area(code))
    assert list(store) == ["W06000001", "W06000011", "W06000023"]
    assert "W06000011" in store
    assert len(store) == 3


def test_to_json_shape() -> None:
    store = AreaStore()
    store.set_area("W06000023", _area("W06000023", {"eng": "Powys"}, {2015: 1.5}))
    store.set_area("W06000001", _area("W06000001", {"eng": "Isle of Anglesey"}))

    document = json.loads(store.to_json())

    assert list(document) == ["W06000001", "W06000023"]
    assert document["W06000023"] == {"names": {"eng": "Powys"}, "measures": {"pop": {"2015": 1.5}}}
    assert document["W06000001"] == {"names": {"eng": "Isle of Anglesey"}, "measures": {}}
