"""Tests for the Area model."""

from __future__ import annotations

import json

import pytest

from pybethyw.exceptions import BethYwInvalidArgumentError, BethYwNotFoundError
from pybethyw.models.area import Area
from pybethyw.models.measure import Measure


def _measure(codename: str, readings: dict[int, float], label: str = "Population") -> Measure:
    measure = Measure(codename, label)
    for year, value in readings.items():
        measure.set_value(year, value)
    return measure


class TestNames:
    @pytest.mark.parametrize("lang", ["eng", "ENG", "Cym", "fRa"])
    def test_set_then_get_lowercased(self, lang: str) -> None:
        area = Area("W06000023")
        area.set_name(lang, "Powys")
        assert area.get_name(lang.lower()) == "Powys"
        assert lang.lower() in area.names

    @pytest.mark.parametrize("lang", ["", "en", "engl", "e1g", "en ", "éng"])
    def test_invalid_language_codes_rejected(self, lang: str) -> None:
        area = Area("W06000023")
        with pytest.raises(BethYwInvalidArgumentError):
            area.set_name(lang, "Powys")
        assert area.names == {}

    def test_invalid_argument_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            Area("W06000023").set_name("english", "Powys")

    def test_missing_name_raises_not_found(self) -> None:
        area = Area("W06000023")
        area.set_name("eng", "Powys")
        with pytest.raises(BethYwNotFoundError, match="cym"):
            area.get_name("cym")

    def test_set_name_overwrites(self) -> None:
        area = Area("W06000023")
        area.set_name("eng", "Powys")
        area.set_name("eng", "Powys County")
        assert area.get_name("eng") == "Powys County"


class TestMeasures:
    def test_lookup_is_case_insensitive(self) -> None:
        area = Area("W06000023")
        area.set_measure("Pop", _measure("Pop", {2000: 1.0}))
        assert area.get_measure("POP").get_value(2000) == 1.0
        assert "pop" in area.measures

    def test_missing_measure_message_names_codename(self) -> None:
        with pytest.raises(BethYwNotFoundError, match="No measure found matching dens"):
            Area("W06000023").get_measure("dens")

    def test_set_measure_merges_with_incoming_precedence(self) -> None:
        area = Area("W06000023")
        area.set_measure("pop", _measure("pop", {2000: 1.0, 2001: 2.0}))
        area.set_measure("POP", _measure("pop", {2001: 20.0, 2002: 30.0}))
        assert area.get_measure("pop").readings == {2000: 1.0, 2001: 20.0, 2002: 30.0}
        assert area.size() == 1

    def test_set_measure_takes_incoming_label(self) -> None:
        area = Area("W06000023")
        area.set_measure("pop", _measure("pop", {2000: 1.0}, label="Old"))
        area.set_measure("pop", _measure("pop", {}, label="New"))
        assert area.get_measure("pop").label == "New"
        assert area.get_measure("pop").readings == {2000: 1.0}

    def test_set_measure_stores_a_copy(self) -> None:
        area = Area("W06000023")
        measure = _measure("pop", {2000: 1.0})
        area.set_measure("pop", measure)
        measure.set_value(2001, 2.0)
        assert area.get_measure("pop").size() == 1

    def test_size(self) -> None:
        area = Area("W06000023")
        assert area.size() == 0
        area.set_measure("pop", _measure("pop", {}))
        area.set_measure("dens", _measure("dens", {}))
        assert area.size() == 2
        assert len(area) == 2


class TestMerge:
    def test_names_and_measures_merge_key_by_key(self) -> None:
        incoming = Area("W06000023")
        incoming.set_name("eng", "Powys (new)")
        incoming.set_measure("pop", _measure("pop", {2001: 20.0}))

        existing = Area("W06000023")
        existing.set_name("eng", "Powys")
        existing.set_name("cym", "Powys")
        existing.set_measure("pop", _measure("pop", {2000: 1.0, 2001: 2.0}))
        existing.set_measure("dens", _measure("dens", {2000: 0.5}))

        incoming.merge(existing)

        assert incoming.names == {"eng": "Powys (new)", "cym": "Powys"}
        assert incoming.get_measure("pop").readings == {2000: 1.0, 2001: 20.0}
        assert incoming.get_measure("dens").readings == {2000: 0.5}

    def test_merge_with_self_is_idempotent(self) -> None:
        area = Area("W06000023")
        area.set_name("eng", "Powys")
        area.set_measure("pop", _measure("pop", {2000: 1.0}))
        before = area.model_copy(deep=True)
        area.merge(area)
        assert area == before


class TestEquality:
    def test_structural_equality(self) -> None:
        left = Area("W06000023")
        right = Area("W06000023")
        for area in (left, right):
            area.set_name("eng", "Powys")
            area.set_measure("pop", _measure("pop", {2000: 1.0}))
        assert left == right

    def test_code_difference_breaks_equality(self) -> None:
        assert Area("W06000023") != Area("W06000024")


class TestSerialization:
    def test_to_dict_shape(self) -> None:
        area = Area("W06000023")
        area.set_name("eng", "Powys")
        area.set_measure("pop", _measure("pop", {2015: 132000.0}))
        assert area.to_dict() == {"names": {"eng": "Powys"}, "measures": {"pop": {"2015": 132000.0}}}

    def test_empty_area_json(self) -> None:
        assert json.loads(Area("W06000023").to_json()) == {"names": {}, "measures": {}}

    def test_round_trip_through_json(self) -> None:
        area = Area("W06000023")
        area.set_name("eng", "Powys")
        area.set_name("cym", "Powys")
        area.set_measure("pop", _measure("pop", {2015: 132000.0, 2016: 132500.5}))
        area.set_measure("dens", _measure("dens", {2015: 25.5}))

        rebuilt = Area.from_dict("W06000023", json.loads(area.to_json()))

        assert rebuilt.names == area.names
        for codename, measure in area.measures.items():
            assert rebuilt.get_measure(codename).readings == measure.readings
