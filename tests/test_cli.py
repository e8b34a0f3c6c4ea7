from __future__ import annotations

import json
from pathlib import Path

import pytest

from pybethyw.cli import (
    load_store,
    parse_areas_arg,
    parse_datasets_arg,
    parse_measures_arg,
    parse_years_arg,
    run,
)
from pybethyw.config import BethYwConfig
from pybethyw.datasets import COMPLETE_POP, DATASETS, POPDEN
from pybethyw.exceptions import BethYwInvalidArgumentError, BethYwStreamError


def _write_datasets(directory: Path) -> None:
    (directory / "areas.csv").write_text(
        "Local Authority Code,Name (eng),Name (cym)\n"
        "W06000023,Powys,Powys\n"
        "W06000011,Swansea,Abertawe\n",
        encoding="utf-8",
    )
    (directory / COMPLETE_POP.file).write_text(
        "AuthorityCode,2019,2020\nW06000023,100,110\nW06000011,200,\n",
        encoding="utf-8",
    )
    (directory / POPDEN.file).write_text(
        json.dumps(
            {
                "value": [
                    {
                        "Localauthority_Code": "W06000023",
                        "Localauthority_ItemName_ENG": "Powys",
                        "Measure_Code": "Hectare",
                        "Measure_ItemName_ENG": "Area",
                        "Year_Code": "2020",
                        "Data": "519500.5",
                    }
                ]
            }
        ),
        encoding="utf-8",
    )


class TestArgumentParsing:
    def test_datasets_default_to_all(self) -> None:
        assert parse_datasets_arg(None) == list(DATASETS.values())
        assert parse_datasets_arg(["popden,all"]) == list(DATASETS.values())

    def test_datasets_by_code(self) -> None:
        assert [source.code for source in parse_datasets_arg(["popden", "complete-pop"])] == [
            "popden",
            "complete-pop",
        ]

    def test_unknown_dataset(self) -> None:
        with pytest.raises(BethYwInvalidArgumentError, match="nope"):
            parse_datasets_arg(["nope"])

    def test_areas(self) -> None:
        assert parse_areas_arg(["W06000023,W06000011"]) == {"W06000023", "W06000011"}
        assert parse_areas_arg(["W06000023", "ALL"]) == frozenset()
        assert parse_areas_arg(None) == frozenset()

    def test_measures_lowercased(self) -> None:
        assert parse_measures_arg(["Pop,DENS"]) == {"pop", "dens"}
        assert parse_measures_arg(["all"]) == frozenset()

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, (0, 0)),
            ("0", (0, 0)),
            ("0-0", (0, 0)),
            ("2010", (2010, 2010)),
            ("2010-2015", (2010, 2015)),
        ],
    )
    def test_years(self, value: str | None, expected: tuple[int, int]) -> None:
        assert parse_years_arg(value) == expected

    @pytest.mark.parametrize("value", ["20", "2015-2010", "abc", "2010-2012-2014", "2010-"])
    def test_invalid_years(self, value: str) -> None:
        with pytest.raises(BethYwInvalidArgumentError):
            parse_years_arg(value)


def test_load_store_applies_filters(tmp_path: Path) -> None:
    _write_datasets(tmp_path)
    config = BethYwConfig(data_dir=tmp_path)

    store = load_store(config, [COMPLETE_POP], areas_filter=frozenset({"W06000023"}), years_filter=(2020, 2020))

    assert list(store) == ["W06000023"]
    area = store.get_area("W06000023")
    assert area.get_name("cym") == "Powys"
    assert area.get_measure("pop").readings == {2020: 110.0}


def test_load_store_missing_file(tmp_path: Path) -> None:
    with pytest.raises(BethYwStreamError):
        load_store(BethYwConfig(data_dir=tmp_path), [])


def test_run_json(tmp_path: Path, capsys) -> None:
    _write_datasets(tmp_path)

    status = run(["--dir", str(tmp_path), "-d", "popden,complete-pop", "-a", "W06000023", "--json"])

    assert status == 0
    document = json.loads(capsys.readouterr().out)
    assert document == {
        "W06000023": {
            "names": {"cym": "Powys", "eng": "Powys"},
            "measures": {
                "hectare": {"2020": 519500.5},
                "pop": {"2019": 100.0, "2020": 110.0},
            },
        }
    }


def test_run_text(tmp_path: Path, capsys) -> None:
    _write_datasets(tmp_path)

    status = run(["--dir", str(tmp_path), "-d", "complete-pop", "-m", "pop"])

    out = capsys.readouterr().out
    assert status == 0
    assert "Powys / Powys (W06000023)" in out
    assert "Swansea / Abertawe (W06000011)" in out
    assert "Population (pop)" in out


def test_run_reports_errors(tmp_path: Path, capsys) -> None:
    status = run(["--dir", str(tmp_path), "-d", "popden"])

    assert status == 1
    assert "Error importing data" in capsys.readouterr().err


def test_run_reports_undecodable_file(tmp_path: Path, capsys) -> None:
    _write_datasets(tmp_path)
    (tmp_path / "areas.csv").write_bytes(b"Local Authority Code,Name (eng),Name (cym)\nW06000023,Pow\xffys,Powys\n")

    status = run(["--dir", str(tmp_path), "-d", "complete-pop"])

    assert status == 1
    assert "not valid text" in capsys.readouterr().err
