"""Tests for the command line interface."""

from __future__ import annotations

import json

from metacf import CFDataset
from metacf.cli import main


def test_ls_and_info(catalog_path, capsys) -> None:
    assert main(["register", "m1", "/data/m1.nc", "--desc", "M1"]) == 0
    capsys.readouterr()

    assert main(["ls"]) == 0
    assert capsys.readouterr().out.split() == ["m1"]

    assert main(["info", "m1"]) == 0
    assert json.loads(capsys.readouterr().out)["description"] == "M1"


def test_struct_command(cf_xr, capsys, monkeypatch) -> None:
    monkeypatch.setattr("metacf.cli.open_dataset", lambda ref: CFDataset(cf_xr))

    assert main(["struct", "m1", "TEMP", "--first", "1", "--last", "3", "--stride", "2"]) == 0

    out = json.loads(capsys.readouterr().out)
    assert out["TEMP"] == [10.0, 12.0]
    assert set(out) == {"TIME", "LAT", "LON", "TEMP"}


def test_axes_and_stdname_commands(cf_xr, capsys, monkeypatch) -> None:
    monkeypatch.setattr("metacf.cli.open_dataset", lambda ref: CFDataset(cf_xr))

    main(["axes", "m1", "TEMP"])
    assert json.loads(capsys.readouterr().out) == ["TIME", "LAT", "LON"]

    main(["stdname", "m1", "latitude"])
    assert json.loads(capsys.readouterr().out) == ["LAT"]


def test_errors_are_reported(catalog_path, tmp_path, capsys) -> None:
    assert main(["vars", str(tmp_path / "missing.nc")]) == 1
    assert "metacf:" in capsys.readouterr().err

    assert main(["rm", "nope"]) == 1
