"""Tests for the source catalog."""

from __future__ import annotations

import json

import pytest

from metacf.catalog import list_sources, register_source, remove_source, show_source_info
from metacf.exceptions import ValidationError


def test_register_and_show(catalog_path) -> None:
    entry = register_source("m1", "/data/m1.nc", description="M1 mooring", raw_format="netcdf")

    assert list_sources() == ["m1"]
    assert show_source_info("m1") == entry
    assert entry["format"] == "netcdf"
    assert json.loads(catalog_path.read_text())["m1"]["source"] == "/data/m1.nc"


def test_register_twice_requires_overwrite(catalog_path) -> None:
    register_source("m1", "/data/a.nc")

    with pytest.raises(ValidationError):
        register_source("m1", "/data/b.nc")

    register_source("m1", "/data/b.nc", overwrite=True)
    assert show_source_info("m1")["source"] == "/data/b.nc"


def test_unknown_source_info_is_empty(catalog_path) -> None:
    assert show_source_info("nope") == {}


def test_remove_source(catalog_path) -> None:
    register_source("m1", "/data/m1.nc")
    remove_source("m1")

    assert list_sources() == []
    with pytest.raises(ValidationError):
        remove_source("m1")
