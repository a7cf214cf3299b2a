"""Shared fixtures: small in-memory datasets following CF and COARDS conventions."""

from __future__ import annotations

import numpy as np
import pytest
import xarray as xr

from metacf import CFDataset


@pytest.fixture
def cf_xr() -> xr.Dataset:
    """Time series whose axes are declared through the CF coordinates attribute."""
    n = 10
    return xr.Dataset(
        {
            "TEMP": ("obs", np.linspace(10.0, 19.0, n), {
                "coordinates": "TIME LAT LON",
                "standard_name": "sea_water_temperature",
            }),
            "PSAL": ("obs", np.full(n, 33.5), {
                "coordinates": "TIME\tLAT  LON",
                "standard_name": "sea_water_salinity",
            }),
            "TEMP2": ("obs", np.arange(n, dtype="f8"), {
                "coordinates": "LON LAT TIME",
                "standard_name": "sea_water_temperature",
            }),
            "BAD": ("obs", np.zeros(n), {"coordinates": "TIME MISSING"}),
            "TIME": ("obs", np.arange(n, dtype="f8"), {
                "units": "days since 2008-10-08",
                "standard_name": "time",
            }),
            "LAT": ("obs", np.full(n, 36.75), {"standard_name": "latitude"}),
            "LON": ("obs", np.full(n, -122.03), {"standard_name": "longitude"}),
        },
        attrs={"Conventions": "CF-1.4", "title": "M1 mooring"},
    )


@pytest.fixture
def coards_xr() -> xr.Dataset:
    """Gridded fields described only by dimension-named coordinate variables."""
    rng = np.random.default_rng(0)
    return xr.Dataset(
        {
            "T": (("time", "lat", "lon"), rng.random((4, 3, 5))),
            "SAL": (("depth", "lon"), rng.random((2, 5))),
        },
        coords={
            "time": ("time", np.arange(4, dtype="f8"), {"units": "hours since 2025-07-24"}),
            "lat": ("lat", [0.0, 1.5, 3.0]),
            "lon": ("lon", [10.0, 20.0, 30.0, 40.0, 50.0]),
        },
    )


@pytest.fixture
def cf_ds(cf_xr) -> CFDataset:
    return CFDataset(cf_xr)


@pytest.fixture
def coards_ds(coards_xr) -> CFDataset:
    return CFDataset(coards_xr)


@pytest.fixture
def catalog_path(tmp_path, monkeypatch):
    """Point the source catalog at a temporary file."""
    path = tmp_path / "catalog.json"
    monkeypatch.setattr("metacf.utils.CATALOG_PATH", path)
    return path


@pytest.fixture
def cf_file(tmp_path, cf_xr):
    """The CF time series written to a real netCDF file."""
    pytest.importorskip("netCDF4")
    path = tmp_path / "OS_M1_TS.nc"
    cf_xr.to_netcdf(path, engine="netcdf4")
    return path


@pytest.fixture
def coards_file(tmp_path, coards_xr):
    """The COARDS grid written to a real netCDF file."""
    pytest.importorskip("netCDF4")
    path = tmp_path / "grid.nc"
    coards_xr.to_netcdf(path, engine="netcdf4")
    return path
