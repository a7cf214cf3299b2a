from enum import Enum
import os
from pathlib import Path

# ─── 数据源枚举 ────────────────────────────────────────────────────────────────
class RawFormat(str, Enum):
    NETCDF = "netcdf"
    HDF    = "hdf"
    ZARR   = "zarr"
    GRIB   = "grib"

class SourceKind(str, Enum):
    LOCAL   = "local"
    HTTP    = "http"
    OPENDAP = "opendap"

# ─── 格式 ➜ xarray engine ───────────────────────────────────────────────────────
ENGINES = {
    RawFormat.NETCDF: "netcdf4",
    RawFormat.HDF:    "h5netcdf",
    RawFormat.ZARR:   "zarr",
    RawFormat.GRIB:   "cfgrib",
}

SUFFIX_FORMATS = {
    ".nc":   RawFormat.NETCDF,
    ".nc4":  RawFormat.NETCDF,
    ".cdf":  RawFormat.NETCDF,
    ".h5":   RawFormat.HDF,
    ".hdf":  RawFormat.HDF,
    ".he5":  RawFormat.HDF,
    ".zarr": RawFormat.ZARR,
    ".grb":  RawFormat.GRIB,
    ".grib": RawFormat.GRIB,
    ".grb2": RawFormat.GRIB,
}

# OpenDAP 服务常见路径片段
OPENDAP_MARKERS = ("/dodsC/", "/opendap/", "nph-dods", "/dap/")

# ─── CF / COARDS 属性名 ─────────────────────────────────────────────────────────
COORDINATES_ATTR   = "coordinates"
STANDARD_NAME_ATTR = "standard_name"
UNITS_ATTR         = "units"
CALENDAR_ATTR      = "calendar"

# ─── 数据源登记表 ───────────────────────────────────────────────────────────────
CATALOG_PATH = Path(os.environ.get("METACF_CATALOG", Path.home() / ".metacf_catalog.json"))
