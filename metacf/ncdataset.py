"""
底层数据访问：打开本地文件 / HTTP / OpenDAP 数据源，
提供变量名、属性、维度、尺寸查询以及带步长的原始读取。
"""
from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple
from urllib.parse import urlparse

import numpy as np
import xarray as xr

from .config import (
    RawFormat,
    SourceKind,
    ENGINES,
    SUFFIX_FORMATS,
    OPENDAP_MARKERS,
    UNITS_ATTR,
    CALENDAR_ATTR,
)
from .exceptions import (
    RangeError,
    SourceUnavailableError,
    UnresolvedReferenceError,
    ValidationError,
)
from .utils import log, default_subset

# ────────────────────────────────────────────────────────────────────────
def source_kind(source: str) -> SourceKind:
    scheme = urlparse(source).scheme.lower()
    if scheme in {"dods", "dap2", "dap4"}:
        return SourceKind.OPENDAP
    if scheme in {"http", "https"}:
        if any(m in source for m in OPENDAP_MARKERS):
            return SourceKind.OPENDAP
        return SourceKind.HTTP
    return SourceKind.LOCAL


def infer_format(source: str) -> RawFormat:
    if source_kind(source) is not SourceKind.LOCAL:
        return RawFormat.NETCDF
    suffix = Path(source.rstrip("/")).suffix.lower()
    return SUFFIX_FORMATS.get(suffix, RawFormat.NETCDF)


def _open_raw(source: str, fmt: RawFormat) -> xr.Dataset:
    url = source
    # 普通 HTTP 文件走 netCDF-C 的 byte-range 读取
    if fmt is RawFormat.NETCDF and source_kind(source) is SourceKind.HTTP and "#mode=" not in source:
        url = f"{source}#mode=bytes"
    try:
        return xr.open_dataset(url, engine=ENGINES[fmt], decode_cf=False)
    except (OSError, ValueError, RuntimeError) as e:
        raise SourceUnavailableError(f"无法打开数据源 {source!r}: {e}") from e


def _check_subset(name: str, shape, first, last, stride):
    ndim = len(shape)
    for label, seq in (("first", first), ("last", last), ("stride", stride)):
        if len(seq) != ndim:
            raise RangeError(f"{name}: {label} 长度 {len(seq)} 与维数 {ndim} 不符")
    for i, (f, l, s, n) in enumerate(zip(first, last, stride, shape)):
        if s < 1:
            raise RangeError(f"{name}: 第 {i + 1} 维 stride={s} 必须 ≥ 1")
        if f < 1 or l > n or f > l:
            raise RangeError(f"{name}: 第 {i + 1} 维 [{f}, {l}] 超出范围 [1, {n}]")

# ────────────────────────────────────────────────────────────────────────
class NCDataset:
    """
    xarray 之上的原始访问层。

    source 可以是本地路径、HTTP URL、OpenDAP URL、已打开的 ``xr.Dataset``
    或另一个 NCDataset（直接复用其句柄，不重新打开）。
    索引约定：first/last 从 1 开始且包含端点。
    """

    def __init__(
        self,
        source: str | Path | xr.Dataset | "NCDataset",
        *,
        raw_format: RawFormat | str | None = None,
    ):
        if isinstance(source, NCDataset):
            self.source = source.source
            self._ds = source._ds
        elif isinstance(source, xr.Dataset):
            self.source = str(source.encoding.get("source", "<memory>"))
            self._ds = source
        else:
            self.source = str(source)
            fmt = RawFormat(raw_format) if raw_format else infer_format(self.source)
            self._ds = _open_raw(self.source, fmt)
            log.info("📂 已打开 %s (%s, %d 个变量)", self.source, fmt.value, len(self._ds.variables))
        self._variables: List[str] = [str(n) for n in self._ds.variables]

    # ---------- 元数据 ----------
    @property
    def variables(self) -> List[str]:
        return list(self._variables)

    def _var(self, name: str) -> xr.Variable:
        if name not in self._ds.variables:
            raise UnresolvedReferenceError(f"变量 {name!r} 不存在于 {self.source}")
        return self._ds.variables[name]

    def attributes(self, name: str | None = None) -> Dict[str, Any]:
        if name is None:
            return dict(self._ds.attrs)
        return dict(self._var(name).attrs)

    def attribute(self, name: str, key: str):
        return self._var(name).attrs.get(key)

    def dimensions(self, name: str) -> List[str]:
        return [str(d) for d in self._var(name).dims]

    def size(self, name: str) -> Tuple[int, ...]:
        return tuple(int(n) for n in self._var(name).shape)

    def dimension_axes(self, name: str) -> List[str]:
        """COARDS：每个维度找同名的一维变量，找不到记为空字符串"""
        out = []
        for dim in self._var(name).dims:
            cand = self._ds.variables.get(dim)
            out.append(str(dim) if cand is not None and cand.dims == (dim,) else "")
        return out

    # ---------- 读取 ----------
    def data(
        self,
        name: str,
        first: Sequence[int] | None = None,
        last: Sequence[int] | None = None,
        stride: Sequence[int] | None = None,
    ) -> np.ndarray:
        var = self._var(name)
        shape = self.size(name)
        first, last, stride = default_subset(shape, first, last, stride)
        _check_subset(name, shape, first, last, stride)

        index = tuple(slice(f - 1, l, s) for f, l, s in zip(first, last, stride))
        return np.asarray(var[index].values if index else var.values)

    def time(self, name: str, values: Sequence | np.ndarray | None = None) -> np.ndarray:
        """按变量的 units/calendar 把原始时间数值转成 datetime64"""
        attrs = self.attributes(name)
        units = attrs.get(UNITS_ATTR)
        if units is None:
            raise ValidationError(f"{name!r} 缺少 units 属性，无法解析时间")
        raw = self.data(name) if values is None else np.asarray(values)

        time_attrs = {UNITS_ATTR: units}
        if attrs.get(CALENDAR_ATTR):
            time_attrs[CALENDAR_ATTR] = attrs[CALENDAR_ATTR]
        dims = tuple(f"dim_{i}" for i in range(raw.ndim))
        tmp = xr.Dataset({name: xr.Variable(dims, raw, time_attrs)})
        return xr.decode_cf(tmp)[name].values

    # ---------- 生命周期 ----------
    def close(self):
        self._ds.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def __repr__(self):
        return f"<{type(self).__name__} {self.source!r} ({len(self._variables)} variables)>"
