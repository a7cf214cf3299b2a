"""
CF / COARDS 数据集：按变量缓存坐标轴解析结果，提供 grid / struct / standard_name。
"""
from __future__ import annotations
from typing import Dict, List, Sequence

import numpy as np

from .config import STANDARD_NAME_ATTR
from .exceptions import UnresolvedReferenceError
from .ncdataset import NCDataset
from .resolver import resolve_axes
from .utils import default_subset
from .variable import NCVariable


class CFDataset(NCDataset):
    """
    在 NCDataset 基础上，按 CF 或 COARDS 约定自动找出变量的坐标变量。

    >>> ds = CFDataset("OS_M1_20081008_TS.nc")
    >>> voi = ds.standard_name("sea_water_temperature")[0]
    >>> s = ds.struct(voi)          # {"TIME": ..., "LAT": ..., "LON": ..., voi: ...}
    """

    def __init__(self, source, *, raw_format=None):
        super().__init__(source, raw_format=raw_format)
        # 每个变量一个槽位，首次访问时填入 NCVariable，之后不再失效
        self._ncvariables: Dict[str, NCVariable | None] = dict.fromkeys(self._variables)

    # ---------- 变量句柄 ----------
    def variable(self, name: str) -> NCVariable:
        v = self._ncvariables.get(name)
        if v is not None:
            return v
        if name not in self._ncvariables:
            raise UnresolvedReferenceError(f"变量 {name!r} 不存在于 {self.source}")

        v = NCVariable(self, name, resolve_axes(self, name))
        # 并发下可能重复解析，只保留第一个写入的结果
        if self._ncvariables.get(name) is None:
            self._ncvariables[name] = v
        return self._ncvariables[name]

    def axes(self, name: str) -> List[str]:
        """已解析的坐标变量名（CF 优先）"""
        return list(self.variable(name).axes)

    # ---------- 检索 ----------
    def grid(
        self,
        name: str,
        first: Sequence[int] | None = None,
        last: Sequence[int] | None = None,
        stride: Sequence[int] | None = None,
    ) -> Dict[str, np.ndarray]:
        """
        只返回坐标数据（不含变量本身），便于先按坐标确定裁剪范围再取数据。
        缺省参数 = 整个数组。
        """
        v = self.variable(name)
        first, last, stride = default_subset(self.size(name), first, last, stride)
        return v.grid(first, last, stride)

    def struct(
        self,
        name: str,
        first: Sequence[int] | None = None,
        last: Sequence[int] | None = None,
        stride: Sequence[int] | None = None,
    ) -> Dict[str, np.ndarray]:
        """坐标数据 + 变量数据，变量数据以变量名为键"""
        v = self.variable(name)
        first, last, stride = default_subset(self.size(name), first, last, stride)
        s = v.grid(first, last, stride)
        s[v.name] = v.data(first, last, stride)
        return s

    def standard_name(self, value: str) -> List[str]:
        """standard_name 属性与 value 完全相等（区分大小写）的变量名，按变量顺序"""
        matches = []
        for name in self._variables:
            sn = self.attribute(name, STANDARD_NAME_ATTR)
            if isinstance(sn, str) and sn == value:
                matches.append(name)
        return matches
