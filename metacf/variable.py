from __future__ import annotations
from typing import Dict, Sequence, Tuple

import numpy as np


class NCVariable:
    """单个变量 + 已解析好的坐标轴名"""

    def __init__(self, dataset, name: str, axes: Sequence[str]):
        self.dataset = dataset
        self.name = name
        self.axes: Tuple[str, ...] = tuple(axes)

    @property
    def size(self) -> Tuple[int, ...]:
        return self.dataset.size(self.name)

    @property
    def attributes(self) -> Dict:
        return self.dataset.attributes(self.name)

    def data(self, first=None, last=None, stride=None) -> np.ndarray:
        return self.dataset.data(self.name, first, last, stride)

    def grid(self, first=None, last=None, stride=None) -> Dict[str, np.ndarray]:
        # 每次都重新读取，不缓存
        return {
            ax: self.dataset.data(ax, *self._project(ax, (first, last, stride)))
            for ax in self.axes
        }

    def _project(self, axis: str, params):
        """
        坐标变量的维度是本变量维度的子集时（COARDS 一维坐标），
        按维度名取出对应的 first/last/stride；否则原样传递。
        """
        dims = self.dataset.dimensions(self.name)
        axis_dims = self.dataset.dimensions(axis)
        if axis_dims == dims or not set(axis_dims) <= set(dims):
            return params
        if any(p is not None and len(p) != len(dims) for p in params):
            return params
        idx = [dims.index(d) for d in axis_dims]
        return tuple(None if p is None else tuple(p[i] for i in idx) for p in params)

    def __repr__(self):
        return f"<NCVariable {self.name!r} axes={list(self.axes)}>"
