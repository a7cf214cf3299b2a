"""
坐标轴推断：先 CF（coordinates 属性），再 COARDS（维度名 = 变量名）。
"""
from __future__ import annotations
from typing import List

from .config import COORDINATES_ATTR
from .utils import log


def split_coordinates(value: str) -> List[str]:
    """按任意空白切分 coordinates 属性，保留原始顺序与大小写"""
    return value.split()


def resolve_axes(dataset, name: str) -> List[str]:
    """
    返回 ``name`` 的坐标变量名列表，无法确定时返回空列表。

    • 有 coordinates 属性 → 原样切分，不校验变量是否存在（读取时才报错）
    • 否则按 COARDS 取每个维度的同名变量；只要有一个维度缺失，整体作废
    """
    coordinates = dataset.attribute(name, COORDINATES_ATTR)
    # 非字符串（如数值数组）按缺失处理
    if isinstance(coordinates, str) and coordinates:
        axes = split_coordinates(coordinates)
        log.debug("%s: CF coordinates → %s", name, axes)
        return axes

    axes = list(dataset.dimension_axes(name))
    if any(not a for a in axes):
        log.debug("%s: COARDS 维度不完整 %s，放弃坐标轴", name, axes)
        return []
    log.debug("%s: COARDS → %s", name, axes)
    return axes
