"""
打开数据集（登记名或路径 / URL），以及把 grid / struct 结果转成 JSON。
"""
from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Mapping

import numpy as np
import pandas as pd

from .catalog import show_source_info
from .cfdataset import CFDataset
from .config import RawFormat
from .exceptions import ValidationError

# ────────────────────────────────────────────────────────────────────────
def open_dataset(ref: str | Path, *, raw_format: RawFormat | str | None = None) -> CFDataset:
    """ref 先按登记名查 catalog，查不到就当作路径 / URL 直接打开"""
    info = show_source_info(str(ref))
    if info:
        return CFDataset(info["source"], raw_format=raw_format or info.get("format"))
    return CFDataset(ref, raw_format=raw_format)

# ────────────────────────────────────────────────────────────────────────
def struct_to_json(
    s: Mapping[str, np.ndarray], *,
    orient: str = "ndarray",
) -> Any:
    orient = orient.lower()

    # ----- 1) ndarray --------------------------------------------------
    if orient == "ndarray":
        return {k: _array_to_list(v) for k, v in s.items()}

    # ----- 2) records / split -----------------------------------------
    if any(np.ndim(v) != 1 for v in s.values()) or len({len(v) for v in s.values()}) > 1:
        raise ValidationError(f"orient={orient!r} 要求所有字段为等长一维数组")
    df = pd.DataFrame({k: np.asarray(v) for k, v in s.items()})
    return json.loads(df.to_json(orient=orient, date_unit="ms", date_format="iso"))

# ======================================================================
#                         —— 内部工具函数 ——
# ======================================================================
def _array_to_list(arr) -> Any:
    arr = np.asarray(arr)
    if np.issubdtype(arr.dtype, np.datetime64):
        return arr.astype("datetime64[ms]").astype(str).tolist()
    if arr.dtype.kind == "S":
        return np.char.decode(arr, "utf-8").tolist()
    return arr.tolist()

