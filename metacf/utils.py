from __future__ import annotations
import logging
import json
from datetime import datetime, timezone, timedelta
from typing import Sequence, Tuple

from .config import CATALOG_PATH

log = logging.getLogger("metacf")

def configure_logging(level: int = logging.INFO):
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(message)s",
    )

def load_catalog():
    if CATALOG_PATH.exists():
        return json.loads(CATALOG_PATH.read_text())
    return {}

def save_catalog(cat: dict):
    CATALOG_PATH.parent.mkdir(parents=True, exist_ok=True)
    CATALOG_PATH.write_text(json.dumps(cat, indent=2, ensure_ascii=False))

def timestamp(tz_hours: int = 8) -> str:
    """返回东八区 ISO-8601 字符串，如 2025-08-03T16:44:02+08:00"""
    tz = timezone(timedelta(hours=tz_hours))
    return datetime.now(tz).isoformat(timespec="seconds")

def default_subset(
    shape: Sequence[int],
    first: Sequence[int] | None = None,
    last: Sequence[int] | None = None,
    stride: Sequence[int] | None = None,
) -> Tuple[Tuple[int, ...], Tuple[int, ...], Tuple[int, ...]]:
    """缺省参数补齐：first 全 1，last = shape，stride 全 1（即整个数组）"""
    ndim = len(shape)
    first  = tuple(first)  if first  is not None else (1,) * ndim
    last   = tuple(last)   if last   is not None else tuple(int(n) for n in shape)
    stride = tuple(stride) if stride is not None else (1,) * ndim
    return first, last, stride
