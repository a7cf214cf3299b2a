"""
数据源登记表：给常用的文件 / URL 起一个短名
"""
from __future__ import annotations
from typing import List, Dict

from .config import RawFormat
from .exceptions import ValidationError
from .utils import log, load_catalog, save_catalog, timestamp

def register_source(
    name: str,
    source: str,
    *,
    description: str = "",
    raw_format: RawFormat | str | None = None,
    overwrite: bool = False,
) -> Dict:
    cat = load_catalog()
    if name in cat and not overwrite:
        raise ValidationError(
            f"数据源名 {name!r} 已存在。\n"
            "如需覆盖请传 overwrite=True；否则请换一个 name。"
        )
    cat[name] = {
        "name":        name,
        "source":      str(source),
        "format":      RawFormat(raw_format).value if raw_format else None,
        "description": description,
        "created":     timestamp(),        # 北京时间 (+08:00)
    }
    save_catalog(cat)
    log.info("📚 Catalog 已更新 → %s", name)
    return cat[name]

def list_sources() -> List[str]:
    return list(load_catalog().keys())

def show_source_info(name: str) -> Dict:
    cat = load_catalog()
    return cat.get(name, {})

def remove_source(name: str):
    cat = load_catalog()
    if cat.pop(name, None) is None:
        raise ValidationError(f"数据源 {name} 不存在")
    save_catalog(cat)
    log.info("✅ 已删除数据源 %s", name)
