"""
metacf
======
按 CF / COARDS 约定访问 NetCDF 类格点数据（本地文件、HTTP、OpenDAP）：
给出变量名，自动找到它的经纬度 / 时间 / 深度坐标变量。
"""
from .ncdataset import NCDataset                                      # 底层读取
from .cfdataset import CFDataset                                      # 坐标轴解析 + 缓存
from .variable import NCVariable
from .accessor import open_dataset, struct_to_json                    # 打开 / 导出
from .catalog import register_source, list_sources, show_source_info, remove_source

__all__ = [
    "NCDataset",
    "CFDataset",
    "NCVariable",
    "open_dataset",
    "struct_to_json",
    "register_source",
    "list_sources",
    "show_source_info",
    "remove_source",
]
