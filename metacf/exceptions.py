class MetaCFError(Exception):
    """基类"""

class ValidationError(MetaCFError):
    """用户输入校验相关"""

class RangeError(MetaCFError, IndexError):
    """first/last/stride 与变量尺寸不符"""

class UnresolvedReferenceError(MetaCFError, KeyError):
    """引用了数据集中不存在的变量"""

    def __str__(self):
        return Exception.__str__(self)

class SourceUnavailableError(MetaCFError, OSError):
    """数据源无法打开或读取"""
