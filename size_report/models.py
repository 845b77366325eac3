"""
检查结果数据模型

Check records are produced by the measurement step and only read here.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional


@dataclass(frozen=True)
class Check:
    """
    单个检查项的测量结果

    Attributes:
        name: 检查项名称（多个检查项时作为标题显示）
        size: 测量得到的大小（字节）
        size_limit: 配置的大小限制（字节）
        run_time: 运行时间（秒）
        load_time: 加载时间（秒）
        time: 总时间（秒）
        time_limit: 配置的时间限制（秒）
        passed: 是否通过；None 表示没有配置任何限制
        config: 自定义 webpack 配置的路径
        gzip: 是否启用 gzip；None 表示未指定
    """
    name: str
    size: Optional[int] = None
    size_limit: Optional[int] = None
    run_time: Optional[float] = None
    load_time: Optional[float] = None
    time: Optional[float] = None
    time_limit: Optional[float] = None
    passed: Optional[bool] = None
    config: Optional[str] = None
    gzip: Optional[bool] = None

    @property
    def unlimited(self) -> bool:
        """No limit was configured, so there is nothing to pass or fail."""
        return self.passed is None


@dataclass(frozen=True)
class ReportConfig:
    """
    报告输入

    Attributes:
        checks: 检查项列表（顺序即显示顺序）
        failed: 是否有检查项失败
        config_path: 限制配置的来源文件
    """
    checks: list[Check] = field(default_factory=list)
    failed: bool = False
    config_path: Optional[str] = None


class Plugins:
    """Set of active measurement plugins (``webpack``, ``gzip``, ``time``...)."""

    def __init__(self, names: Iterable[str] = ()):
        self._names = frozenset(names)

    def has(self, name: str) -> bool:
        return name in self._names

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self):
        return iter(sorted(self._names))

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"Plugins({sorted(self._names)!r})"
