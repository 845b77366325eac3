"""
Reporters Layer - 报告层

包含终端报告器和 JSON 报告器。
"""

from typing import Optional

from size_report.reporters.base import Reporter
from size_report.reporters.human_reporter import HumanReporter
from size_report.reporters.json_reporter import JsonReporter
from size_report.sink import OutputSink, StreamSink
from size_report.styles import Styler, detect_color_system


def create_reporter(
    sink: OutputSink,
    is_json: bool,
    color: Optional[bool] = None,
) -> Reporter:
    """
    根据输出格式创建报告器

    Args:
        sink: 输出目标
        is_json: True 输出 JSON，False 输出终端报告
        color: 终端报告是否带颜色，None 表示根据 stdout 自动检测
    """
    if is_json:
        return JsonReporter(sink)
    stream = sink.stdout if isinstance(sink, StreamSink) else None
    if color is None and stream is None:
        color = False
    return HumanReporter(sink, Styler(detect_color_system(stream, force=color)))


__all__ = [
    "Reporter",
    "HumanReporter",
    "JsonReporter",
    "create_reporter",
]
