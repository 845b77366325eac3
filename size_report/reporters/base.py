"""
报告器基类 - 定义报告器接口
"""

import traceback
from typing import Protocol

from size_report.models import Plugins, ReportConfig


class Reporter(Protocol):
    """报告器协议"""

    def report_error(self, err: BaseException) -> None:
        """输出错误"""
        ...

    def report_results(self, plugins: Plugins, config: ReportConfig) -> None:
        """输出检查结果"""
        ...


def error_trace(err: BaseException) -> str:
    """Full diagnostic text of an exception, like an uncaught traceback."""
    return "".join(traceback.format_exception(type(err), err, err.__traceback__))
