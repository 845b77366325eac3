"""
JSON 报告器 - 输出 JSON 格式报告
"""

import json
from typing import Any

from size_report.models import Check, Plugins, ReportConfig
from size_report.reporters.base import error_trace
from size_report.sink import OutputSink


# Check 字段 -> JSON 键
JSON_FIELDS: list[tuple[str, str]] = [
    ("passed", "passed"),
    ("size", "size"),
    ("run_time", "running"),
    ("load_time", "loading"),
]


def check_to_dict(check: Check) -> dict[str, Any]:
    """Only the fields that were measured, absent ones are left out."""
    data: dict[str, Any] = {"name": check.name}
    for attr, key in JSON_FIELDS:
        value = getattr(check, attr)
        if value is None:
            continue
        # 和 JSON.stringify 一样，2.0 输出为 2
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        data[key] = value
    return data


class JsonReporter:
    """JSON 报告器"""

    def __init__(self, sink: OutputSink):
        self.sink = sink

    def _print(self, data: Any) -> None:
        self.sink.write_stdout(json.dumps(data, indent=2, ensure_ascii=False) + "\n")

    def report_error(self, err: BaseException) -> None:
        """输出 {"error": traceback}"""
        self._print({"error": error_trace(err)})

    def report_results(self, plugins: Plugins, config: ReportConfig) -> None:
        """每个检查项一个对象"""
        self._print([check_to_dict(check) for check in config.checks])
