"""
终端报告器 - 输出对齐、带颜色的检查结果

Every stdout line is indented by two spaces. Values are green or red only when
the check had a limit.
"""

import re
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Optional

from size_report.errors import SizeLimitError
from size_report.formatting import format_bytes, format_raw_bytes, format_time
from size_report.markup import parse_emphasis
from size_report.models import Check, Plugins, ReportConfig
from size_report.reporters.base import error_trace
from size_report.sink import OutputSink
from size_report.styles import StyleName, Styler


INDENT = "  "
SENTENCE_JOINER = ".\n        "
CONFIG_SECTION = '"size-limit"'

EXAMPLE_KEY = re.compile(r'("[^"]+"):')
EXAMPLE_VALUE = re.compile(r': ("[^"]+")')


@dataclass
class Row:
    """一行结果：标签、值、可选备注"""
    label: str
    value: str
    note: Optional[str] = None


def size_note(check: Check, plugins: Plugins) -> Optional[str]:
    """Describe how the size was measured."""
    if check.config:
        return "with given webpack configuration"
    if plugins.has("webpack") and check.gzip is False:
        return "with all dependencies and minified"
    if plugins.has("webpack"):
        return "with all dependencies, minified and gzipped"
    if plugins.has("gzip"):
        return "gzipped"
    return None


class HumanReporter:
    """终端报告器"""

    def __init__(self, sink: OutputSink, styler: Optional[Styler] = None):
        self.sink = sink
        self.styler = styler or Styler()

    def _print(self, *lines: str) -> None:
        self.sink.write_stdout(INDENT + f"\n{INDENT}".join(lines) + "\n")

    def _badge(self) -> str:
        return self.styler(" ERROR ", StyleName.BADGE)

    # ------------------------------------------------------------
    # 错误
    # ------------------------------------------------------------

    def report_error(self, err: BaseException) -> None:
        """输出错误到 stderr"""
        if isinstance(err, SizeLimitError):
            self.sink.write_stderr(f"{self._badge()} {self._format_message(err.message)}\n")
            if err.example:
                self.sink.write_stderr("\n" + self._format_example(err.example))
        else:
            trace = error_trace(err).rstrip("\n")
            self.sink.write_stderr(f"{self._badge()} {self.styler(trace, StyleName.RED)}\n")

    def _format_message(self, message: str) -> str:
        sentences = []
        for sentence in message.split(". "):
            sentences.append("".join(
                self.styler(span.text, StyleName.YELLOW if span.emphasized else StyleName.RED)
                for span in parse_emphasis(sentence)
            ))
        return self.styler(SENTENCE_JOINER, StyleName.RED).join(sentences)

    def _format_example(self, example: str) -> str:
        example = EXAMPLE_KEY.sub(
            lambda m: self.styler(m.group(1), StyleName.GREEN) + ":", example
        )
        return EXAMPLE_VALUE.sub(
            lambda m: ": " + self.styler(m.group(1), StyleName.YELLOW), example
        )

    # ------------------------------------------------------------
    # 结果
    # ------------------------------------------------------------

    def report_results(self, plugins: Plugins, config: ReportConfig) -> None:
        """输出所有检查项，失败时附带修复建议"""
        self._print("")
        for check in config.checks:
            if len(config.checks) > 1:
                self._print(self.styler(check.name, StyleName.BOLD))
            for line in self._check_lines(check, plugins):
                self._print(line)
            self._print("")

        if config.failed:
            self._print(self._fix_hint(config.config_path))

    def _check_lines(self, check: Check, plugins: Plugins) -> list[str]:
        """Warning lines first, then the aligned rows, as printable strings."""
        lines: list[str] = []
        rows: list[Row] = []
        failed = check.passed is False

        if check.time_limit is not None:
            if failed:
                lines.append(self.styler("Total time limit has exceeded", StyleName.RED))
            rows.append(Row("Time limit", format_time(check.time_limit)))

        size_string = format_bytes(check.size) if check.size is not None else ""
        if check.size_limit is not None:
            limit_string = format_bytes(check.size_limit)
            if failed:
                if check.size is None:
                    warning = "Package size limit has exceeded"
                else:
                    if limit_string == size_string:
                        # 四舍五入后看起来一样，改为显示精确字节数
                        limit_string = format_raw_bytes(check.size_limit)
                        size_string = format_raw_bytes(check.size)
                    diff = format_bytes(check.size - check.size_limit)
                    warning = f"Package size limit has exceeded by {diff}"
                lines.append(self.styler(warning, StyleName.RED))
            rows.append(Row("Size limit", limit_string))

        if check.size is not None:
            rows.append(Row("Size", size_string, size_note(check, plugins)))
        if check.load_time is not None:
            rows.append(Row("Loading time", format_time(check.load_time), "on slow 3G"))
        if check.run_time is not None:
            total = check.time
            if total is None:
                total = check.run_time + (check.load_time or 0)
            rows.append(Row("Running time", format_time(check.run_time), "on Snapdragon 410"))
            rows.append(Row("Total time", format_time(total)))

        label_width = max((len(row.label) for row in rows), default=0)
        value_width = max((len(row.value) for row in rows), default=0)
        for row in rows:
            lines.append(self._format_row(row, check, label_width, value_width))
        return lines

    def _format_row(self, row: Row, check: Check, label_width: int, value_width: int) -> str:
        text = f"{row.label}:".ljust(label_width + 1) + " "
        value = row.value.ljust(value_width) if row.note else row.value
        if check.unlimited or "Limit" in row.label:
            text += self.styler(value, StyleName.BOLD)
        elif check.passed:
            text += self.styler(value, StyleName.BOLD, StyleName.GREEN)
        else:
            text += self.styler(value, StyleName.BOLD, StyleName.RED)
        if row.note:
            text += " " + self.styler(row.note, StyleName.GRAY)
        return text

    def _fix_hint(self, config_path: Optional[str]) -> str:
        """Yellow hint, the section name and the path are also bold."""
        parts = [("Try to reduce size or increase limit", False)]
        if config_path:
            # 也识别 Windows 路径：C:\proj\package.json
            if PurePosixPath(config_path.replace("\\", "/")).name == "package.json":
                parts += [(" in ", False), (CONFIG_SECTION, True), (" section of ", False)]
            else:
                parts.append((" at ", False))
            parts.append((config_path, True))
        return "".join(
            self.styler(text, StyleName.YELLOW, StyleName.BOLD) if bold
            else self.styler(text, StyleName.YELLOW)
            for text, bold in parts
        )
