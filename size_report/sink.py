"""
输出目标 - stdout / stderr 的抽象

Reporters write whole strings through an ``OutputSink`` so tests and embedding
tools can capture the report without touching the real streams.
"""

import sys
from typing import Optional, Protocol, TextIO


class OutputSink(Protocol):
    """Destination of the normal and the error output."""

    def write_stdout(self, text: str) -> None:
        ...

    def write_stderr(self, text: str) -> None:
        ...


class StreamSink:
    """Writes to text streams, ``sys.stdout``/``sys.stderr`` by default."""

    def __init__(self, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None):
        self._stdout = stdout
        self._stderr = stderr

    @property
    def stdout(self) -> TextIO:
        # 每次写入时再取 sys.stdout，方便被替换（例如 pytest 的 capsys）
        return self._stdout or sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr or sys.stderr

    def write_stdout(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def write_stderr(self, text: str) -> None:
        self.stderr.write(text)
        self.stderr.flush()
