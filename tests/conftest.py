"""Shared fixtures for size-report tests."""

import io

import pytest
from rich.color import ColorSystem

from size_report.sink import StreamSink
from size_report.styles import Styler


class CapturedSink(StreamSink):
    """StreamSink over in-memory buffers."""

    def __init__(self) -> None:
        super().__init__(io.StringIO(), io.StringIO())

    @property
    def out(self) -> str:
        return self.stdout.getvalue()

    @property
    def err(self) -> str:
        return self.stderr.getvalue()


@pytest.fixture
def sink() -> CapturedSink:
    return CapturedSink()


@pytest.fixture
def color_styler() -> Styler:
    return Styler(ColorSystem.STANDARD)
