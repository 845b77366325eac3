"""Tests for terminal styling."""

import io

import pytest
from rich.color import ColorSystem

from size_report.styles import StyleName, Styler, detect_color_system


class TestStyler:
    """Tests for Styler."""

    def test_disabled_returns_text(self) -> None:
        styler = Styler()
        assert not styler.enabled
        assert styler("12 KB", StyleName.BOLD, StyleName.GREEN) == "12 KB"

    def test_combined_styles(self) -> None:
        styler = Styler(ColorSystem.STANDARD)
        assert styler("x", StyleName.BOLD, StyleName.GREEN) == "\x1b[1;32mx\x1b[0m"

    def test_single_style(self) -> None:
        styler = Styler(ColorSystem.STANDARD)
        assert styler("x", StyleName.RED) == "\x1b[31mx\x1b[0m"

    def test_no_styles(self) -> None:
        assert Styler(ColorSystem.STANDARD)("x") == "x"


class TestDetectColorSystem:
    """Tests for detect_color_system()."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch) -> None:
        for name in ("FORCE_COLOR", "NO_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
            monkeypatch.delenv(name, raising=False)

    def test_forced_off(self) -> None:
        assert detect_color_system(io.StringIO(), force=False) is None

    def test_not_a_terminal(self) -> None:
        assert detect_color_system(io.StringIO()) is None

    def test_forced_on(self) -> None:
        assert detect_color_system(io.StringIO(), force=True) is not None

    def test_no_color_env(self, monkeypatch) -> None:
        monkeypatch.setenv("NO_COLOR", "1")
        assert detect_color_system(io.StringIO()) is None
