"""
终端样式 - 基于 Rich 的 ANSI 渲染

Reporters ask for a named style, the ``Styler`` turns it into ANSI codes for
the detected color system or leaves the text alone when colors are off.
"""

from enum import Enum
from typing import Optional, TextIO

from rich.color import ColorSystem
from rich.console import Console
from rich.style import Style


class StyleName(Enum):
    """Styles used by the human reporter."""
    BOLD = "bold"
    GREEN = "green"
    RED = "red"
    YELLOW = "yellow"
    GRAY = "bright_black"
    BADGE = "black on red"


COLOR_SYSTEMS: dict[str, ColorSystem] = {
    "standard": ColorSystem.STANDARD,
    "256": ColorSystem.EIGHT_BIT,
    "truecolor": ColorSystem.TRUECOLOR,
    "windows": ColorSystem.WINDOWS,
}


def detect_color_system(
    stream: Optional[TextIO] = None,
    force: Optional[bool] = None,
) -> Optional[ColorSystem]:
    """
    检测输出流支持的颜色

    Args:
        stream: 输出流，None 表示 stdout
        force: True 强制启用颜色，False 强制禁用，None 自动检测

    Returns:
        颜色系统，None 表示不输出 ANSI 代码
    """
    if force is False:
        return None
    # Console 会处理 NO_COLOR、FORCE_COLOR、TERM=dumb 以及是否为终端
    console = Console(file=stream, force_terminal=force)
    detected = console.color_system
    if force is None and console.no_color:
        return None
    if detected is None:
        return ColorSystem.STANDARD if force else None
    return COLOR_SYSTEMS.get(detected, ColorSystem.STANDARD)


class Styler:
    """Applies ``StyleName`` values to text.

    Example:
        ```python
        styler = Styler(ColorSystem.STANDARD)
        styler("12 KB", StyleName.BOLD, StyleName.GREEN)
        ```
    """

    def __init__(self, color_system: Optional[ColorSystem] = None):
        self.color_system = color_system

    @property
    def enabled(self) -> bool:
        return self.color_system is not None

    def __call__(self, text: str, *names: StyleName) -> str:
        if not self.enabled or not names:
            return text
        style = Style.combine(Style.parse(name.value) for name in names)
        return style.render(text, color_system=self.color_system)
