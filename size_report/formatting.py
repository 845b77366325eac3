"""
数值格式化 - 字节大小和时间

Pure helpers shared by the reporters.
"""

import math
import re
from decimal import ROUND_HALF_UP, Decimal


BYTE_UNITS: list[tuple[str, int]] = [
    ("PB", 1024 ** 5),
    ("TB", 1024 ** 4),
    ("GB", 1024 ** 3),
    ("MB", 1024 ** 2),
    ("KB", 1024),
]

TWO_PLACES = Decimal("0.01")

# 去掉小数部分末尾的 0："1.50" -> "1.5", "2.00" -> "2"
TRAILING_ZEROS = re.compile(r"(?:\.0*|(\.[^0]+)0+)$")


def _number(value: float) -> str:
    """Print integral floats without a decimal part."""
    if value == int(value):
        return str(int(value))
    return str(value)


def format_bytes(size: int) -> str:
    """
    格式化字节大小

    Args:
        size: 字节数（可以为负数，例如超出限制的差值）

    Returns:
        "1.5 KB"、"512 B" 这样的字符串
    """
    magnitude = abs(size)
    sign = "-" if size < 0 else ""
    for unit, factor in BYTE_UNITS:
        if magnitude >= factor:
            # 与 JS toFixed 一致：正好在中间时向上取整
            rounded = (Decimal(magnitude) / factor).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
            number = TRAILING_ZEROS.sub(r"\1", f"{rounded:f}")
            return f"{sign}{number} {unit}"
    return f"{size} B"


def format_raw_bytes(size: int) -> str:
    """Bytes without unit conversion, used when rounding hides a difference."""
    return f"{size} B"


def format_time(seconds: float) -> str:
    """
    格式化时间

    1 秒以上向上取整到 0.1 s，1 秒以下向上取整到整毫秒。
    """
    if seconds >= 1:
        return f"{_number(math.ceil(seconds * 10) / 10)} s"
    return f"{math.ceil(seconds * 1000)} ms"
