"""Inline emphasis markup used in error messages.

``"Add *@size-limit/webpack* plugin"`` is split into plain and emphasized
spans. The spans know nothing about colors, the reporter decides how an
emphasized span looks.
"""

import re
from dataclasses import dataclass


EMPHASIS_MARKER = "*"


@dataclass(frozen=True)
class Span:
    """A piece of message text."""
    text: str
    emphasized: bool = False


def _pattern(marker: str) -> re.Pattern[str]:
    quoted = re.escape(marker)
    return re.compile(f"{quoted}([^{quoted}]+){quoted}")


def parse_emphasis(text: str, marker: str = EMPHASIS_MARKER) -> list[Span]:
    """
    解析 ``*强调*`` 标记

    Unpaired markers and empty pairs (``**``) stay in the text as is.
    """
    spans: list[Span] = []
    position = 0
    for match in _pattern(marker).finditer(text):
        if match.start() > position:
            spans.append(Span(text[position:match.start()]))
        spans.append(Span(match.group(1), emphasized=True))
        position = match.end()
    if position < len(text):
        spans.append(Span(text[position:]))
    return spans

