"""Errors with user-facing messages.

``SizeLimitError`` is the error the human reporter knows how to render
nicely: its message may wrap words in ``*`` to highlight them, and it may
carry an example of valid input. Anything else is shown with its full
traceback.
"""

from __future__ import annotations

from typing import Callable


MESSAGES: dict[str, Callable[[str, str], str]] = {
    "unreadableResults": lambda path, reason: (
        f"Can’t read check results from *{path}*. {reason}"
    ),
    "invalidResults": lambda path, reason: (
        f"Check results in *{path}* are invalid. {reason}"
    ),
    "noArrayResults": lambda path, reason: (
        f"Check results in *{path}* must contain *an array* of checks"
    ),
}

# 这些错误需要附带结果文件示例
EXAMPLE_KINDS = frozenset({"noArrayResults"})

RESULTS_EXAMPLE = (
    "  [\n"
    "    {\n"
    '      "name": "index.js",\n'
    '      "size": 1024\n'
    "    }\n"
    "  ]\n"
)


class SizeLimitError(Exception):
    """Known usage or input problem.

    Example:
        ```python
        raise SizeLimitError("Add *@size-limit/webpack* plugin")
        ```
    """

    name = "SizeLimitError"

    def __init__(self, message: str, example: str | None = None):
        self.message = message
        self.example = example
        super().__init__(message)


class ResultsFileError(SizeLimitError):
    """The results file could not be read or does not describe checks."""

    def __init__(self, kind: str, path: str, reason: str = ""):
        self.kind = kind
        self.path = path
        self.reason = reason
        example = RESULTS_EXAMPLE if kind in EXAMPLE_KINDS else None
        super().__init__(MESSAGES[kind](path, reason), example)
