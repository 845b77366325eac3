"""
结果文件加载 - 读取测量步骤输出的 JSON

支持两种格式：
1. 检查项数组：[{"name": "index.js", "size": 1024, ...}]
2. 对象：{"checks": [...], "configPath": "package.json", "failed": true}
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

from size_report.errors import ResultsFileError
from size_report.models import Check, ReportConfig

logger = logging.getLogger(__name__)


# JSON 键 -> Check 字段（同时接受 camelCase 和 snake_case）
CHECK_KEYS: dict[str, str] = {
    "name": "name",
    "size": "size",
    "sizeLimit": "size_limit",
    "size_limit": "size_limit",
    "runTime": "run_time",
    "run_time": "run_time",
    "loadTime": "load_time",
    "load_time": "load_time",
    "time": "time",
    "timeLimit": "time_limit",
    "time_limit": "time_limit",
    "passed": "passed",
    "config": "config",
    "gzip": "gzip",
}

NUMBER_FIELDS = frozenset({"size", "size_limit", "run_time", "load_time", "time", "time_limit"})
BOOL_FIELDS = frozenset({"passed", "gzip"})


def _is_number(value: Any) -> bool:
    # JSON 里的 true/false 在 Python 中也是 int
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_type(key: str, attr: str, value: Any, path: str, index: int) -> None:
    """Raise ``ResultsFileError`` when a field has the wrong JSON type."""
    where = f"Field {key} of check #{index + 1}"
    if attr in NUMBER_FIELDS:
        if not _is_number(value):
            raise ResultsFileError("invalidResults", path, f"{where} must be a number.")
        if value < 0:
            raise ResultsFileError("invalidResults", path, f"{where} must not be negative.")
    elif attr in BOOL_FIELDS:
        if not isinstance(value, bool):
            raise ResultsFileError("invalidResults", path, f"{where} must be true or false.")
    elif not isinstance(value, str):
        raise ResultsFileError("invalidResults", path, f"{where} must be a string.")


def parse_check(data: Any, path: str, index: int) -> Check:
    """
    将一个 JSON 对象转换为 Check

    null 值按未设置处理。

    Raises:
        ResultsFileError: 不是对象、缺少 name 或字段类型错误
    """
    if not isinstance(data, dict):
        raise ResultsFileError("invalidResults", path, f"Check #{index + 1} is not an object.")
    fields: dict[str, Any] = {}
    for key, value in data.items():
        attr = CHECK_KEYS.get(key)
        if attr is None:
            logger.debug("Ignoring unknown key %r in check #%d", key, index + 1)
            continue
        if value is None:
            continue
        _check_type(key, attr, value, path, index)
        fields[attr] = value
    if "name" not in fields:
        raise ResultsFileError("invalidResults", path, f"Check #{index + 1} has no name.")
    return Check(**fields)


def parse_report(data: Any, path: str, config_path: Optional[str] = None) -> ReportConfig:
    """Build a ``ReportConfig`` from decoded JSON."""
    failed: Optional[bool] = None
    if isinstance(data, dict):
        items = data.get("checks")
        config_path = config_path or data.get("configPath") or data.get("config_path")
        failed = data.get("failed")
    else:
        items = data
    if not isinstance(items, list):
        raise ResultsFileError("noArrayResults", path)
    if config_path is not None and not isinstance(config_path, str):
        raise ResultsFileError("invalidResults", path, "Field configPath must be a string.")
    if failed is not None and not isinstance(failed, bool):
        raise ResultsFileError("invalidResults", path, "Field failed must be true or false.")

    checks = [parse_check(item, path, index) for index, item in enumerate(items)]
    if failed is None:
        failed = any(check.passed is False for check in checks)
    logger.debug("Loaded %d checks from %s (failed=%s)", len(checks), path, failed)
    return ReportConfig(checks=checks, failed=bool(failed), config_path=config_path)


def load_report(path: Path, config_path: Optional[str] = None) -> ReportConfig:
    """
    读取结果文件

    Args:
        path: JSON 结果文件
        config_path: 覆盖文件中的 configPath

    Raises:
        ResultsFileError: 文件不存在、无法读取或格式错误
    """
    logger.debug("Reading check results from %s", path)
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ResultsFileError("unreadableResults", str(path), "File not found.")
    except OSError as e:
        raise ResultsFileError("unreadableResults", str(path), f"{e.strerror}.")

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ResultsFileError(
            "invalidResults", str(path), f"Invalid JSON at line {e.lineno}."
        )
    return parse_report(data, str(path), config_path)
