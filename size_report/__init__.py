"""
size-report - Size Limit 检查结果报告器

Renders size/time check results as JSON or as a colored terminal report.
"""

__version__ = "0.1.0"

from size_report.errors import ResultsFileError, SizeLimitError
from size_report.models import Check, Plugins, ReportConfig
from size_report.reporters import HumanReporter, JsonReporter, Reporter, create_reporter
from size_report.sink import OutputSink, StreamSink

__all__ = [
    "__version__",
    "Check",
    "Plugins",
    "ReportConfig",
    "SizeLimitError",
    "ResultsFileError",
    "Reporter",
    "JsonReporter",
    "HumanReporter",
    "create_reporter",
    "OutputSink",
    "StreamSink",
]
