"""Tests for data models and reporter selection."""

import io

from size_report import (
    Check,
    HumanReporter,
    JsonReporter,
    Plugins,
    ReportConfig,
    StreamSink,
    create_reporter,
)


class TestCheck:
    """Tests for Check."""

    def test_defaults(self) -> None:
        check = Check(name="a")
        assert check.size is None
        assert check.passed is None
        assert check.unlimited

    def test_failed_check_is_limited(self) -> None:
        assert not Check(name="a", passed=False).unlimited


class TestPlugins:
    """Tests for Plugins."""

    def test_has(self) -> None:
        plugins = Plugins(["webpack", "gzip"])
        assert plugins.has("webpack")
        assert "gzip" in plugins
        assert not plugins.has("time")
        assert len(plugins) == 2
        assert list(plugins) == ["gzip", "webpack"]

    def test_empty(self) -> None:
        assert not Plugins().has("webpack")


class TestReportConfig:
    """Tests for ReportConfig."""

    def test_defaults(self) -> None:
        config = ReportConfig()
        assert config.checks == []
        assert config.failed is False
        assert config.config_path is None


class TestCreateReporter:
    """Tests for create_reporter()."""

    def test_json_mode(self) -> None:
        reporter = create_reporter(StreamSink(io.StringIO(), io.StringIO()), True)
        assert isinstance(reporter, JsonReporter)

    def test_human_mode_without_colors(self) -> None:
        reporter = create_reporter(StreamSink(io.StringIO(), io.StringIO()), False, color=False)
        assert isinstance(reporter, HumanReporter)
        assert not reporter.styler.enabled

    def test_human_mode_with_forced_colors(self) -> None:
        reporter = create_reporter(StreamSink(io.StringIO(), io.StringIO()), False, color=True)
        assert reporter.styler.enabled

    def test_custom_sink_defaults_to_plain_text(self) -> None:
        class ListSink:
            def __init__(self) -> None:
                self.written: list[str] = []

            def write_stdout(self, text: str) -> None:
                self.written.append(text)

            def write_stderr(self, text: str) -> None:
                self.written.append(text)

        sink = ListSink()
        reporter = create_reporter(sink, False)
        reporter.report_results(Plugins(), ReportConfig(checks=[Check(name="a", size=1)]))
        assert sink.written == ["  \n", "  Size: 1 B\n", "  \n"]
