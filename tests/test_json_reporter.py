"""Tests for the JSON reporter."""

import json

from size_report import Check, Plugins, ReportConfig, SizeLimitError
from size_report.reporters import JsonReporter


class TestJsonResults:
    """Tests for JsonReporter.report_results()."""

    def test_only_present_fields(self, sink) -> None:
        """A check with only a size gets exactly name and size."""
        reporter = JsonReporter(sink)
        reporter.report_results(Plugins(), ReportConfig(checks=[Check(name="x", size=100)]))

        assert sink.out == '[\n  {\n    "name": "x",\n    "size": 100\n  }\n]\n'
        assert sink.err == ""

    def test_renamed_fields_in_order(self, sink) -> None:
        check = Check(name="app", size=2048, size_limit=4096, run_time=0.2,
                      load_time=0.4, time=0.6, passed=True)
        JsonReporter(sink).report_results(Plugins(["time"]), ReportConfig(checks=[check]))

        data = json.loads(sink.out)
        assert list(data[0]) == ["name", "passed", "size", "running", "loading"]
        assert data[0] == {
            "name": "app",
            "passed": True,
            "size": 2048,
            "running": 0.2,
            "loading": 0.4,
        }

    def test_zero_values_are_present(self, sink) -> None:
        check = Check(name="empty", size=0, run_time=0.0, passed=False)
        JsonReporter(sink).report_results(Plugins(), ReportConfig(checks=[check]))

        assert json.loads(sink.out) == [
            {"name": "empty", "passed": False, "size": 0, "running": 0.0}
        ]

    def test_whole_floats_written_as_integers(self, sink) -> None:
        check = Check(name="app", run_time=2.0, load_time=0.5)
        JsonReporter(sink).report_results(Plugins(), ReportConfig(checks=[check]))

        assert '"running": 2,\n' in sink.out
        assert '"loading": 0.5\n' in sink.out

    def test_checks_keep_input_order(self, sink) -> None:
        checks = [Check(name="b"), Check(name="a"), Check(name="c")]
        JsonReporter(sink).report_results(Plugins(), ReportConfig(checks=checks))

        assert [item["name"] for item in json.loads(sink.out)] == ["b", "a", "c"]

    def test_no_checks(self, sink) -> None:
        JsonReporter(sink).report_results(Plugins(), ReportConfig())
        assert sink.out == "[]\n"


class TestJsonError:
    """Tests for JsonReporter.report_error()."""

    def test_error_trace(self, sink) -> None:
        try:
            raise ValueError("boom")
        except ValueError as e:
            JsonReporter(sink).report_error(e)

        data = json.loads(sink.out)
        assert list(data) == ["error"]
        assert data["error"].startswith("Traceback (most recent call last):")
        assert "ValueError: boom" in data["error"]
        assert sink.out.endswith("}\n")

    def test_size_limit_error_is_not_formatted(self, sink) -> None:
        JsonReporter(sink).report_error(SizeLimitError("Add *@size-limit/webpack* plugin"))

        data = json.loads(sink.out)
        assert "Add *@size-limit/webpack* plugin" in data["error"]
        assert sink.err == ""
