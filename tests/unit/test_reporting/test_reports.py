"""
Unit tests for HTML report rendering and output.
"""

from unittest.mock import patch

import pytest

from hwsentry.classification import flatten_sensor_tree
from hwsentry.models.results import StressComponent, StressOutcome, StressResult, StressStatus
from hwsentry.models.sensors import RawSensorNode
from hwsentry.reporting import (
    open_in_viewer,
    readings_frame,
    render_sensor_tree_report,
    render_summary_report,
    temperature_figure,
    write_report,
)
from hwsentry.reporting.tree import count_nodes

SOURCE_URL = "http://localhost:8085/data.json"


@pytest.fixture
def outcome():
    return StressOutcome(
        results=[
            StressResult(StressComponent.CPU, 71.0, StressStatus.OK),
            StressResult(StressComponent.RAM, None, StressStatus.ERROR),
            StressResult(StressComponent.DISK, 95.0, StressStatus.HIGH_USAGE),
            StressResult(StressComponent.GPU, None, StressStatus.UNAVAILABLE),
        ],
        errors=["RAM stress test failed: InsufficientResource: Only 100 MiB free"],
    )


@pytest.fixture
def readings(sample_tree, thresholds):
    return flatten_sensor_tree(sample_tree, thresholds)


@pytest.mark.unit
class TestSummaryReport:
    """Test cases for the summary report."""

    def test_readings_frame(self, readings):
        frame = readings_frame(readings)

        assert len(frame) == len(readings)
        assert frame.iloc[0]["Sensor"] == "CPU Package"
        assert frame.iloc[0]["Value"] == 45.3

    def test_contains_stress_results_and_alerts(self, readings, outcome):
        html = render_summary_report("20260101_120000", SOURCE_URL, readings, readings, outcome, outcome.errors)

        assert html.startswith("<!DOCTYPE html>")
        assert "Hardware Stress Test Report" in html
        assert "20260101_120000" in html
        assert 'class="status-HighUsage"' in html
        assert "Only 100 MiB free" in html
        assert "CPU Package" in html
        assert "Readings before stress tests" in html

    def test_all_clear(self, readings, outcome):
        html = render_summary_report("ts", SOURCE_URL, readings, readings, outcome, [])

        assert "No alerts" in html

    def test_names_are_escaped(self, tree_factory, thresholds, outcome):
        tree = tree_factory(("<b>CPU</b> Package", "50 °C"))
        readings = flatten_sensor_tree(tree, thresholds)

        html = render_summary_report("ts", SOURCE_URL, readings, readings, outcome, ["<script>x</script>"])

        assert "<script>x</script>" not in html
        assert "&lt;script&gt;" in html
        assert "&lt;b&gt;CPU&lt;/b&gt; Package" in html

    def test_no_readings(self, outcome):
        html = render_summary_report("ts", SOURCE_URL, [], [], outcome, [])

        assert "No temperature readings to chart" in html
        assert "No data." in html

    def test_temperature_figure_has_thresholds(self, readings):
        fig = temperature_figure(readings)

        assert list(fig.data[0].x) == ["CPU Package", "CPU Core #1", "GPU Core"]
        assert list(fig.data[1].y) == [85.0, 85.0, 85.0]


@pytest.mark.unit
class TestSensorTreeReport:
    """Test cases for the raw sensor tree report."""

    def test_renders_every_node(self, sample_tree):
        html = render_sensor_tree_report(sample_tree, "ts", SOURCE_URL)

        assert "Sensor Tree" in html
        assert "DESKTOP-TEST" in html
        assert "45,3 °C" in html
        assert "min 38,0 °C / max 71,0 °C" in html
        assert f"{count_nodes(sample_tree)} nodes" in html

    def test_count_nodes(self):
        root = RawSensorNode("a", "", children=(RawSensorNode("b", "1"), RawSensorNode("c", "2")))

        assert count_nodes(root) == 3

    def test_escapes_names(self):
        root = RawSensorNode("<i>Board</i>", "")

        assert "&lt;i&gt;Board&lt;/i&gt;" in render_sensor_tree_report(root, "ts", SOURCE_URL)


@pytest.mark.unit
class TestReportOutput:
    """Test cases for writing and opening reports."""

    def test_write_report(self, temp_dir):
        path = write_report("<html>°C</html>", temp_dir / "nested" / "report.html")

        assert path.read_text(encoding="utf-8") == "<html>°C</html>"

    @patch("hwsentry.reporting.output.webbrowser.open", return_value=True)
    def test_open_in_viewer(self, mock_open, temp_dir):
        path = temp_dir / "report.html"

        assert open_in_viewer(path) is True
        mock_open.assert_called_once_with(path.resolve().as_uri())

    @patch("hwsentry.reporting.output.webbrowser.open", return_value=False)
    def test_no_viewer_available(self, mock_open, temp_dir, caplog):
        assert open_in_viewer(temp_dir / "report.html") is False
        assert "No viewer available" in caplog.text
