"""Unit tests for the command line entry point."""

from unittest.mock import patch

import pytest

from perf_meter.cli import build_parser, main, settings_overrides
from perf_meter.measurement.result_exporter import ResultExporter
from ..conftest import make_record
from ..test_const import EVEN_TIMES, ODD_TIMES, VALID_CONFIG_YAML


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep root handlers untouched across tests."""
    with patch("perf_meter.cli.LoggingManager.setup_logging") as setup:
        yield setup


@pytest.fixture
def patched_session(mock_session):
    with patch("perf_meter.measurement.performance_meter.RequestSessionManager.create_session",
               return_value=mock_session):
        yield mock_session


class TestSettingsOverrides:
    """Test mapping command line options onto Settings."""

    def test_no_overrides(self):
        """Test no options means no overrides."""
        assert settings_overrides(build_parser().parse_args([])) == {}

    def test_overrides(self):
        """Test every overridable option."""
        args = build_parser().parse_args(["--timeout", "2.5", "--log-level", "DEBUG", "--no-color"])
        assert settings_overrides(args) == {"request_timeout": 2.5, "log_level": "DEBUG", "use_color": False}


class TestMain:
    """Test main() exit codes and output."""

    def test_version(self, capsys):
        """Test --version prints the banner."""
        assert main(["--version", "--no-color"]) == 0
        assert capsys.readouterr().out.strip() == "PerformanceMeasurement version 1.0"

    def test_missing_config_option(self, capsys):
        """Test running without --config."""
        assert main(["--no-color"]) == 2
        output = capsys.readouterr().out
        assert "Option 'config' must be given" in output
        assert "usage: perf [options]" in output

    def test_config_not_found(self, tmp_path, capsys):
        """Test --config pointing at nothing."""
        assert main(["--no-color", "--config", str(tmp_path / "nope.yaml")]) == 2
        assert "Option 'config' must be a valid file" in capsys.readouterr().out

    def test_invalid_config(self, config_file, capsys):
        """Test a config failing validation."""
        path = config_file(VALID_CONFIG_YAML.replace("requests: 3", "requests: 0"))
        assert main(["--no-color", "--config", str(path)]) == 2

    def test_invalid_timeout(self, capsys):
        """Test a non-positive --timeout."""
        assert main(["--no-color", "--timeout", "0"]) == 2
        assert "Invalid setting" in capsys.readouterr().out

    def test_full_run(self, config_file, patched_session, tmp_path, capsys):
        """Test a complete run writes the report and exits 0."""
        output = tmp_path / "report.csv"

        code = main(["--no-color", "--config", str(config_file(VALID_CONFIG_YAML)), "--output", str(output)])

        assert code == 0
        assert len(output.read_text(encoding="utf-8").splitlines()) == 3
        stdout = capsys.readouterr().out
        assert "Start profile for example.com" in stdout
        assert f"Report written to {output}" in stdout
        patched_session.close.assert_called_once()

    def test_ttfb_option(self, config_file, patched_session, tmp_path):
        """Test --ttfb adds the ttfb columns."""
        output = tmp_path / "report.csv"

        code = main(["--no-color", "--ttfb", "--config", str(config_file(VALID_CONFIG_YAML)),
                     "--output", str(output)])

        assert code == 0
        assert '"[ttfb] average"' in output.read_text(encoding="utf-8").splitlines()[0]

    def test_interrupted(self, config_file, patched_session, tmp_path, capsys):
        """Test an interrupted run exits 130 and releases the session."""
        patched_session.get.side_effect = KeyboardInterrupt

        code = main(["--no-color", "--config", str(config_file(VALID_CONFIG_YAML)),
                     "--output", str(tmp_path / "report.csv")])

        assert code == 130
        assert "Measurement aborted" in capsys.readouterr().out
        patched_session.close.assert_called_once()

    def test_render(self, tmp_path, capsys):
        """Test --render prints a saved report without measuring."""
        report = tmp_path / "saved.csv"
        records = {"/a": make_record("/a", ODD_TIMES, EVEN_TIMES)}
        ResultExporter.save_report(ResultExporter.build_frame(records, include_ttfb=False), report)

        assert main(["--no-color", "--render", str(report)]) == 0
        output = capsys.readouterr().out
        assert "requests per sec (head)" in output
        assert "/a" in output

    def test_render_missing(self, tmp_path, capsys):
        """Test --render with a missing file."""
        assert main(["--no-color", "--render", str(tmp_path / "missing.csv")]) == 1
        assert "Report not found" in capsys.readouterr().out

    def test_logging_configured(self, no_logging_setup, capsys):
        """Test logging is set up from settings before work starts."""
        main(["--no-color", "--log-level", "DEBUG"])
        assert no_logging_setup.call_args.args[0] == "DEBUG"
