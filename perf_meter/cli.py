"""Command line entry point for perf-meter."""
import argparse
import logging
from typing import List, Optional

from pydantic import ValidationError

from perf_meter.const import EXIT_CONFIG_ERROR, EXIT_FAILURE, EXIT_INTERRUPTED, EXIT_OK
from perf_meter.measurement import ConsoleReporter, MeasurementAborted, MeterRunner, PerformanceMeter, ResultExporter
from perf_meter.measurement.exceptions import ReportLoadError
from perf_meter.shared.config import Settings
from perf_meter.shared.config_manager import ConfigurationError, ConfigurationManager
from perf_meter.shared.logging import LoggingManager


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="perf",
        usage="perf [options]",
        description="Measure response latency of HTTP endpoints, body and header-only.",
    )
    parser.add_argument("--config", help="YAML file with base, pages, requests and optional ttfb")
    parser.add_argument("--version", action="store_true", help="Show the version banner and exit")
    parser.add_argument("--output", help="CSV report path (default: <output_dir>/<host>_<timestamp>.csv)")
    parser.add_argument("--ttfb", action="store_true", help="Report time-to-first-byte statistics")
    parser.add_argument("--timeout", type=float, help="Per-request timeout in seconds")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    parser.add_argument("--plot", help="Also write a median latency chart to this PNG path")
    parser.add_argument("--render", metavar="CSV", help="Print a saved report as a table and exit")
    return parser


def settings_overrides(args: argparse.Namespace) -> dict:
    overrides = {}
    if args.timeout is not None:
        overrides["request_timeout"] = args.timeout
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.no_color:
        overrides["use_color"] = False
    return overrides


def main(argv: Optional[List[str]] = None) -> int:
    """Run perf-meter and return the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings(**settings_overrides(args))
    except ValidationError as e:
        console = ConsoleReporter(use_color=not args.no_color)
        console.write(console.banner(f"Invalid setting: {e}"))
        console.write(parser.format_help())
        return EXIT_CONFIG_ERROR

    console = ConsoleReporter(use_color=settings.use_color)
    if args.version:
        console.write(console.banner())
        return EXIT_OK

    LoggingManager.setup_logging(settings.log_level, settings.library_log_levels)

    if args.render:
        try:
            report = ResultExporter.load_report(args.render)
        except ReportLoadError as e:
            logger.error(str(e))
            console.write(console.banner(str(e)))
            return EXIT_FAILURE
        console.write(console.render_table(report))
        return EXIT_OK

    try:
        config = ConfigurationManager(args.config).load()
    except ConfigurationError as e:
        console.write(console.banner(e.message))
        for suggestion in e.suggestions:
            console.write(f"  - {suggestion}")
        console.write(parser.format_help())
        return EXIT_CONFIG_ERROR

    if args.ttfb:
        config = config.model_copy(update={"ttfb": True})

    meter = PerformanceMeter(settings, config, console=console)
    try:
        MeterRunner(meter).run(output_path=args.output, plot_path=args.plot)
    except MeasurementAborted:
        console.write(console.banner("Measurement aborted"))
        return EXIT_INTERRUPTED
    finally:
        meter.close()

    return EXIT_OK
