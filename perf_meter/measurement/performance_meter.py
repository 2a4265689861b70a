"""Main class wiring the measurement engine and its reporters together."""
import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, Union
from urllib.parse import urlsplit

import pandas as pd
import requests

from perf_meter.const import REPORT_SUFFIX, REPORT_TIMESTAMP_FORMAT
from perf_meter.shared.config import MeasurementConfig, Settings
from .console_reporter import ConsoleReporter
from .latency_analyzer import LatencyAnalyzer
from .measurement_runner import MeasurementRunner
from .models import MeasurementRecord
from .request_executor import RequestExecutor
from .request_session_manager import RequestSessionManager
from .result_exporter import ResultExporter
from .sampler import Sampler
from .url_builder import UrlBuilder
from .visualization_generator import VisualizationGenerator


# Configure logging
logger = logging.getLogger(__name__)


class PerformanceMeter:
    """Measures the configured pages of one site and reports the results."""

    def __init__(self, settings: Settings, config: MeasurementConfig,
                 session: Optional[requests.Session] = None, console: Optional[ConsoleReporter] = None):
        self.settings = settings
        self.config = config
        self.endpoints = UrlBuilder.resolve_pages(config.base, config.pages)
        self.console = console or ConsoleReporter(use_color=settings.use_color)
        self.session = session or RequestSessionManager.create_session(settings.user_agent)
        self.request_executor = RequestExecutor(settings.request_timeout, settings.chunk_size)
        self.sampler = Sampler(self.session, self.request_executor, progress=self.console.progress)
        self.latency_analyzer = LatencyAnalyzer()
        self.measurement_runner = MeasurementRunner(self.sampler, self.latency_analyzer, include_ttfb=config.ttfb)
        self.result_exporter = ResultExporter()
        self.visualization_generator = VisualizationGenerator()

    @property
    def host(self) -> str:
        return urlsplit(UrlBuilder.resolve_base_url(self.config.base)).hostname or self.config.base

    def run_measurements(self) -> Dict[str, MeasurementRecord]:
        """Print the run header and measure every endpoint."""
        self.console.run_header(self.host, self.config.requests, len(self.endpoints))
        logger.info(f"Measuring {len(self.endpoints)} endpoints on {self.host}, "
                    f"{self.config.requests} requests per mode")
        try:
            return self.measurement_runner.run(self.endpoints, self.config.requests)
        finally:
            self.console.end_progress()

    def build_report(self, records: Dict[str, MeasurementRecord]) -> pd.DataFrame:
        return self.result_exporter.build_frame(records, include_ttfb=self.config.ttfb)

    def default_report_path(self, now: Optional[datetime] = None) -> Path:
        """<output_dir>/<host>_<timestamp>.csv"""
        stamp = (now or datetime.now()).strftime(REPORT_TIMESTAMP_FORMAT)
        return self.settings.output_dir / f"{self.host}_{stamp}{REPORT_SUFFIX}"

    def save_report(self, report: pd.DataFrame, output_path: Optional[Union[Path, str]] = None) -> Path:
        """Save the report to CSV."""
        return self.result_exporter.save_report(report, output_path or self.default_report_path())

    def plot_results(self, records: Dict[str, MeasurementRecord], output_path: Union[Path, str]) -> Optional[Path]:
        """Generate and save the median latency chart."""
        return self.visualization_generator.plot_medians(records, output_path)

    def close(self) -> None:
        self.session.close()
