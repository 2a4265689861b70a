"""Console output: run header, progress glyphs, report table and summary."""
import sys
from typing import Dict, Optional, TextIO

import pandas as pd

from perf_meter.const import (
    APP_NAME,
    APP_VERSION,
    COLOR_BOLD_BLUE,
    COLOR_BOLD_GREEN,
    COLOR_BOLD_YELLOW,
    COLOR_GREEN,
    COLOR_RED,
    COLOR_RESET,
)
from .constants import MeasurementConstants
from .models import MeasurementRecord, Stats
from .result_exporter import ResultExporter


class ConsoleReporter:
    """Writes human-readable output to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None, use_color: bool = True):
        self._stream = stream
        self.use_color = use_color

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def colorize(self, text: str, color: str) -> str:
        if not self.use_color:
            return text
        return f"{color}{text}{COLOR_RESET}"

    def write(self, text: str = "") -> None:
        self.stream.write(text + "\n")

    def banner(self, failure: Optional[str] = None) -> str:
        """Version banner, with an optional failure message underneath."""
        lines = [f"{self.colorize(APP_NAME, COLOR_GREEN)} version {APP_VERSION}"]
        if failure:
            lines.append(self.colorize(failure, COLOR_RED))
        return "\n".join(lines)

    def run_header(self, host: str, requests: int, endpoints: int) -> None:
        self.write(f"Start profile for {self.colorize(host, COLOR_BOLD_YELLOW)}")
        self.write(f"  requests: {self.colorize(str(requests), COLOR_BOLD_GREEN)}")
        self.write(f"  urls:     {self.colorize(str(endpoints), COLOR_BOLD_GREEN)}")
        self.write()

    def progress(self, success: bool) -> None:
        """One glyph per request attempt."""
        if success:
            glyph = MeasurementConstants.PROGRESS_SUCCESS
        else:
            glyph = self.colorize(MeasurementConstants.PROGRESS_FAILURE, COLOR_RED)
        self.stream.write(glyph)
        self.stream.flush()

    def end_progress(self) -> None:
        self.write()

    def render_table(self, frame: pd.DataFrame) -> str:
        """Render report rows as an aligned table of their CSV cell text."""
        if frame.empty:
            return "  ".join(str(column) for column in frame.columns)
        return ResultExporter.display_frame(frame).to_string(index=False)

    def print_table(self, frame: pd.DataFrame) -> None:
        self.write()
        self.write(self.render_table(frame))

    @staticmethod
    def format_time(value: Optional[float]) -> str:
        if value is None:
            return "-"
        return f"{round(value, 3)} sec"

    def _summary_line(self, label: str, body: Stats, header: Stats, attribute: str) -> str:
        body_value = self.format_time(getattr(body, attribute))
        header_value = self.format_time(getattr(header, attribute))
        return f"  {label:<7} {body_value} ({header_value})"

    def print_summary(self, records: Dict[str, MeasurementRecord]) -> None:
        """Per-endpoint median/min/max digest; header-only values in parentheses."""
        self.write()
        for path, record in records.items():
            self.write(self.colorize(path, COLOR_BOLD_BLUE))
            if record.is_failure:
                self.write(f"  {self.colorize('failed', COLOR_RED)}")
                continue
            for label, attribute in (("median:", "median"), ("min:", "min"), ("max:", "max")):
                self.write(self._summary_line(label, record.body.stats, record.header.stats, attribute))
