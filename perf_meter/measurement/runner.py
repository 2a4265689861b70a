"""Measurement runner to orchestrate a full run and its output."""
from pathlib import Path
from typing import Dict, Optional, Union
import logging

from .exceptions import MeasurementAborted
from .models import MeasurementRecord
from .performance_meter import PerformanceMeter


# Configure logging
logger = logging.getLogger(__name__)


class MeterRunner:
    """Orchestrates measurement, report export and console output."""

    def __init__(self, meter: PerformanceMeter):
        self.meter = meter

    def run(self, output_path: Optional[Union[Path, str]] = None,
            plot_path: Optional[Union[Path, str]] = None) -> Dict[str, MeasurementRecord]:
        """
        Run the complete measurement process.

        Args:
            output_path: CSV destination; defaults to a timestamped file in the output directory.
            plot_path: Optional PNG destination for the median chart.

        Returns:
            Measurement records keyed by configured path.

        Raises:
            MeasurementAborted: If interrupted. Completed endpoints are still
                reported before the exception propagates.
        """
        try:
            records = self.meter.run_measurements()
        except MeasurementAborted as e:
            if e.completed:
                logger.warning(f"Reporting {len(e.completed)} endpoints measured before the interruption")
                self.report(e.completed, output_path)
            raise

        self.report(records, output_path, plot_path)
        failures = sum(1 for record in records.values() if record.is_failure)
        if failures:
            logger.warning(f"{failures} of {len(records)} endpoints had no successful samples")
        logger.info("Measurement completed successfully!")
        return records

    def report(self, records: Dict[str, MeasurementRecord], output_path: Optional[Union[Path, str]] = None,
               plot_path: Optional[Union[Path, str]] = None) -> Path:
        """Save the CSV, print the table and summary, and optionally plot."""
        report = self.meter.build_report(records)
        saved_path = self.meter.save_report(report, output_path)

        self.meter.console.print_table(report)
        self.meter.console.print_summary(records)
        self.meter.console.write()
        self.meter.console.write(f"Report written to {saved_path}")

        if plot_path:
            self.meter.plot_results(records, plot_path)
        return saved_path
