"""Handles exporting measurement records to the CSV report."""
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import numpy as np
import pandas as pd

from .constants import MeasurementConstants as MC
from .exceptions import ReportLoadError
from .models import MeasurementRecord, Stats


# Configure logging
logger = logging.getLogger(__name__)


class ResultExporter:
    """Handles exporting measurement records to the CSV report."""

    @staticmethod
    def metric_columns(prefix: str = "", suffix: str = "") -> List[str]:
        return [f"{prefix}{label}{suffix}" for _, label in MC.METRIC_COLUMNS]

    @staticmethod
    def columns(include_ttfb: bool) -> List[str]:
        """Report columns in output order."""
        columns = [MC.URL_COLUMN, MC.STATUS_COLUMN, MC.TYPE_COLUMN]
        columns += ResultExporter.metric_columns()
        columns += ResultExporter.metric_columns(suffix=MC.HEADER_SUFFIX)
        if include_ttfb:
            columns += ResultExporter.metric_columns(prefix=MC.TTFB_PREFIX)
            columns += ResultExporter.metric_columns(prefix=MC.TTFB_PREFIX, suffix=MC.HEADER_SUFFIX)
        columns.append(MC.FAILURE_COLUMN)
        return columns

    @staticmethod
    def _fill_metrics(row: Dict[str, Any], stats: Optional[Stats], prefix: str = "", suffix: str = "") -> None:
        if stats is None:
            return
        for attribute, label in MC.METRIC_COLUMNS:
            row[f"{prefix}{label}{suffix}"] = getattr(stats, attribute)

    @staticmethod
    def build_row(record: MeasurementRecord, include_ttfb: bool) -> Dict[str, Any]:
        """
        Build one report row.

        Failure records carry only the url and the failure flag.
        """
        row: Dict[str, Any] = {MC.URL_COLUMN: record.path, MC.FAILURE_COLUMN: record.is_failure}
        if record.is_failure:
            return row

        row[MC.STATUS_COLUMN] = record.status_code
        row[MC.TYPE_COLUMN] = record.content_type
        ResultExporter._fill_metrics(row, record.body.stats)
        ResultExporter._fill_metrics(row, record.header.stats, suffix=MC.HEADER_SUFFIX)
        if include_ttfb:
            ResultExporter._fill_metrics(row, record.body.ttfb_stats, prefix=MC.TTFB_PREFIX)
            ResultExporter._fill_metrics(row, record.header.ttfb_stats, prefix=MC.TTFB_PREFIX, suffix=MC.HEADER_SUFFIX)
        return row

    @staticmethod
    def build_frame(records: Dict[str, MeasurementRecord], include_ttfb: bool) -> pd.DataFrame:
        """
        Build the report table, one row per record in measurement order.

        Args:
            records: Measurement records keyed by configured path.
            include_ttfb: Whether to add the time-to-first-byte columns.

        Returns:
            DataFrame of python values; absent cells are missing (NaN/None).
        """
        rows = [ResultExporter.build_row(record, include_ttfb) for record in records.values()]
        return pd.DataFrame(rows, columns=ResultExporter.columns(include_ttfb), dtype=object)

    @staticmethod
    def format_cell(value: Any, quote: bool = True) -> str:
        """
        Render one cell.

        Booleans become 1 or an empty string, numbers are written bare, and
        strings are quoted with embedded double quotes turned into single ones.
        """
        if value is None or (not isinstance(value, str) and pd.isna(value)):
            return ""
        if isinstance(value, (bool, np.bool_)):
            return MC.CSV_TRUE if value else MC.CSV_FALSE
        if isinstance(value, (int, np.integer)):
            return str(int(value))
        if isinstance(value, (float, np.floating)):
            return np.format_float_positional(float(value), precision=MC.REPORT_PRECISION, trim="0")
        text = str(value)
        if not quote:
            return text
        return f"{MC.CSV_QUOTE}{text.replace(MC.CSV_QUOTE, MC.CSV_QUOTE_REPLACEMENT)}{MC.CSV_QUOTE}"

    @staticmethod
    def to_csv_text(frame: pd.DataFrame) -> str:
        """Render the report as ';'-delimited CSV text with a header row."""
        lines = [MC.CSV_DELIMITER.join(ResultExporter.format_cell(column) for column in frame.columns)]
        for row in frame.itertuples(index=False, name=None):
            lines.append(MC.CSV_DELIMITER.join(ResultExporter.format_cell(value) for value in row))
        return "\n".join(lines) + "\n"

    @staticmethod
    def display_frame(frame: pd.DataFrame) -> pd.DataFrame:
        """The report as cell text, unquoted, for console rendering."""
        return frame.apply(lambda column: column.map(lambda value: ResultExporter.format_cell(value, quote=False)))

    @staticmethod
    def save_report(frame: pd.DataFrame, output_path: Union[Path, str]) -> Path:
        """
        Save the report to CSV.

        Args:
            frame: Report table from build_frame.
            output_path: Path to save CSV; parent directories are created.

        Returns:
            The path written.
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(ResultExporter.to_csv_text(frame), encoding="utf-8")
        logger.info(f"CSV saved: {output_path}")
        return output_path

    @staticmethod
    def load_report(input_path: Union[Path, str]) -> pd.DataFrame:
        """
        Load a saved report without running any measurement.

        Args:
            input_path: Path to a CSV written by save_report.

        Returns:
            DataFrame of cell text exactly as stored, with quotes removed.

        Raises:
            ReportLoadError: If the file is missing, empty or malformed.
        """
        try:
            df = pd.read_csv(input_path, sep=MC.CSV_DELIMITER, quotechar=MC.CSV_QUOTE,
                             dtype=str, keep_default_na=False)
        except FileNotFoundError as e:
            raise ReportLoadError(f"Report not found: {input_path}") from e
        except pd.errors.EmptyDataError as e:
            raise ReportLoadError(f"Report is empty: {input_path}") from e
        except pd.errors.ParserError as e:
            raise ReportLoadError(f"Report is malformed: {input_path}: {e}") from e

        logger.info(f"Report loaded from CSV: {input_path}")
        return df
