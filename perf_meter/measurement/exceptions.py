"""Custom exceptions for the measurement engine."""
from typing import Dict, Optional


class MeasurementExecutionError(Exception):
    """Base exception for measurement execution failures."""
    pass


class TransportFailure(MeasurementExecutionError):
    """Exception raised when a single HTTP attempt fails below the HTTP layer."""

    def __init__(self, url: str, cause: Optional[Exception] = None):
        super().__init__(f"Request to {url} failed: {cause}")
        self.url = url
        self.cause = cause


class MeasurementAborted(MeasurementExecutionError):
    """Exception raised when a run is interrupted before every endpoint was measured."""

    def __init__(self, completed: Optional[Dict] = None):
        super().__init__("Measurement aborted")
        self.completed = completed or {}


class ReportLoadError(Exception):
    """Exception raised when a saved report cannot be read back."""
    pass
