"""Measurement package initialization."""
from .models import Mode, Metric, Sample, SampleSet, Stats, ModeMeasurement, MeasurementRecord
from .constants import MeasurementConstants
from .exceptions import MeasurementExecutionError, TransportFailure, MeasurementAborted, ReportLoadError
from .url_builder import UrlBuilder
from .request_session_manager import RequestSessionManager
from .request_executor import RequestExecutor
from .sampler import Sampler
from .latency_analyzer import LatencyAnalyzer
from .measurement_runner import MeasurementRunner
from .result_exporter import ResultExporter
from .console_reporter import ConsoleReporter
from .visualization_generator import VisualizationGenerator
from .performance_meter import PerformanceMeter
from .runner import MeterRunner

__all__ = [
    'Mode',
    'Metric',
    'Sample',
    'SampleSet',
    'Stats',
    'ModeMeasurement',
    'MeasurementRecord',
    'MeasurementConstants',
    'MeasurementExecutionError',
    'TransportFailure',
    'MeasurementAborted',
    'ReportLoadError',
    'UrlBuilder',
    'RequestSessionManager',
    'RequestExecutor',
    'Sampler',
    'LatencyAnalyzer',
    'MeasurementRunner',
    'ResultExporter',
    'ConsoleReporter',
    'VisualizationGenerator',
    'PerformanceMeter',
    'MeterRunner'
]
