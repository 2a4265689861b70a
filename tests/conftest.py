"""Shared test configuration and fixtures for all tests."""

import io
from datetime import timedelta
from typing import List, Optional
from unittest.mock import MagicMock

import pytest

from perf_meter.measurement.console_reporter import ConsoleReporter
from perf_meter.measurement.latency_analyzer import LatencyAnalyzer
from perf_meter.measurement.models import (
    MeasurementRecord, Metric, Mode, ModeMeasurement, Sample, SampleSet,
)
from perf_meter.shared.config import MeasurementConfig, Settings
from .test_const import (
    TEST_BASE, TEST_CONTENT_TYPE, TEST_PAGES, TEST_REQUESTS, TEST_STATUS, TEST_TTFB,
    TEST_URL_A,
)


def make_response(status_code: int = TEST_STATUS, content_type: Optional[str] = TEST_CONTENT_TYPE,
                  elapsed: float = TEST_TTFB, chunks=(b"<html>", b"</html>")):
    """Build a mock streamed requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.headers = {"Content-Type": content_type} if content_type else {}
    response.elapsed = timedelta(seconds=elapsed)
    response.iter_content.return_value = iter(chunks)
    return response


def ok_sample(elapsed: float, ttfb: Optional[float] = None, status_code: int = TEST_STATUS,
              content_type: str = TEST_CONTENT_TYPE, url: str = TEST_URL_A) -> Sample:
    return Sample(url=url, success=True, elapsed=elapsed,
                  ttfb=ttfb if ttfb is not None else elapsed / 2,
                  status_code=status_code, content_type=content_type)


def failed_sample(url: str = TEST_URL_A) -> Sample:
    return Sample.failed(url)


def make_sample_set(mode: Mode, elapsed_values: List[float], failures: int = 0) -> SampleSet:
    sample_set = SampleSet(mode=mode)
    for _ in range(failures):
        sample_set.add(failed_sample())
    for value in elapsed_values:
        sample_set.add(ok_sample(value))
    return sample_set


def make_mode_measurement(mode: Mode, elapsed_values: List[float], include_ttfb: bool = False) -> ModeMeasurement:
    sample_set = make_sample_set(mode, elapsed_values)
    first = sample_set.first_success()
    return ModeMeasurement(
        mode=mode,
        samples=sample_set,
        stats=LatencyAnalyzer.aggregate(sample_set, Metric.ELAPSED),
        ttfb_stats=LatencyAnalyzer.aggregate(sample_set, Metric.TTFB) if include_ttfb else None,
        status_code=first.status_code if first else None,
        content_type=first.content_type if first else None,
    )


def make_record(path: str, body_values: List[float], header_values: List[float],
                include_ttfb: bool = False, url: str = TEST_URL_A) -> MeasurementRecord:
    return MeasurementRecord(
        path=path,
        url=url,
        body=make_mode_measurement(Mode.BODY, body_values, include_ttfb),
        header=make_mode_measurement(Mode.HEADER, header_values, include_ttfb),
    )


@pytest.fixture
def mock_session():
    """Mock requests session answering every GET with a fresh 200 response."""
    session = MagicMock()
    session.get.side_effect = lambda *args, **kwargs: make_response()
    return session


@pytest.fixture
def console_stream():
    return io.StringIO()


@pytest.fixture
def console(console_stream):
    """Colorless console reporter writing to an in-memory stream."""
    return ConsoleReporter(stream=console_stream, use_color=False)


@pytest.fixture
def measurement_config():
    return MeasurementConfig(base=TEST_BASE, pages=TEST_PAGES, requests=TEST_REQUESTS)


@pytest.fixture
def settings(tmp_path):
    return Settings(output_dir=tmp_path, use_color=False)


@pytest.fixture
def config_file(tmp_path):
    """Factory writing YAML text to a config file and returning its path."""
    def _write(text: str, name: str = "perf.yaml"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
