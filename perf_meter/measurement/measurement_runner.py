"""Runs the sequential sampling loop over all endpoints and modes."""
import logging
from typing import Dict, Optional

from .exceptions import MeasurementAborted
from .latency_analyzer import LatencyAnalyzer
from .models import MeasurementRecord, Metric, Mode, ModeMeasurement, SampleSet
from .sampler import Sampler


# Configure logging
logger = logging.getLogger(__name__)


class MeasurementRunner:
    """Samples every endpoint in both modes, one request at a time."""

    def __init__(self, sampler: Sampler, latency_analyzer: Optional[LatencyAnalyzer] = None,
                 include_ttfb: bool = False):
        self.sampler = sampler
        self.latency_analyzer = latency_analyzer or LatencyAnalyzer()
        self.include_ttfb = include_ttfb

    def run(self, endpoints: Dict[str, str], requests_per_endpoint: int) -> Dict[str, MeasurementRecord]:
        """
        Measure all endpoints in input order.

        Args:
            endpoints: Ordered mapping of configured path to absolute URL.
            requests_per_endpoint: Requests per endpoint and mode.

        Returns:
            Ordered mapping of configured path to MeasurementRecord.

        Raises:
            ValueError: If requests_per_endpoint is not a positive integer.
            MeasurementAborted: If interrupted; carries the records completed
                so far. The endpoint in progress is dropped.
        """
        if isinstance(requests_per_endpoint, bool) or not isinstance(requests_per_endpoint, int) \
                or requests_per_endpoint <= 0:
            raise ValueError(f"requests_per_endpoint must be a positive integer, got {requests_per_endpoint!r}")

        records: Dict[str, MeasurementRecord] = {}
        try:
            for path, url in endpoints.items():
                records[path] = self.measure_endpoint(path, url, requests_per_endpoint)
        except KeyboardInterrupt as e:
            logger.warning(f"Measurement interrupted after {len(records)} of {len(endpoints)} endpoints")
            raise MeasurementAborted(completed=records) from e

        return records

    def measure_endpoint(self, path: str, url: str, requests_per_endpoint: int) -> MeasurementRecord:
        """Measure one endpoint in body mode, then header mode."""
        logger.debug(f"Measuring {url} ({requests_per_endpoint} requests per mode)")
        body = self.measure_mode(url, Mode.BODY, requests_per_endpoint)
        header = self.measure_mode(url, Mode.HEADER, requests_per_endpoint)
        record = MeasurementRecord(path=path, url=url, body=body, header=header)

        if record.is_failure:
            failed_modes = [m.mode.value for m in (body, header) if m.stats is None]
            logger.warning(f"No successful {'/'.join(failed_modes)} request to {url}, reporting failure row")
        return record

    def measure_mode(self, url: str, mode: Mode, requests_per_endpoint: int) -> ModeMeasurement:
        """Collect requests_per_endpoint samples for one mode and aggregate them."""
        sample_set = SampleSet(mode=mode)
        for _ in range(requests_per_endpoint):
            sample_set.add(self.sampler.measure_once(url, mode))

        if sample_set.failure_count:
            logger.debug(f"{sample_set.failure_count} of {sample_set.attempts} {mode.value} requests to {url} failed")

        first = sample_set.first_success()
        return ModeMeasurement(
            mode=mode,
            samples=sample_set,
            stats=self.latency_analyzer.aggregate(sample_set, Metric.ELAPSED),
            ttfb_stats=self.latency_analyzer.aggregate(sample_set, Metric.TTFB) if self.include_ttfb else None,
            status_code=first.status_code if first else None,
            content_type=first.content_type if first else None,
        )
