"""Analyzes and computes latency statistics."""
import logging
from typing import Optional, Sequence
import numpy as np

from .constants import MeasurementConstants
from .models import Metric, SampleSet, Stats


# Configure logging
logger = logging.getLogger(__name__)


class LatencyAnalyzer:
    """Analyzes and computes latency statistics."""

    @staticmethod
    def median(ordered: Sequence[float]) -> float:
        """
        Median of an ascending-sorted, non-empty sequence.

        Even lengths average the two middle values.

        Raises:
            ValueError: If the sequence is empty.
        """
        count = len(ordered)
        if count == 0:
            raise ValueError("median of an empty sequence")
        if count % 2 == 0:
            return (float(ordered[count // 2 - 1]) + float(ordered[count // 2])) / 2
        if count == 1:
            return float(ordered[0])
        return float(ordered[(count - 1) // 2])

    @staticmethod
    def requests_per_second(count: int, total: float) -> Optional[float]:
        """Throughput rounded to two decimals, or None when total is zero."""
        if total <= 0:
            logger.warning(f"Total time of {count} samples is {total}, requests per second is undefined")
            return None
        return round(count / total, MeasurementConstants.RPS_PRECISION)

    @staticmethod
    def compute_stats(values: Sequence[float]) -> Optional[Stats]:
        """
        Compute summary statistics over timing values.

        Args:
            values: Timing measurements in seconds.

        Returns:
            Stats, or None when there are no values.
        """
        if len(values) == 0:
            return None

        ordered = np.sort(np.asarray(values, dtype=float), kind="stable")
        count = len(ordered)
        total = float(np.sum(ordered))

        return Stats(
            count=count,
            total=total,
            median=LatencyAnalyzer.median(ordered),
            average=total / count,
            min=float(ordered[0]),
            max=float(ordered[-1]),
            requests_per_second=LatencyAnalyzer.requests_per_second(count, total),
        )

    @staticmethod
    def aggregate(sample_set: SampleSet, metric: Metric = Metric.ELAPSED) -> Optional[Stats]:
        """Statistics over the successful samples of a set, or None if there are none."""
        return LatencyAnalyzer.compute_stats(sample_set.values(metric))
