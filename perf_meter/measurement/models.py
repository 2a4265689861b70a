"""Data models for the measurement engine."""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Mode(str, Enum):
    """Whether a request retrieves the full body or only the headers."""
    BODY = "body"
    HEADER = "header"


class Metric(str, Enum):
    """Timing value a Stats instance is computed over."""
    ELAPSED = "elapsed"
    TTFB = "ttfb"


@dataclass(frozen=True)
class Sample:
    """One timed request attempt. Failed samples carry no timings or metadata."""
    url: str
    success: bool
    elapsed: Optional[float] = None
    ttfb: Optional[float] = None
    status_code: Optional[int] = None
    content_type: Optional[str] = None

    @classmethod
    def failed(cls, url: str) -> 'Sample':
        return cls(url=url, success=False)


@dataclass
class SampleSet:
    """All attempts for one endpoint under one mode, in issue order."""
    mode: Mode
    samples: List[Sample] = field(default_factory=list)

    def add(self, sample: Sample) -> None:
        self.samples.append(sample)

    @property
    def attempts(self) -> int:
        return len(self.samples)

    @property
    def successful(self) -> List[Sample]:
        return [sample for sample in self.samples if sample.success]

    @property
    def success_count(self) -> int:
        return len(self.successful)

    @property
    def failure_count(self) -> int:
        return self.attempts - self.success_count

    @property
    def is_empty(self) -> bool:
        """True when no attempt succeeded."""
        return self.success_count == 0

    def values(self, metric: Metric) -> List[float]:
        """Timing values of the successful samples for the given metric."""
        return [getattr(sample, metric.value) for sample in self.successful]

    def first_success(self) -> Optional[Sample]:
        for sample in self.samples:
            if sample.success:
                return sample
        return None


@dataclass(frozen=True)
class Stats:
    """Summary statistics over the successful timings of a SampleSet."""
    count: int
    total: float
    median: float
    average: float
    min: float
    max: float
    requests_per_second: Optional[float]


@dataclass(frozen=True)
class ModeMeasurement:
    """Samples and derived statistics for one endpoint under one mode."""
    mode: Mode
    samples: SampleSet
    stats: Optional[Stats]
    ttfb_stats: Optional[Stats] = None
    status_code: Optional[int] = None
    content_type: Optional[str] = None


@dataclass(frozen=True)
class MeasurementRecord:
    """Measurement of one endpoint in both modes."""
    path: str
    url: str
    body: ModeMeasurement
    header: ModeMeasurement

    @property
    def is_failure(self) -> bool:
        """True when either mode has no successful sample."""
        return self.body.stats is None or self.header.stats is None

    @property
    def status_code(self) -> Optional[int]:
        return self.body.status_code if self.body.status_code is not None else self.header.status_code

    @property
    def content_type(self) -> Optional[str]:
        return self.body.content_type if self.body.content_type is not None else self.header.content_type

    def for_mode(self, mode: Mode) -> ModeMeasurement:
        return self.body if mode is Mode.BODY else self.header
