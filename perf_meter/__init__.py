"""perf-meter: HTTP endpoint latency measurement."""
from .const import APP_VERSION

__version__ = APP_VERSION
