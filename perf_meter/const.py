"""Constants for perf-meter."""

# Application identity
APP_NAME = "PerformanceMeasurement"
APP_VERSION = "1.0"

# Default configuration values
DEFAULT_REQUEST_TIMEOUT = 30.0  # seconds
DEFAULT_OUTPUT_DIR = "reports"
DEFAULT_CHUNK_SIZE = 65536
DEFAULT_USER_AGENT = f"perf-meter/{APP_VERSION}"
ENV_PREFIX = "PERF_METER_"

# Logging configuration
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Library log levels
LIBRARY_LOG_LEVELS = {
    "urllib3": "WARNING",
    "matplotlib": "WARNING",
    "PIL": "WARNING"
}

# Exit codes
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2
EXIT_INTERRUPTED = 130

# Report file naming
REPORT_TIMESTAMP_FORMAT = "%Y%m%d-%H%M%S"
REPORT_SUFFIX = ".csv"

# ANSI colors
COLOR_RESET = "\033[0m"
COLOR_GREEN = "\033[0;32m"
COLOR_RED = "\033[0;31m"
COLOR_BOLD_GREEN = "\033[1;32m"
COLOR_BOLD_YELLOW = "\033[1;33m"
COLOR_BOLD_BLUE = "\033[1;34m"
