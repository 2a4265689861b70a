"""Constants for the measurement engine."""


class MeasurementConstants:
    """Centralized constants for measurement and reporting."""
    UNIQUE_REQUEST_PARAM = "uniqueRequest"
    PROGRESS_SUCCESS = "."
    PROGRESS_FAILURE = "F"
    CONNECTION_HEADER = "close"
    CONTENT_TYPE_HEADER = "Content-Type"
    RPS_PRECISION = 2
    REPORT_PRECISION = 6
    CSV_DELIMITER = ";"
    CSV_QUOTE = '"'
    CSV_QUOTE_REPLACEMENT = "'"
    CSV_TRUE = "1"
    CSV_FALSE = ""
    HEADER_SUFFIX = " (head)"
    TTFB_PREFIX = "[ttfb] "
    # (Stats attribute, report column)
    METRIC_COLUMNS = [
        ("average", "average"),
        ("median", "median"),
        ("min", "min"),
        ("max", "max"),
        ("requests_per_second", "requests per sec"),
    ]
    URL_COLUMN = "url"
    STATUS_COLUMN = "status"
    TYPE_COLUMN = "type"
    FAILURE_COLUMN = "failure"
