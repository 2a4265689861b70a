"""Handles individual request execution and timing."""
import time
import logging
import requests

from perf_meter.const import DEFAULT_CHUNK_SIZE, DEFAULT_REQUEST_TIMEOUT
from .constants import MeasurementConstants
from .exceptions import TransportFailure
from .models import Mode, Sample


# Configure logging
logger = logging.getLogger(__name__)


class RequestExecutor:
    """Handles individual request execution and timing."""

    def __init__(self, timeout: float = DEFAULT_REQUEST_TIMEOUT, chunk_size: int = DEFAULT_CHUNK_SIZE):
        self.timeout = timeout
        self.chunk_size = chunk_size

    def send_request(self, session: requests.Session, url: str, mode: Mode) -> Sample:
        """
        Send a single GET request and measure its latency.

        The response is always streamed so headers arrive before the body is
        touched. In header mode the connection is closed without reading the
        body; in body mode the body is read to the end and discarded.

        Args:
            session: Requests session.
            url: Request URL, already made unique.
            mode: Retrieval mode.

        Returns:
            A successful Sample with total time, time-to-first-byte and
            response metadata. Any HTTP status counts as success.

        Raises:
            TransportFailure: If the request fails below the HTTP layer, or
                the body is still arriving once the timeout has elapsed.
        """
        start_time = time.perf_counter()
        deadline = start_time + self.timeout
        try:
            response = session.get(url, stream=True, timeout=self.timeout, allow_redirects=False)
            try:
                ttfb = response.elapsed.total_seconds()
                if mode is Mode.BODY:
                    for _ in response.iter_content(chunk_size=self.chunk_size):
                        # whole-body deadline; the requests read timeout applies per chunk
                        if time.perf_counter() > deadline:
                            raise requests.Timeout(f"Body not received within {self.timeout} seconds")
            finally:
                response.close()
        except requests.RequestException as e:
            logger.debug(f"Request failed: {e}")
            raise TransportFailure(url, e) from e

        end_time = time.perf_counter()
        return Sample(
            url=url,
            success=True,
            elapsed=end_time - start_time,
            ttfb=ttfb,
            status_code=response.status_code,
            content_type=response.headers.get(MeasurementConstants.CONTENT_TYPE_HEADER),
        )
