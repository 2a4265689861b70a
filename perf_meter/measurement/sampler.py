"""Performs one timed, cache-busted request per call."""
import logging
from typing import Callable, Optional

import requests

from .exceptions import TransportFailure
from .models import Mode, Sample
from .request_executor import RequestExecutor
from .url_builder import UrlBuilder


# Configure logging
logger = logging.getLogger(__name__)

ProgressCallback = Callable[[bool], None]


class Sampler:
    """Takes single samples of an endpoint, turning transport failures into failed samples."""

    def __init__(self, session: requests.Session, request_executor: RequestExecutor,
                 progress: Optional[ProgressCallback] = None):
        self.session = session
        self.request_executor = request_executor
        self.progress = progress

    def measure_once(self, url: str, mode: Mode) -> Sample:
        """
        Measure one request against a unique variant of url.

        Args:
            url: Endpoint URL.
            mode: Retrieval mode.

        Returns:
            The Sample; success is False when the transport failed.
        """
        unique_url = UrlBuilder.make_unique_url(url)
        try:
            sample = self.request_executor.send_request(self.session, unique_url, mode)
        except TransportFailure as e:
            logger.debug(f"Counting failed {mode.value} sample for {url}: {e.cause}")
            sample = Sample.failed(unique_url)

        if self.progress is not None:
            self.progress(sample.success)
        return sample
