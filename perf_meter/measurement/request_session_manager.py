"""Manages HTTP request sessions for measurement."""
import logging
import requests
import urllib3
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from perf_meter.const import DEFAULT_USER_AGENT
from .constants import MeasurementConstants


# Configure logging
logger = logging.getLogger(__name__)


class RequestSessionManager:
    """Manages HTTP request sessions without retries or certificate checks."""

    @staticmethod
    def create_session(user_agent: str = DEFAULT_USER_AGENT) -> requests.Session:
        """
        Create a session suited to timing measurements.

        Failed attempts are counted rather than retried, so the adapter never
        retries. Certificates are not verified, which lets staging hosts with
        self-signed certificates be measured; pass your own session to the
        Sampler when verification is required.
        """
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

        session = requests.Session()
        session.verify = False
        session.headers.update({
            "User-Agent": user_agent,
            "Connection": MeasurementConstants.CONNECTION_HEADER,
        })
        adapter = HTTPAdapter(max_retries=Retry(total=0, redirect=0, raise_on_redirect=False))
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        logger.debug("Created measurement session without retries and TLS verification")
        return session
