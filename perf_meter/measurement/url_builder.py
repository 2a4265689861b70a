"""Builds endpoint URLs and cache-busting request URLs."""
import hashlib
import itertools
import time
import uuid
from typing import Dict, Iterable
from urllib.parse import urlsplit, urlunsplit

from .constants import MeasurementConstants


class UrlBuilder:
    """Resolves configured pages against a base URL and makes request URLs unique."""

    _counter = itertools.count()

    @staticmethod
    def resolve_base_url(base: str) -> str:
        """Trim surrounding slashes from the base and append exactly one."""
        return base.strip('/') + '/'

    @staticmethod
    def resolve_pages(base: str, paths: Iterable[str]) -> Dict[str, str]:
        """
        Map every configured path to its absolute URL.

        Args:
            base: Root URL.
            paths: Relative page paths, in report order.

        Returns:
            Ordered mapping of configured path to absolute URL.
        """
        resolved_base = UrlBuilder.resolve_base_url(base)
        pages = {}
        for path in paths:
            slug = path[1:] if path.startswith('/') else path
            pages[path] = resolved_base + slug
        return pages

    @classmethod
    def make_unique_url(cls, url: str) -> str:
        """
        Add a uniqueRequest query parameter that differs on every call.

        The parameter joins the query component, so a fragment stays last
        and the parameter is always sent to the server.
        """
        parts = urlsplit(url)
        if not parts.query or parts.query.endswith('&'):
            delimiter = ''
        else:
            delimiter = '&'

        seed = f"{time.time_ns()}{url}{next(cls._counter)}{uuid.uuid4().hex}"
        token = hashlib.md5(seed.encode('utf-8')).hexdigest()
        query = f"{parts.query}{delimiter}{MeasurementConstants.UNIQUE_REQUEST_PARAM}={token}"
        return urlunsplit(parts._replace(query=query))
