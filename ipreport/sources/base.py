"""
Base interface for outbound HTTP services.

Every source issues at most one blocking GET per call. Failures are
reported on the console and turned into a None result so a command can end
early without raising.
"""

from typing import Dict, Optional

import requests

from .. import __version__
from ..config import config
from ..output import print_error


class BaseSource:
    """Base class for HTTP-backed information sources."""

    def __init__(self, name: str, base_url: str, timeout: Optional[float] = None):
        """
        Initialize the source.

        Args:
            name: Human-readable name of the source
            base_url: HTTPS endpoint of the service
            timeout: Request timeout in seconds, None for no timeout
        """
        self.name = name
        self.base_url = base_url
        self.timeout = timeout

        if not self.base_url.startswith('https://'):
            raise ValueError("Only HTTPS endpoints are allowed")

    @property
    def headers(self) -> Dict[str, str]:
        return {'User-Agent': f'ipreport/{__version__}'}

    def _get(self, url: str) -> requests.Response:
        """
        Issue a GET request and fail on HTTP error statuses.

        Raises:
            requests.exceptions.RequestException: On transport or HTTP errors
        """
        response = requests.get(url, headers=self.headers, timeout=self.timeout)
        response.raise_for_status()
        return response

    def _handle_request_error(self, error: Exception, target: str) -> None:
        """
        Report a request error consistently.

        Args:
            error: The exception that occurred
            target: The address or URL being processed
        """
        print_error(f"Error in {self.name} source for target {target}: {error}")

    @staticmethod
    def default_timeout() -> Optional[float]:
        return config.get_request_timeout()
