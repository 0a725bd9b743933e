"""
IPinfo lookup source.

This source uses the free IPinfo service (ipinfo.io) to get location and
organization data for an IP address. No API key required for basic usage.
"""

from typing import Optional

import requests

from .base import BaseSource
from ..config import config
from ..debug import debug_source_method
from ..models import AddressInformation


class IPinfoSource(BaseSource):
    """Lookup source using the IPinfo service."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        super().__init__(
            "IPinfo",
            base_url or config.get_endpoint_url('lookup'),
            timeout if timeout is not None else self.default_timeout(),
        )

    @debug_source_method
    def lookup(self, ip_address: str) -> Optional[AddressInformation]:
        """
        Look up metadata for an IP address.

        Args:
            ip_address: A validated IP address

        Returns:
            Decoded AddressInformation, or None if the request, the body read
            or the JSON decode failed
        """
        try:
            response = self._get(f"{self.base_url}/{ip_address}")
            return AddressInformation.from_text(response.text)
        except requests.exceptions.RequestException as e:
            self._handle_request_error(e, ip_address)
            return None
        except ValueError as e:
            self._handle_request_error(e, ip_address)
            return None
