"""
Public address source.

Asks a "what is my IP" service (api.ipify.org by default) for the address
this host is seen from on the internet. The response body is plain text.
"""

from typing import Optional

import requests

from .base import BaseSource
from ..config import config
from ..debug import debug_source_method


class PublicAddressSource(BaseSource):
    """Source for the host's externally visible address."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        super().__init__(
            "ipify",
            base_url or config.get_endpoint_url('public_ip'),
            timeout if timeout is not None else self.default_timeout(),
        )

    @debug_source_method
    def get_public_address(self) -> Optional[str]:
        """
        Get the public address of this host.

        Returns:
            Response body as received, or None on failure
        """
        try:
            response = self._get(self.base_url)
            return response.text
        except requests.exceptions.RequestException as e:
            self._handle_request_error(e, self.base_url)
            return None
