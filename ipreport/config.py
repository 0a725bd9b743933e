"""
Configuration management for ipreport.

This module reads endpoint, timeout, interface policy and debug settings
from the environment. Nothing is persisted and no configuration file is read.
"""

import os
import logging
from typing import Optional, Dict, Any

logger = logging.getLogger(__name__)

ENV_PREFIX = "IPREPORT_"

INTERFACE_POLICIES = ('deny', 'allow')


class Config:
    """Environment-backed configuration for ipreport."""

    def __init__(self):
        """Initialize configuration with the built-in service endpoints."""
        self._endpoints: Dict[str, str] = {
            'public_ip': 'https://api.ipify.org',
            'lookup': 'https://ipinfo.io',
        }

    def get_config_value(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value from the environment.

        Args:
            key: Configuration key, without the IPREPORT_ prefix
            default: Default value if key not set

        Returns:
            Configuration value or default
        """
        return os.getenv(f"{ENV_PREFIX}{key.upper()}", default)

    def get_endpoint_url(self, service: str) -> Optional[str]:
        """
        Get the HTTPS endpoint URL for a service.

        An override from IPREPORT_<SERVICE>_URL is honoured only when it uses
        HTTPS; otherwise the built-in endpoint is returned.

        Args:
            service: Service name ('public_ip' or 'lookup')

        Returns:
            Endpoint URL, or None for an unknown service
        """
        default = self._endpoints.get(service.lower())
        url = self.get_config_value(f"{service}_url")

        if not url:
            return default

        url = url.strip().rstrip('/')
        if not url.startswith('https://'):
            logger.warning(f"Non-HTTPS endpoint configured for {service}: {url}")
            return default

        return url

    def get_request_timeout(self) -> Optional[float]:
        """
        Get the outbound request timeout.

        Returns:
            Timeout in seconds bounded to 1-30, or None when unset or invalid
        """
        value = self.get_config_value('request_timeout')
        if value is None or not str(value).strip():
            return None

        try:
            timeout = float(value)
        except (ValueError, TypeError):
            logger.warning(f"Ignoring invalid request timeout: {value}")
            return None

        return max(1.0, min(30.0, timeout))

    def get_interface_policy(self) -> str:
        """
        Get the interface exclusion policy name.

        Returns:
            'deny' (skip loopback and docker interfaces) or 'allow'
            (keep only known adapter names)
        """
        policy = str(self.get_config_value('interface_policy', 'deny')).lower()
        if policy in INTERFACE_POLICIES:
            return policy

        logger.warning(f"Unknown interface policy '{policy}', using 'deny'")
        return 'deny'

    def is_debug_mode(self) -> bool:
        """
        Check if debug mode is enabled.

        Returns:
            True if debug mode is enabled
        """
        debug_value = os.getenv('IPREPORT_DEBUG', 'false').lower()
        return debug_value in ('true', '1', 'yes', 'on')

    def get_debug_level(self) -> str:
        """
        Get debug level for controlling verbosity.

        Returns:
            Debug level: 'off', 'basic', 'detailed', or 'verbose'
        """
        if not self.is_debug_mode():
            return 'off'

        level = os.getenv('IPREPORT_DEBUG_LEVEL', 'basic').lower()
        if level in ('basic', 'detailed', 'verbose'):
            return level
        return 'basic'


# Global configuration instance
config = Config()
