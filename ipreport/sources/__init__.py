"""
HTTP sources used by the reporters.
"""

from .base import BaseSource
from .ipinfo import IPinfoSource
from .public_ip import PublicAddressSource

__all__ = ['BaseSource', 'IPinfoSource', 'PublicAddressSource']
