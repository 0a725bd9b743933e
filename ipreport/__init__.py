"""
ipreport - local interface and IP address information reporter.

This package lists the host's network interface addresses, optionally with
its public address, and looks up geolocation and organization data for
arbitrary IP addresses using public HTTP services.
"""

__version__ = "0.1.0"
__author__ = "ipreport"
__license__ = "Apache License 2.0"
