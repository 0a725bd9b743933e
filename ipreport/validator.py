"""
Input validation and address classification utilities.

Validation of lookup arguments uses real parsing. Classification of
interface addresses uses the colon-count heuristic of the original tool,
so its results are stable for any string the operating system hands back.
"""

import ipaddress


class InputValidator:
    """Validator and classifier for IP address strings."""

    def is_valid_ip(self, ip_string: str) -> bool:
        """
        Validate if a string represents a valid IP address.

        Args:
            ip_string: String representation of an IP address

        The string is parsed as given: surrounding whitespace and IPv6
        zone suffixes ('%eth0') make it invalid.

        Returns:
            True if valid IPv4 or IPv6 address, False otherwise
        """
        if not ip_string or '%' in ip_string:
            return False

        try:
            ipaddress.ip_address(ip_string)
            return True
        except ValueError:
            return False

    def is_ipv4(self, address: str) -> bool:
        """
        Classify an address string as IPv4.

        Anything with fewer than two colons counts as IPv4. This is a
        heuristic, not a parse.

        Args:
            address: Address string, optionally with a /prefix

        Returns:
            True if the string is classified as IPv4
        """
        return address.count(':') < 2

    def is_ipv6(self, address: str) -> bool:
        """
        Classify an address string as IPv6 (two or more colons).

        Args:
            address: Address string, optionally with a /prefix

        Returns:
            True if the string is classified as IPv6
        """
        return address.count(':') >= 2

    def is_link_local(self, address: str) -> bool:
        """Check whether an address string is in the fe80 link-local range."""
        return address.lower().startswith('fe80')

    def strip_prefix(self, address: str) -> str:
        """
        Remove a trailing /prefixlen from an address string.

        Args:
            address: Address string such as '192.168.1.5/24'

        Returns:
            The bare address, e.g. '192.168.1.5'
        """
        return address.split('/', 1)[0]
