"""
Local interface reporting.

This module enumerates the host's network interfaces, applies an interface
exclusion policy, picks one IPv4 and one IPv6 address per interface and
prints them, optionally preceded by the host's public address.
"""

import ipaddress
import socket
from typing import Callable, Dict, List, Optional, Tuple

import psutil

from .config import config
from .debug import debug_logger
from .output import Colors, colorize, print_error, render_interface, render_public_address
from .sources.public_ip import PublicAddressSource
from .validator import InputValidator

IP_FAMILIES = (socket.AF_INET, socket.AF_INET6)


def _prefix_length(netmask: Optional[str]) -> Optional[int]:
    """Convert a dotted or colon netmask into a prefix length."""
    if not netmask:
        return None
    try:
        return bin(int(ipaddress.ip_address(netmask))).count('1')
    except ValueError:
        return None


def list_interfaces() -> Dict[str, List[str]]:
    """
    Enumerate local interfaces and their bound IP addresses.

    Addresses are rendered as '<address>/<prefixlen>' when the netmask is
    known. Link-layer entries are dropped.

    Returns:
        Mapping of interface name to address strings, in OS order

    Raises:
        OSError: If the interface table cannot be read
    """
    interfaces: Dict[str, List[str]] = {}

    for name, entries in psutil.net_if_addrs().items():
        addresses = []
        for entry in entries:
            if entry.family not in IP_FAMILIES:
                continue
            prefix = _prefix_length(entry.netmask)
            address = entry.address or ""
            if address and prefix is not None:
                address = f"{address}/{prefix}"
            addresses.append(address)
        interfaces[name] = addresses

    return interfaces


class InterfacePolicy:
    """Decides which interfaces and addresses make it into the report."""

    name = 'base'
    skip_unaddressed = False

    def allows_interface(self, interface_name: str) -> bool:
        return True

    def allows_address(self, address: str) -> bool:
        return True


class DenyListPolicy(InterfacePolicy):
    """
    Skip loopback and docker interfaces, empty and link-local addresses,
    and interfaces left without any address.
    """

    name = 'deny'
    skip_unaddressed = True

    def __init__(self, excluded_prefixes: Tuple[str, ...] = ('lo', 'docker')):
        self.excluded_prefixes = excluded_prefixes
        self.validator = InputValidator()

    def allows_interface(self, interface_name: str) -> bool:
        return not interface_name.startswith(self.excluded_prefixes)

    def allows_address(self, address: str) -> bool:
        return bool(address) and not self.validator.is_link_local(address)


class AllowListPolicy(InterfacePolicy):
    """Keep only interfaces named like wired, wireless or VPN adapters."""

    name = 'allow'

    DEFAULT_PREFIXES = (
        'eth', 'en', 'wlan', 'wl', 'wwan', 'ww',
        'tun', 'tap', 'utun', 'wg', 'ppp', 'ipsec', 'vpn',
        'bond', 'br',
    )

    def __init__(self, allowed_prefixes: Tuple[str, ...] = DEFAULT_PREFIXES):
        self.allowed_prefixes = allowed_prefixes

    def allows_interface(self, interface_name: str) -> bool:
        return interface_name.startswith(self.allowed_prefixes)


POLICIES = {
    DenyListPolicy.name: DenyListPolicy,
    AllowListPolicy.name: AllowListPolicy,
}


def get_policy(name: Optional[str] = None) -> InterfacePolicy:
    """
    Build an interface policy by name.

    Args:
        name: 'deny' or 'allow'; the configured policy when None

    Raises:
        ValueError: If the name is unknown
    """
    name = (name or config.get_interface_policy()).lower()
    try:
        return POLICIES[name]()
    except KeyError:
        raise ValueError(f"Unknown interface policy: {name}") from None


def collect_addresses(addresses: List[str], policy: InterfacePolicy,
                      validator: Optional[InputValidator] = None) -> Tuple[str, str]:
    """
    Pick the IPv4 and IPv6 address of one interface.

    The last address seen of each family wins.

    Args:
        addresses: Address strings bound to the interface
        policy: Policy deciding which addresses count
        validator: Address classifier

    Returns:
        (ipv4, ipv6) with '' for a family that was not found
    """
    validator = validator or InputValidator()
    ipv4 = ipv6 = ""

    for address in addresses:
        if not policy.allows_address(address):
            continue
        if validator.is_ipv4(address):
            ipv4 = address
        if validator.is_ipv6(address):
            ipv6 = address

    return ipv4, ipv6


class InterfaceReporter:
    """Prints local interface addresses and optionally the public address."""

    def __init__(self, policy: Optional[InterfacePolicy] = None,
                 public_source: Optional[PublicAddressSource] = None,
                 interface_lister: Callable[[], Dict[str, List[str]]] = list_interfaces):
        """
        Initialize the reporter.

        Args:
            policy: Interface policy, the configured one when None
            public_source: Source for the public address
            interface_lister: Callable returning the interface table
        """
        self.policy = policy or get_policy()
        self.public_source = public_source
        self.interface_lister = interface_lister
        self.validator = InputValidator()

    def interface_rows(self, interfaces: Dict[str, List[str]]) -> List[Tuple[str, str, str]]:
        """
        Apply the policy to an interface table.

        Returns:
            List of (name, ipv4, ipv6) rows with prefixes removed
        """
        rows = []
        for name, addresses in interfaces.items():
            if not self.policy.allows_interface(name):
                continue

            ipv4, ipv6 = collect_addresses(addresses, self.policy, self.validator)
            if self.policy.skip_unaddressed and not ipv4 and not ipv6:
                continue

            rows.append((name, self.validator.strip_prefix(ipv4), self.validator.strip_prefix(ipv6)))
        return rows

    def report(self, include_public: bool = True) -> int:
        """
        Print the interface report.

        Args:
            include_public: Also fetch and print the public address

        Returns:
            Exit status, always 0
        """
        try:
            interfaces = self.interface_lister()
        except (OSError, RuntimeError) as e:
            print_error(f"localAddresses: {e}")
            return 0

        debug_logger.log_interfaces(interfaces)

        if include_public:
            source = self.public_source or PublicAddressSource()
            public_address = source.get_public_address()
            if public_address is not None:
                print(render_public_address(public_address))

        print(colorize("LOCAL INTERFACES:", Colors.MAGENTA))
        for name, ipv4, ipv6 in self.interface_rows(interfaces):
            print(render_interface(name, ipv4, ipv6))

        return 0
