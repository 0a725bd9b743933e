"""
Console rendering for ipreport.

Colors are applied only when stdout is a terminal and NO_COLOR is unset,
so piped and captured output stays plain text.
"""

import os
import sys

from .models import AddressInformation


class Colors:
    """ANSI color codes for terminal output"""
    RESET = '\033[0m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    MAGENTA = '\033[35m'
    WHITE = '\033[37m'


LOOKUP_TEMPLATE = (
    "{heading}\n"
    "  Address: {ip}\n"
    "  Location: {city}, {region} {country} ({postal})\n"
    "  Organization: {org}"
)


def supports_color() -> bool:
    """Check if stdout supports colors"""
    if os.getenv('NO_COLOR'):
        return False
    return hasattr(sys.stdout, 'isatty') and sys.stdout.isatty()


def colorize(text: str, color: str) -> str:
    """Apply color if supported"""
    if supports_color():
        return f"{color}{text}{Colors.RESET}"
    return text


def print_error(message) -> None:
    """Print a command-level error in red."""
    print(colorize(str(message), Colors.RED))


def render_public_address(address: str) -> str:
    return f"{colorize('PUBLIC ADDRESS:', Colors.MAGENTA)} {colorize(address, Colors.WHITE)}"


def render_interface(name: str, ipv4: str, ipv6: str) -> str:
    """Render one interface line as '  <name>:  <ipv4> (<ipv6>)'."""
    return colorize(f"  {name}: ", Colors.GREEN) + f" {ipv4} ({ipv6})"


def render_address_information(info: AddressInformation) -> str:
    """
    Render a lookup result with the fixed report template.

    Args:
        info: Decoded lookup record

    Returns:
        Multi-line report text
    """
    return LOOKUP_TEMPLATE.format(
        heading=colorize("IPINFO - Address Information", Colors.MAGENTA),
        ip=info.ip,
        city=info.city,
        region=info.region,
        country=info.country,
        postal=info.postal,
        org=info.org,
    )
