"""
IP address lookup reporting.

Validates a single address argument, fetches its metadata from the lookup
service and prints it with a fixed template.
"""

from typing import Optional

from .output import print_error, render_address_information
from .sources.ipinfo import IPinfoSource
from .validator import InputValidator

MISSING_ARGUMENT_MESSAGE = "IP address argument is required."
INVALID_ADDRESS_MESSAGE = "That is not a valid IP Address."


class LookupReporter:
    """Prints location and organization data for an IP address."""

    def __init__(self, source: Optional[IPinfoSource] = None):
        self.validator = InputValidator()
        self.source = source

    def report(self, argument: Optional[str]) -> int:
        """
        Validate, fetch, decode and render a lookup.

        Every failure prints a message and ends the command early.

        Args:
            argument: The address given on the command line, possibly None

        Returns:
            Exit status, always 0
        """
        if not argument:
            print_error(MISSING_ARGUMENT_MESSAGE)
            return 0

        if not self.validator.is_valid_ip(argument):
            print_error(INVALID_ADDRESS_MESSAGE)
            return 0

        source = self.source or IPinfoSource()
        info = source.lookup(argument)
        if info is None:
            return 0

        print(render_address_information(info))
        return 0
