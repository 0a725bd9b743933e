"""
Command-line entry point for ipreport.
"""

import os
import sys
import argparse
from typing import List, Optional

from .config import INTERFACE_POLICIES
from .debug import debug_logger
from .interfaces import InterfaceReporter, get_policy
from .lookup import LookupReporter


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with the address and lookup subcommands."""
    parser = argparse.ArgumentParser(
        prog='ipreport',
        description='Get IP address information.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables:
  IPREPORT_PUBLIC_IP_URL=https://...  - Public address endpoint (HTTPS only)
  IPREPORT_LOOKUP_URL=https://...     - Lookup endpoint (HTTPS only)
  IPREPORT_REQUEST_TIMEOUT=10         - Request timeout in seconds (default: none)
  IPREPORT_INTERFACE_POLICY=deny      - Interface policy: deny or allow
  IPREPORT_DEBUG=true                 - Enable debug mode with diagnostic output
  IPREPORT_DEBUG_LEVEL=basic          - Debug verbosity: basic, detailed, verbose

Examples:
  ipreport address                  # Local interfaces and public address
  ipreport a --no-public            # Local interfaces only
  ipreport lookup 8.8.8.8           # Location and organization of an address
"""
    )

    parser.add_argument('--debug', action='store_true',
                        help='Enable debug mode with low-level diagnostic output')
    parser.add_argument('--debug-level', choices=['basic', 'detailed', 'verbose'], default='basic',
                        help='Debug verbosity level (default: basic)')

    subparsers = parser.add_subparsers(dest='command', metavar='command')

    address = subparsers.add_parser('address', aliases=['a'],
                                    help='get local IP address information')
    address.add_argument('--no-public', dest='public', action='store_false',
                         help='Do not fetch the public address')
    address.add_argument('--policy', choices=INTERFACE_POLICIES,
                         help='Interface policy: deny skips lo*/docker*, allow keeps known adapters')
    address.set_defaults(handler=run_address)

    lookup = subparsers.add_parser('lookup', aliases=['l'],
                                   help='lookup an IP address')
    lookup.add_argument('ip', nargs='?', default='', help='IP address to look up')
    lookup.set_defaults(handler=run_lookup)

    return parser


def run_address(args: argparse.Namespace) -> int:
    return InterfaceReporter(policy=get_policy(args.policy)).report(include_public=args.public)


def run_lookup(args: argparse.Namespace) -> int:
    return LookupReporter().report(args.ip)


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point."""
    parser = build_parser()
    args, extras = parser.parse_known_args(argv)

    # Only the first positional is used; further ones are ignored.
    unknown_options = [arg for arg in extras if arg.startswith('-')]
    if unknown_options:
        parser.error(f"unrecognized arguments: {' '.join(unknown_options)}")

    if args.debug:
        os.environ['IPREPORT_DEBUG'] = 'true'
        os.environ['IPREPORT_DEBUG_LEVEL'] = args.debug_level

    if not getattr(args, 'handler', None):
        parser.print_help()
        return 0

    debug_logger.log_config_info()
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
