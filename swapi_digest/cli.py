"""Startup flags layered on top of the environment-driven settings."""

import argparse
from typing import Optional, Sequence

from swapi_digest.config import Settings
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Star Wars API digest server", allow_abbrev=False)
    parser.add_argument("--no-debug", action="store_true", help="disable debug logging and stats output")
    # nargs="?" so a trailing bare --timeout is ignored instead of rejected
    parser.add_argument("--timeout", nargs="?", default=None, metavar="MS",
                        help="fetch timeout in milliseconds")
    parser.add_argument("--insecure", action="store_true",
                        help="skip TLS certificate verification for upstream calls")
    return parser


def apply_cli_args(settings: Settings, argv: Optional[Sequence[str]] = None) -> Settings:
    """Mutate and return `settings` according to recognised flags; unknown flags are ignored."""
    args, unknown = build_parser().parse_known_args(argv)
    if unknown:
        logger.debug("Ignoring unrecognised arguments: %s", unknown)

    if args.no_debug:
        settings.debug = False

    if args.timeout is not None:
        try:
            timeout_ms = int(args.timeout)
        except ValueError:
            logger.warning("Ignoring non-numeric --timeout value %r", args.timeout)
        else:
            if timeout_ms > 0:
                settings.timeout_ms = timeout_ms
            else:
                logger.warning("Ignoring non-positive --timeout value %d", timeout_ms)

    if args.insecure:
        settings.verify_tls = False

    return settings
