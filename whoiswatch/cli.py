"""
CLI entry-point for Whois Watch.

Typical use, from a periodic job runner::

    whois -h whois.networksolutions.com example.com > expected-output
    whoiswatch --expect expected-output --zone example.com \\
               --from watch@example.com --to alert@example.com
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from rich.logging import RichHandler

from whoiswatch import __app_name__, __version__
from whoiswatch.config import (
    DEFAULT_SMTP_SERVER,
    DEFAULT_WHOIS_SERVER,
    DEFAULT_WHOIS_TIMEOUT,
    ConfigError,
    WatchConfig,
)
from whoiswatch.core.utils import Status, err_console, print_error, print_result

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_INTERRUPTED = 130


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="whoiswatch",
        description=f"{__app_name__} — report changes in a zone's whois record by email.",
    )
    p.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")

    # ── what to check ─────────────────────────────────────────────────────
    p.add_argument("--whois", default=DEFAULT_WHOIS_SERVER,
                   help=f"whois server host:port (default: {DEFAULT_WHOIS_SERVER})")
    p.add_argument("--expect", default="",
                   help="Name of file containing expected output from whois")
    p.add_argument("--zone", default="", help="The zone to check in whois")
    p.add_argument("-t", "--timeout", type=float, default=DEFAULT_WHOIS_TIMEOUT,
                   help=f"Network timeout in seconds (default: {DEFAULT_WHOIS_TIMEOUT})")

    # ── where to report ───────────────────────────────────────────────────
    p.add_argument("--from", dest="sender", default="", help="Email address to send from")
    p.add_argument("--to", default="", help="Comma-separated list of email addresses to send to")
    p.add_argument("--smtp", default=DEFAULT_SMTP_SERVER,
                   help=f"Address of SMTP server to use (host:port) (default: {DEFAULT_SMTP_SERVER})")
    p.add_argument("-n", "--dry-run", action="store_true",
                   help="Print the report instead of mailing it (--from/--to not needed)")

    # ── output ────────────────────────────────────────────────────────────
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    p.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors; no result panel")
    p.add_argument("--raw", action="store_true", help="Also show the live whois response")

    return p


def _setup_logging(verbose: bool, quiet: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry-point called by the ``whoiswatch`` console script or ``python -m whoiswatch``."""
    args = _build_parser().parse_args(argv)
    _setup_logging(args.verbose, args.quiet)

    try:
        config = WatchConfig.from_args(
            expect=args.expect,
            zone=args.zone,
            sender=args.sender,
            to=args.to,
            whois=args.whois,
            smtp=args.smtp,
            timeout=args.timeout,
            dry_run=args.dry_run,
        )
    except ConfigError as exc:
        print_error(str(exc))
        return EXIT_CONFIG_ERROR

    from whoiswatch.core.watch import run_watch  # noqa: local import for speed

    try:
        result = run_watch(config)
    except KeyboardInterrupt:
        print("\nAborted.")
        return EXIT_INTERRUPTED

    if not args.quiet:
        print_result(result, show_raw=args.raw)

    return EXIT_IO_ERROR if result.status is Status.ERROR else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
