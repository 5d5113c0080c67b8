"""
The watch run: compare the live whois record for a zone with a saved
snapshot and mail a report of any differences.
"""

from __future__ import annotations

import logging

from whoiswatch.config import WatchConfig
from whoiswatch.core.differ import diff_records, format_report
from whoiswatch.core.mailer import send_report
from whoiswatch.core.record import parse_record
from whoiswatch.core.utils import CheckResult, Status, WatchError
from whoiswatch.core.whois_client import query_whois

logger = logging.getLogger(__name__)

_TITLE = "Whois Watch"


class SnapshotError(WatchError):
    """The expected-output snapshot could not be read."""


def load_expected(path: str) -> bytes:
    """Read the saved whois snapshot at *path*."""
    try:
        with open(path, "rb") as fh:
            return fh.read()
    except OSError as exc:
        raise SnapshotError(f"Error reading file {path}: {exc}") from exc


def run_watch(config: WatchConfig) -> CheckResult:
    """Run one comparison for ``config.zone``.

    I/O failures before the comparison end the run with an ERROR result and
    nothing is mailed. Mail failures are not fatal.
    """
    try:
        expected = parse_record(load_expected(config.expect_path))
        logger.info("Loaded %d fields from %s", len(expected), config.expect_path)
        raw = query_whois(config.zone, config.whois_host, config.whois_port, timeout=config.timeout)
    except WatchError as exc:
        logger.error("%s", exc)
        return CheckResult(title=_TITLE, status=Status.ERROR, target=config.zone, summary=str(exc))

    observed = parse_record(raw)
    logger.debug("Parsed %d fields from %s", len(observed), config.whois_address)

    discrepancies = diff_records(expected, observed)
    for d in discrepancies:
        logger.warning("%s", d)
    raw_text = raw.decode("utf-8", errors="replace").strip()

    if not discrepancies:
        return CheckResult(
            title=_TITLE,
            status=Status.SUCCESS,
            target=config.zone,
            summary=f"Whois record matches the snapshot — {len(observed)} field(s) via {config.whois_address}.",
            raw_output=raw_text,
        )

    mail_sent = False
    if config.dry_run:
        logger.info("Dry run: report for %s not mailed", config.zone)
    else:
        mail_sent = send_report(
            format_report(discrepancies),
            config.zone,
            config.sender,
            config.recipients,
            config.smtp_host,
            config.smtp_port,
            timeout=config.timeout,
        )

    return CheckResult(
        title=_TITLE,
        status=Status.FAILURE,
        target=config.zone,
        summary=f"{len(discrepancies)} difference(s) from the snapshot"
        + ("; report mailed." if mail_sent else "; report not mailed."),
        details=[str(d) for d in discrepancies],
        raw_output=raw_text,
        mail_sent=mail_sent,
    )
