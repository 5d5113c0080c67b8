"""
Mail the discrepancy report through an SMTP relay.

No authentication is attempted: the relay is expected to accept mail for the
recipients directly (e.g. the recipients' MX host).
"""

from __future__ import annotations

import logging
import smtplib
from email.message import EmailMessage
from email.utils import formatdate
from typing import Sequence

from whoiswatch.config import DEFAULT_SMTP_TIMEOUT

logger = logging.getLogger(__name__)


def build_message(report: str, zone: str, sender: str, recipients: Sequence[str]) -> EmailMessage:
    """Compose the warning mail for *zone* with *report* as its body."""
    msg = EmailMessage()
    msg["From"] = sender
    msg["To"] = ", ".join(recipients)
    msg["Date"] = formatdate(localtime=True)
    msg["Subject"] = f"WARNING! Change in {zone} whois record"
    msg.set_content(report)
    return msg


def send_report(
    report: str,
    zone: str,
    sender: str,
    recipients: Sequence[str],
    server: str,
    port: int = 25,
    timeout: float = DEFAULT_SMTP_TIMEOUT,
) -> bool:
    """Send *report* if it is non-empty; return *True* once the relay accepted it.

    Transmission failures are logged and swallowed.
    """
    if not report:
        return False

    msg = build_message(report, zone, sender, recipients)
    try:
        with smtplib.SMTP(server, port, timeout=timeout) as smtp:
            smtp.send_message(msg, from_addr=sender, to_addrs=list(recipients))
    except (smtplib.SMTPException, OSError) as exc:
        logger.error(
            "Error sending message from %s to %s via %s:%d: %s",
            sender, msg["To"], server, port, exc,
        )
        return False

    logger.info("Report for %s sent to %s", zone, msg["To"])
    return True
