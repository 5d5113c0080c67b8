"""
Live whois query over TCP port 43.

Sends the zone name, then reads until the server closes the connection.
"""

from __future__ import annotations

import logging
import socket

from whoiswatch.config import DEFAULT_WHOIS_TIMEOUT
from whoiswatch.core.utils import WatchError

logger = logging.getLogger(__name__)


class WhoisError(WatchError):
    """The whois server could not be reached or the read failed."""


def query_whois(zone: str, server: str, port: int = 43, timeout: float = DEFAULT_WHOIS_TIMEOUT) -> bytes:
    """Query *server* for *zone* and return the raw response bytes."""
    logger.debug("Querying %s:%d for %s", server, port, zone)
    try:
        with socket.create_connection((server, port), timeout=timeout) as s:
            s.sendall(f"{zone}\r\n".encode())
            chunks: list[bytes] = []
            while True:
                data = s.recv(4096)
                if not data:
                    break
                chunks.append(data)
    except OSError as exc:
        raise WhoisError(f"Error querying {server}:{port}: {exc}") from exc

    response = b"".join(chunks)
    logger.debug("Received %d bytes from %s:%d", len(response), server, port)
    return response
