"""
Centralised runtime configuration: defaults and validated run settings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple


# Default endpoints (host:port)
DEFAULT_WHOIS_SERVER = "whois.networksolutions.com:43"
DEFAULT_SMTP_SERVER = "gmail-smtp-in.l.google.com:25"

# Default timeouts (seconds)
DEFAULT_WHOIS_TIMEOUT = 30
DEFAULT_SMTP_TIMEOUT = 30


class ConfigError(ValueError):
    """A missing or malformed setting, reported to the user before any I/O."""


def split_host_port(value: str) -> Tuple[str, int]:
    """Split *value* of the form ``host:port`` (or ``[v6addr]:port``)."""
    value = (value or "").strip()
    host, sep, port = value.rpartition(":")
    if not sep:
        raise ConfigError(f"missing port in address '{value}'")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    elif ":" in host:
        raise ConfigError(f"too many colons in address '{value}'")
    if not host:
        raise ConfigError(f"missing host in address '{value}'")
    if not port.isdigit() or not 0 < int(port) < 65536:
        raise ConfigError(f"invalid port '{port}' in address '{value}'")
    return host, int(port)


def split_recipients(value: str) -> Tuple[str, ...]:
    """Turn a comma-separated address list into a tuple, dropping blanks."""
    return tuple(addr.strip() for addr in (value or "").split(",") if addr.strip())


@dataclass(frozen=True)
class WatchConfig:
    """Immutable settings for a single watch run."""

    expect_path: str
    zone: str
    whois_host: str
    whois_port: int
    smtp_host: str = ""
    smtp_port: int = 25
    sender: str = ""
    recipients: Tuple[str, ...] = field(default_factory=tuple)
    timeout: float = DEFAULT_WHOIS_TIMEOUT
    dry_run: bool = False

    @property
    def whois_address(self) -> str:
        return f"{self.whois_host}:{self.whois_port}"

    @property
    def smtp_address(self) -> str:
        return f"{self.smtp_host}:{self.smtp_port}"

    @classmethod
    def from_args(
        cls,
        *,
        expect: Optional[str],
        zone: Optional[str],
        sender: Optional[str] = None,
        to: Optional[str] = None,
        whois: str = DEFAULT_WHOIS_SERVER,
        smtp: str = DEFAULT_SMTP_SERVER,
        timeout: float = DEFAULT_WHOIS_TIMEOUT,
        dry_run: bool = False,
    ) -> "WatchConfig":
        """Validate raw option values and build a *WatchConfig*.

        Raises *ConfigError* with a user-facing message on the first
        missing or malformed value.
        """
        if not expect:
            raise ConfigError("The --expect parameter is required")
        recipients = split_recipients(to or "")
        if not dry_run:
            if not recipients:
                raise ConfigError("The --to parameter is required")
            if not sender:
                raise ConfigError("The --from parameter is required")
        if not zone or not zone.strip():
            raise ConfigError("The --zone parameter is required")
        if timeout <= 0:
            raise ConfigError("The --timeout parameter must be positive")

        try:
            whois_host, whois_port = split_host_port(whois)
        except ConfigError as exc:
            raise ConfigError(f"The --whois parameter must have format host:port: {exc}") from exc
        try:
            smtp_host, smtp_port = split_host_port(smtp)
        except ConfigError as exc:
            raise ConfigError(f"The --smtp parameter must have format host:port: {exc}") from exc

        return cls(
            expect_path=expect,
            zone=zone.strip(),
            whois_host=whois_host,
            whois_port=whois_port,
            smtp_host=smtp_host,
            smtp_port=smtp_port,
            sender=sender or "",
            recipients=recipients,
            timeout=timeout,
            dry_run=dry_run,
        )
