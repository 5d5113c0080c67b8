"""
Shared utilities: result types, the error base class, and result formatting.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List

from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.text import Text
from rich import box

console = Console()
err_console = Console(stderr=True)


class WatchError(Exception):
    """An I/O failure that aborts a watch run before the comparison."""


# ── Result types ──────────────────────────────────────────────────────────────


class Status(Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    ERROR = "error"


@dataclass
class CheckResult:
    """Outcome of one watch run."""

    title: str
    status: Status
    target: str = ""
    summary: str = ""
    details: List[str] = field(default_factory=list)
    raw_output: str = ""
    mail_sent: bool = False
    timestamp: str = field(default_factory=lambda: datetime.now().strftime("%Y-%m-%d %H:%M:%S"))


# ── Pretty printing ──────────────────────────────────────────────────────────


_BADGES = {
    Status.SUCCESS: ("PASS", "green"),
    Status.FAILURE: ("FAIL", "red"),
    Status.ERROR: ("ERR", "red"),
}


def print_result(result: CheckResult, show_raw: bool = False) -> None:
    """Render a *CheckResult* as a panel, the differences listed one per line."""
    badge, colour = _BADGES[result.status]

    header = Text.assemble(
        (f" {badge} ", f"bold white on {colour}"),
        "  ",
        (result.title, "bold"),
        (f"  {result.target}" if result.target else "", "bold cyan"),
    )

    body = Text(result.summary or "(no details)", style=f"bold {colour}")
    for line in result.details:
        body.append(f"\n  {line}", style="default")

    console.print()
    console.print(Panel(body, title=header, title_align="left", subtitle=result.timestamp,
                        subtitle_align="right", border_style=colour, box=box.ROUNDED))

    # Raw whois text goes through Text so brackets in it are not read as markup.
    if show_raw and result.raw_output:
        console.print(Rule("live whois response", style="bright_black"))
        console.print(Text(result.raw_output))


def print_error(message: str) -> None:
    """Print a plain user-facing error line to stderr."""
    err_console.print(Text.assemble(("✘ ", "bold red"), message), highlight=False)
