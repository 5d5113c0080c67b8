"""
Record differ — enumerates every difference between an expected and an
observed whois :data:`~whoiswatch.core.record.Record`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple

from whoiswatch.core.record import Record


class DiscrepancyKind(Enum):
    FIELD_COUNT = "field_count"
    MISSING_FIELD = "missing_field"
    MISSING_VALUE = "missing_value"
    EXTRA_VALUE = "extra_value"
    EXTRA_FIELD = "extra_field"


@dataclass(frozen=True)
class Discrepancy:
    """One difference between the expected and the observed record."""

    kind: DiscrepancyKind
    field: str = ""
    values: Tuple[str, ...] = ()
    expected_count: int = 0
    observed_count: int = 0

    def __str__(self) -> str:
        if self.kind is DiscrepancyKind.FIELD_COUNT:
            return f"Field count different: {self.expected_count} {self.observed_count}"
        if self.kind is DiscrepancyKind.MISSING_FIELD:
            return f"Field {self.field} required but missing"
        if self.kind is DiscrepancyKind.MISSING_VALUE:
            return f"Field {self.field} expected value [{self.values[0]}] missing"
        if self.kind is DiscrepancyKind.EXTRA_VALUE:
            return f"Field {self.field} extra value [{self.values[0]}]"
        return f"Extra field {self.field} with value {' '.join(self.values)}"


# ── Public API ────────────────────────────────────────────────────────────────


def diff_records(expected: Record, observed: Record) -> List[Discrepancy]:
    """Compare *observed* against *expected* and list what differs.

    Order: the field-count mismatch (number of distinct field names) first,
    then per-field problems in *expected* order, then fields only present in
    *observed*. The count check never short-circuits the per-field checks.
    """
    found: List[Discrepancy] = []

    if len(expected) != len(observed):
        found.append(Discrepancy(
            DiscrepancyKind.FIELD_COUNT,
            expected_count=len(expected),
            observed_count=len(observed),
        ))

    for name, wanted in expected.items():
        got = observed.get(name)
        if got is None:
            found.append(Discrepancy(DiscrepancyKind.MISSING_FIELD, name))
            continue
        for value in sorted(wanted - got):
            found.append(Discrepancy(DiscrepancyKind.MISSING_VALUE, name, (value,)))
        for value in sorted(got - wanted):
            found.append(Discrepancy(DiscrepancyKind.EXTRA_VALUE, name, (value,)))

    for name, got in observed.items():
        if name not in expected:
            found.append(Discrepancy(DiscrepancyKind.EXTRA_FIELD, name, tuple(sorted(got))))

    return found


def format_report(discrepancies: Iterable[Discrepancy]) -> str:
    """Join *discrepancies* into a mail body, one newline-terminated line each."""
    return "".join(f"{d}\n" for d in discrepancies)
