"""
Whois record parser — turns raw whois text into a field → values map.

Whois output has no fixed structure across registries, so the parser only
looks for lines shaped like ``Some Label: value`` and ignores the rest
(banners, comments, legal boilerplate).
"""

from __future__ import annotations

import re
from typing import Dict, FrozenSet, Set, Union

# A label is one or more capitalised words separated by single spaces,
# optionally followed by one space before the colon.
_FIELD_RE = re.compile(r"^([A-Z][A-Za-z]*(?: [A-Z][A-Za-z]*)*) ?:(.*)$")

Record = Dict[str, FrozenSet[str]]


def parse_record(raw: Union[str, bytes]) -> Record:
    """Collect every ``Label: value`` line of *raw* into a :data:`Record`.

    Labels keep their internal spacing and case; a space before the colon
    is not part of the label. A label seen on several lines maps to the set
    of its stripped values, so repeated identical lines collapse into one
    value. Keys appear in the order their label first occurs in *raw*.
    """
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")

    fields: Dict[str, Set[str]] = {}
    for line in raw.split("\n"):
        m = _FIELD_RE.match(line)
        if m is None:
            continue
        fields.setdefault(m.group(1), set()).add(m.group(2).strip())

    return {name: frozenset(values) for name, values in fields.items()}
