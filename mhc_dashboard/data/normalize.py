"""
String casing, numeric parsing, and row → record normalization.
"""
from __future__ import annotations

import math
import re
from typing import Any, Mapping, NamedTuple, Optional

from mhc_dashboard.config import COLUMN_MAP, NUMERIC_STRIP_CHARS
from mhc_dashboard.data.schemas import CleanedRecord


# ---------------------------------------------------------------------------
# Field cleaners
# ---------------------------------------------------------------------------

_STRIP_RE = re.compile("[" + re.escape(NUMERIC_STRIP_CHARS) + "]")

# Leading float literal, the same prefix JavaScript's parseFloat accepts
_FLOAT_PREFIX_RE = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)


def clean_string(value: Any) -> str | None:
    """Title-case a label: trim, lowercase, capitalize each whitespace token.

    Anything that is not a non-empty string (None, "", NaN floats) → None.
    """
    if not value or not isinstance(value, str):
        return None
    words = value.strip().lower().split()
    return " ".join(w[0].upper() + w[1:] for w in words)


def parse_number(value: Any) -> float | None:
    """Parse a percentage/currency cell such as "12.5%" or "$1,200".

    Non-string or empty input → None. Text without a numeric prefix → NaN.
    """
    if not value or not isinstance(value, str):
        return None
    text = _STRIP_RE.sub("", value).strip()
    m = _FLOAT_PREFIX_RE.match(text)
    if not m:
        return math.nan
    return float(m.group(0).replace("Infinity", "inf"))


# ---------------------------------------------------------------------------
# Row normalization
# ---------------------------------------------------------------------------

class RecordCandidate(NamedTuple):
    """A normalized row that has not yet passed the retention check."""
    indicator: Optional[str]
    group: Optional[str]
    subgroup: Optional[str]
    time_period: Optional[str]
    value: Optional[float]
    ci_lower: Optional[float]
    ci_upper: Optional[float]

    def is_valid(self) -> bool:
        """Keep only rows with every label present and a finite value."""
        if not (self.indicator and self.group and self.subgroup and self.time_period):
            return False
        return self.value is not None and math.isfinite(self.value)

    def to_record(self) -> CleanedRecord | None:
        if not self.is_valid():
            return None
        return CleanedRecord(**self._asdict())


def normalize_row(raw: Mapping[str, Any]) -> RecordCandidate:
    """Normalize all seven survey columns of one raw CSV row."""
    fields = {internal: raw.get(column) for column, internal in COLUMN_MAP.items()}
    return RecordCandidate(
        indicator=clean_string(fields["indicator"]),
        group=clean_string(fields["group"]),
        subgroup=clean_string(fields["subgroup"]),
        time_period=clean_string(fields["time_period"]),
        value=parse_number(fields["value"]),
        ci_lower=parse_number(fields["ci_lower"]),
        ci_upper=parse_number(fields["ci_upper"]),
    )
