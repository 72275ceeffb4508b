"""
Record, selection and view schemas shared by the loader, filters and charts.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class CleanedRecord:
    """One survey estimate after normalization.

    Text fields are title-cased and non-empty, ``value`` is finite.
    CI bounds are optional and may be NaN when the cell held no number.
    """
    indicator: str
    group: str
    subgroup: str
    time_period: str
    value: float
    ci_lower: Optional[float] = None
    ci_upper: Optional[float] = None

    def to_dict(self) -> dict:
        """JSON-friendly dict; missing or NaN CI bounds become None."""
        return {
            "indicator": self.indicator,
            "group": self.group,
            "subgroup": self.subgroup,
            "time_period": self.time_period,
            "value": self.value,
            "ci_lower": _finite_or_none(self.ci_lower),
            "ci_upper": _finite_or_none(self.ci_upper),
        }


def _finite_or_none(x: Optional[float]) -> Optional[float]:
    if x is None or math.isnan(x):
        return None
    return x


@dataclass(frozen=True)
class Selection:
    """The three dropdown values currently chosen on the dashboard."""
    group: Optional[str] = None
    time_period: Optional[str] = None
    indicator: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return bool(self.group) and bool(self.time_period) and bool(self.indicator)

    @property
    def label(self) -> str:
        """Human-readable label for report titles."""
        if not self.is_complete:
            return "Incomplete selection"
        return f"{self.indicator} — {self.group} — {self.time_period}"


@dataclass(frozen=True)
class ChartViews:
    """Filtered record sequences for the two charts."""
    line: tuple[CleanedRecord, ...] = ()
    bar: tuple[CleanedRecord, ...] = ()


@dataclass(frozen=True)
class FilterOptions:
    """Sorted distinct values for each dropdown."""
    groups: list[str] = field(default_factory=list)
    time_periods: list[str] = field(default_factory=list)
    indicators: list[str] = field(default_factory=list)
