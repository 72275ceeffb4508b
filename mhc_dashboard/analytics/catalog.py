"""
Dropdown option lists derived from the cleaned dataset.
"""
from __future__ import annotations

from typing import Iterable

from mhc_dashboard.data.schemas import CleanedRecord, FilterOptions

_CATALOG_FIELDS = {"group", "subgroup", "time_period", "indicator"}


def distinct_sorted(records: Iterable[CleanedRecord], field: str) -> list[str]:
    """Distinct values of ``field`` across all records, ascending."""
    if field not in _CATALOG_FIELDS:
        raise ValueError(f"Unknown catalog field: {field}")
    return sorted({getattr(r, field) for r in records})


def filter_options(records: Iterable[CleanedRecord]) -> FilterOptions:
    records = list(records)
    return FilterOptions(
        groups=distinct_sorted(records, "group"),
        time_periods=distinct_sorted(records, "time_period"),
        indicators=distinct_sorted(records, "indicator"),
    )
