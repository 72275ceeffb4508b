"""
Selection filter — line view (over time) and bar view (over subgroups).
"""
from __future__ import annotations

import logging
from typing import Iterable

from mhc_dashboard.data.schemas import ChartViews, CleanedRecord, Selection


logger = logging.getLogger(__name__)


def line_view(records: Iterable[CleanedRecord], selection: Selection) -> tuple[CleanedRecord, ...]:
    """Records for one group + indicator; time period varies."""
    if not selection.is_complete:
        return ()
    return tuple(
        r for r in records
        if r.group == selection.group and r.indicator == selection.indicator
    )


def bar_view(records: Iterable[CleanedRecord], selection: Selection) -> tuple[CleanedRecord, ...]:
    """Records for one time period + indicator; subgroup varies."""
    if not selection.is_complete:
        return ()
    return tuple(
        r for r in records
        if r.time_period == selection.time_period and r.indicator == selection.indicator
    )


def derive_views(records: Iterable[CleanedRecord], selection: Selection) -> ChartViews:
    """Both chart views for a selection, in source order.

    An incomplete selection yields two empty views. Indicator matching is
    exact equality against the cleaned indicator label.
    """
    records = tuple(records)
    views = ChartViews(line=line_view(records, selection), bar=bar_view(records, selection))
    logger.debug(
        "Selection %s → %d line points, %d bars",
        selection, len(views.line), len(views.bar),
    )
    return views
