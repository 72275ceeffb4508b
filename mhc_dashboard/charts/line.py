"""
Line chart — one indicator for one group across survey time periods.
"""
from __future__ import annotations

from typing import Sequence

import plotly.graph_objects as go

from mhc_dashboard.config import LINE_CHART, NO_DATA_MESSAGE
from mhc_dashboard.analytics.common import first_occurrence
from mhc_dashboard.charts.theme import (
    LINE_COLOR, POINT_COLOR, LINE_WIDTH, POINT_RADIUS,
    base_layout, format_number, placeholder_figure,
)
from mhc_dashboard.data.schemas import CleanedRecord


def point_tooltip(record: CleanedRecord) -> str:
    return (
        f"Value: {format_number(record.value)}%<br>"
        f"CI: [{format_number(record.ci_lower)} - {format_number(record.ci_upper)}]"
    )


def build_line_chart(view: Sequence[CleanedRecord], size: dict = LINE_CHART) -> go.Figure:
    """Line + markers over time periods, or a "no data" placeholder when empty."""
    if not view:
        return placeholder_figure(size, NO_DATA_MESSAGE)

    periods = [r.time_period for r in view]
    values = [r.value for r in view]

    fig = go.Figure(go.Scatter(
        x=periods,
        y=values,
        mode="lines+markers",
        line={"color": LINE_COLOR, "width": LINE_WIDTH},
        marker={"color": POINT_COLOR, "size": POINT_RADIUS * 2},
        text=[point_tooltip(r) for r in view],
        hovertemplate="%{text}<extra></extra>",
    ))

    layout = base_layout(size, "Time Period", "Value (%)")
    layout["xaxis"].update(categoryorder="array", categoryarray=first_occurrence(periods))
    top = max(values)
    if top > 0:
        layout["yaxis"]["range"] = [0, top]
    fig.update_layout(**layout)
    return fig
