"""
Bar chart — one indicator in one time period across demographic subgroups.
"""
from __future__ import annotations

from typing import Sequence

import plotly.graph_objects as go

from mhc_dashboard.config import BAR_CHART, NO_DATA_MESSAGE
from mhc_dashboard.analytics.common import first_occurrence
from mhc_dashboard.charts.theme import BAR_COLOR, base_layout, format_number, placeholder_figure
from mhc_dashboard.data.schemas import CleanedRecord

BAR_PADDING = 0.2
TICK_ANGLE = -45


def bar_tooltip(record: CleanedRecord) -> str:
    return f"Subgroup: {record.subgroup}<br>Value: {format_number(record.value)}%"


def build_bar_chart(view: Sequence[CleanedRecord], size: dict = BAR_CHART) -> go.Figure:
    """One bar per subgroup, or a "no data" placeholder when empty."""
    if not view:
        return placeholder_figure(size, NO_DATA_MESSAGE)

    subgroups = [r.subgroup for r in view]
    values = [r.value for r in view]

    fig = go.Figure(go.Bar(
        x=subgroups,
        y=values,
        marker={"color": BAR_COLOR},
        text=[bar_tooltip(r) for r in view],
        textposition="none",
        hovertemplate="%{text}<extra></extra>",
    ))

    layout = base_layout(size, "Subgroup", "Value (%)")
    layout["xaxis"].update(
        categoryorder="array",
        categoryarray=first_occurrence(subgroups),
        tickangle=TICK_ANGLE,
    )
    layout["bargap"] = BAR_PADDING
    top = max(values)
    if top > 0:
        layout["yaxis"]["range"] = [0, top]
    fig.update_layout(**layout)
    return fig
