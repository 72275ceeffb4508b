"""
Single source of truth for chart colors, fonts, layout, and the empty-state figure.
"""
from __future__ import annotations

import json
import math

import plotly.graph_objects as go
import plotly.io as pio

# ---------------------------------------------------------------------------
# Color constants
# ---------------------------------------------------------------------------
LINE_COLOR = "steelblue"
POINT_COLOR = "orange"
BAR_COLOR = "#69b3a2"
AXIS_COLOR = "#333333"
GRID_COLOR = "#E5E5E5"
MUTED_TEXT = "#666666"

LINE_WIDTH = 2
POINT_RADIUS = 4

FONT = {"family": "Arial, sans-serif", "size": 12, "color": AXIS_COLOR}

HOVER_LABEL = {"bgcolor": "white", "bordercolor": "#CCCCCC", "font": {"size": 12, "color": AXIS_COLOR}}


def base_layout(size: dict, x_title: str, y_title: str) -> dict:
    """Layout dict shared by both charts; ``size`` is a LINE_CHART/BAR_CHART entry."""
    return {
        "width": size["width"],
        "height": size["height"],
        "margin": dict(size["margin"]),
        "font": FONT,
        "plot_bgcolor": "white",
        "paper_bgcolor": "white",
        "showlegend": False,
        "hovermode": "closest",
        "hoverlabel": HOVER_LABEL,
        "xaxis": {
            "title": {"text": x_title},
            "type": "category",
            "showline": True,
            "linecolor": AXIS_COLOR,
            "ticks": "outside",
        },
        "yaxis": {
            "title": {"text": y_title},
            "showline": True,
            "linecolor": AXIS_COLOR,
            "gridcolor": GRID_COLOR,
            "ticks": "outside",
            "rangemode": "tozero",
        },
    }


def format_number(x: float | None) -> str:
    """Tooltip number: compact, "N/A" when missing or NaN."""
    if x is None or math.isnan(x):
        return "N/A"
    return f"{x:g}"


def placeholder_figure(size: dict, message: str) -> go.Figure:
    """Blank figure carrying a centered message instead of a plot."""
    fig = go.Figure()
    fig.update_layout(
        width=size["width"],
        height=size["height"],
        margin=dict(size["margin"]),
        font=FONT,
        plot_bgcolor="white",
        paper_bgcolor="white",
        xaxis={"visible": False},
        yaxis={"visible": False},
        annotations=[{
            "text": message,
            "xref": "paper",
            "yref": "paper",
            "x": 0.5,
            "y": 0.5,
            "showarrow": False,
            "font": {"size": 16, "color": MUTED_TEXT},
        }],
    )
    return fig


def figure_to_dict(fig: go.Figure) -> dict:
    """Plain JSON-safe dict for a figure (numpy arrays encoded by plotly)."""
    return json.loads(pio.to_json(fig))
