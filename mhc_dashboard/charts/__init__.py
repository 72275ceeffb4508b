"""Plotly chart builders for the line and bar views."""
from .line import build_line_chart
from .bar import build_bar_chart
from .theme import placeholder_figure, figure_to_dict
