"""
Pydantic response schemas for the API.
"""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    loaded: bool
    rows: int
    groups: int
    time_periods: int
    indicators: int


class FiltersResponse(BaseModel):
    groups: list[str]
    time_periods: list[str]
    indicators: list[str]


class RecordModel(BaseModel):
    indicator: str
    group: str
    subgroup: str
    time_period: str
    value: float
    ci_lower: Optional[float] = None
    ci_upper: Optional[float] = None


class SelectionModel(BaseModel):
    group: Optional[str] = None
    time_period: Optional[str] = None
    indicator: Optional[str] = None


class ViewsResponse(BaseModel):
    selection: SelectionModel
    line: list[RecordModel]
    bar: list[RecordModel]


class ChartsResponse(BaseModel):
    """Plotly figure JSON for each chart."""
    line: dict[str, Any]
    bar: dict[str, Any]


class ReloadResponse(BaseModel):
    status: str
    rows: int
    source: str
