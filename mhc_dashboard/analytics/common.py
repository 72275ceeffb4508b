"""
Shared helpers for views: DataFrame conversion, summaries, JSON safety.
"""
from __future__ import annotations

import math
from typing import Iterable

import numpy as np
import pandas as pd

from mhc_dashboard.data.schemas import CleanedRecord

VIEW_COLUMNS = ["indicator", "group", "subgroup", "time_period", "value", "ci_lower", "ci_upper"]


def view_frame(records: Iterable[CleanedRecord]) -> pd.DataFrame:
    """Records as a DataFrame, CI bounds as float (NaN when missing)."""
    df = pd.DataFrame([r.to_dict() for r in records], columns=VIEW_COLUMNS)
    for col in ("value", "ci_lower", "ci_upper"):
        df[col] = pd.to_numeric(df[col], errors="coerce")
    return df


def first_occurrence(values: Iterable[str]) -> list[str]:
    """Unique values in the order they first appear."""
    return list(dict.fromkeys(values))


def value_summary(records: Iterable[CleanedRecord]) -> dict:
    """Count / min / max / mean of ``value`` for a view."""
    values = np.array([r.value for r in records], dtype=float)
    if values.size == 0:
        return {"count": 0, "min": None, "max": None, "mean": None}
    return {
        "count": int(values.size),
        "min": float(values.min()),
        "max": float(values.max()),
        "mean": round(float(values.mean()), 2),
    }


def sanitize_for_json(obj):
    """Recursively convert numpy types to native Python; NaN/Inf → None."""
    if isinstance(obj, dict):
        return {str(k): sanitize_for_json(v) for k, v in obj.items() if k is not None}
    if isinstance(obj, (list, tuple)):
        return [sanitize_for_json(v) for v in obj]
    if isinstance(obj, CleanedRecord):
        return sanitize_for_json(obj.to_dict())
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        obj = float(obj)
    if isinstance(obj, np.bool_):
        return bool(obj)
    if isinstance(obj, np.ndarray):
        return sanitize_for_json(obj.tolist())
    if isinstance(obj, float):
        return None if (math.isnan(obj) or math.isinf(obj)) else obj
    return obj
