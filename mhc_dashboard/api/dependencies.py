"""
FastAPI dependencies — DataStore singleton, selection parsing.
"""
from __future__ import annotations

from typing import Optional

from fastapi import HTTPException, Query

from mhc_dashboard.data.store import DataStore
from mhc_dashboard.data.schemas import Selection

# ---------------------------------------------------------------------------
# Global store singleton (set during startup)
# ---------------------------------------------------------------------------
_store: DataStore | None = None


def set_store(store: DataStore) -> None:
    global _store
    _store = store


def get_store() -> DataStore:
    if _store is None or not _store.is_loaded:
        raise HTTPException(503, "Data not loaded")
    return _store


def get_store_or_empty() -> DataStore:
    """Return the store even if it has no data (for health/reload endpoints)."""
    if _store is None:
        raise HTTPException(503, "Server not initialized yet")
    return _store


# ---------------------------------------------------------------------------
# Selection parsing from query params
# ---------------------------------------------------------------------------

def parse_selection(
    group: Optional[str] = Query(None, description="Selected Group"),
    time_period: Optional[str] = Query(None, description="Selected Time Period"),
    indicator: Optional[str] = Query(None, description="Selected Indicator"),
) -> Selection:
    """Build a fresh Selection from the three dropdown values."""
    return Selection(group=group or None, time_period=time_period or None, indicator=indicator or None)
