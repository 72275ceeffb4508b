"""
Meta endpoints: health, filter options, reload.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from mhc_dashboard.data.loader import LoadError
from mhc_dashboard.data.store import DataStore
from mhc_dashboard.api.dependencies import get_store, get_store_or_empty
from mhc_dashboard.api.response_models import FiltersResponse, HealthResponse, ReloadResponse

router = APIRouter(prefix="/api", tags=["meta"])

logger = logging.getLogger(__name__)


@router.get("/health", response_model=HealthResponse)
def health(store: DataStore = Depends(get_store_or_empty)):
    options = store.filter_options()
    return HealthResponse(
        status="ok" if store.is_loaded else "not_loaded",
        loaded=store.is_loaded,
        rows=store.row_count(),
        groups=len(options.groups),
        time_periods=len(options.time_periods),
        indicators=len(options.indicators),
    )


@router.get("/filters", response_model=FiltersResponse)
def list_filters(store: DataStore = Depends(get_store)):
    """Sorted distinct values for the group, time period and indicator dropdowns."""
    options = store.filter_options()
    return FiltersResponse(
        groups=options.groups,
        time_periods=options.time_periods,
        indicators=options.indicators,
    )


@router.post("/reload", response_model=ReloadResponse)
def reload_data(store: DataStore = Depends(get_store_or_empty)):
    """Re-read the survey file. On failure the current dataset is kept."""
    try:
        store.load()
    except LoadError as exc:
        raise HTTPException(500, str(exc))
    logger.info("Reload complete — %d rows", store.row_count())
    return ReloadResponse(status="reloaded", rows=store.row_count(), source=str(store.source))
