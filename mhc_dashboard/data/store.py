"""
DataStore — In-memory survey dataset.

Loaded once at startup, queried on every request.
The record tuple is never mutated; reload swaps it for a new one.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import NamedTuple

from mhc_dashboard.config import DATA_SOURCE
from mhc_dashboard.analytics.catalog import filter_options
from mhc_dashboard.analytics.selection import derive_views
from mhc_dashboard.data.loader import LoadError, fetch_records, load_records
from mhc_dashboard.data.schemas import ChartViews, CleanedRecord, FilterOptions, Selection


logger = logging.getLogger(__name__)


class _Snapshot(NamedTuple):
    records: tuple[CleanedRecord, ...]
    options: FilterOptions


class DataStore:
    """Cleaned survey records with catalog and view accessors."""

    def __init__(self, source: str | Path = DATA_SOURCE) -> None:
        self.source = source
        self._snapshot: _Snapshot | None = None

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self, source: str | Path | None = None) -> "DataStore":
        """Load and clean the survey file. Raises LoadError on failure.

        A failed load leaves any previously loaded dataset in place.
        """
        source = source or self.source
        try:
            records = load_records(source)
        except LoadError:
            logger.exception("Error loading or cleaning data from %s", source)
            raise
        self._set(records, source)
        return self

    async def load_async(self, source: str | Path | None = None) -> "DataStore":
        """Same as load(), awaiting the file fetch off the event loop."""
        source = source or self.source
        try:
            records = await fetch_records(source)
        except LoadError:
            logger.exception("Error loading or cleaning data from %s", source)
            raise
        self._set(records, source)
        return self

    def _set(self, records: tuple[CleanedRecord, ...], source: str | Path) -> None:
        # one assignment so readers never see new records with old options
        self._snapshot = _Snapshot(records, filter_options(records))
        self.source = source

    @property
    def is_loaded(self) -> bool:
        return self._snapshot is not None

    @property
    def records(self) -> tuple[CleanedRecord, ...]:
        return self._snapshot.records if self._snapshot else ()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def filter_options(self) -> FilterOptions:
        return self._snapshot.options if self._snapshot else FilterOptions()

    def views(self, selection: Selection) -> ChartViews:
        return derive_views(self.records, selection)

    def row_count(self) -> int:
        return len(self.records)

