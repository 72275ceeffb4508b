"""
Survey CSV loading: read, normalize each row, drop invalid rows.
"""
from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import pandas as pd

from mhc_dashboard.config import COLUMN_MAP, DATA_SOURCE, LOG_SAMPLE_SIZE
from mhc_dashboard.data.normalize import normalize_row
from mhc_dashboard.data.schemas import CleanedRecord


logger = logging.getLogger(__name__)


class LoadError(Exception):
    """The survey file could not be fetched, parsed, or lacks required columns."""


# ---------------------------------------------------------------------------
# Raw reading
# ---------------------------------------------------------------------------

def read_raw_rows(source: str | Path = DATA_SOURCE) -> list[dict]:
    """Read the CSV at ``source`` (path or URL) into a list of raw string rows.

    Every cell is read as text and empty cells stay "" so the normalizer
    sees exactly what the file contains.
    """
    try:
        # index_col=False keeps trailing delimiters from shifting columns into the
        # index; rows with more fields than the header are skipped
        df = pd.read_csv(
            source, dtype=str, keep_default_na=False,
            index_col=False, on_bad_lines="skip",
        )
    except FileNotFoundError as exc:
        raise LoadError(f"Survey file not found: {source}") from exc
    except (OSError, ValueError) as exc:
        # ParserError and EmptyDataError are ValueErrors; URLError is an OSError
        raise LoadError(f"Could not read survey file {source}: {exc}") from exc

    df.columns = [str(c).strip() for c in df.columns]
    missing = set(COLUMN_MAP) - set(df.columns)
    if missing:
        raise LoadError(f"Missing required columns in {source}: {sorted(missing)}")

    return df[list(COLUMN_MAP)].to_dict("records")


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def clean_rows(rows: list[dict]) -> tuple[CleanedRecord, ...]:
    """Normalize raw rows, keeping source order and dropping invalid ones."""
    records = []
    for raw in rows:
        record = normalize_row(raw).to_record()
        if record is not None:
            records.append(record)
    return tuple(records)


def load_records(source: str | Path = DATA_SOURCE) -> tuple[CleanedRecord, ...]:
    """Load and clean the survey dataset. Raises LoadError on failure."""
    rows = read_raw_rows(source)
    records = clean_rows(rows)

    logger.info(
        "Loaded %d records from %s (%d raw rows, %d dropped)",
        len(records), source, len(rows), len(rows) - len(records),
    )
    logger.debug("Cleaned data sample: %s", list(records[:LOG_SAMPLE_SIZE]))
    return records


async def fetch_records(source: str | Path = DATA_SOURCE) -> tuple[CleanedRecord, ...]:
    """Async wrapper around load_records for the application startup hook."""
    return await asyncio.to_thread(load_records, source)
