"""Pytest configuration helpers.

Ensure the project root is on `sys.path` so imports like
`from mhc_dashboard...` work during test collection, and provide
small survey fixtures.
"""
from pathlib import Path
import sys

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mhc_dashboard.data.schemas import CleanedRecord  # noqa: E402


HEADER = (
    "Indicator,Group,Subgroup,Time Period,Value,"
    "Confidence Interval (Low Bound),Confidence Interval (High Bound)"
)


def write_csv(path: Path, rows: list[str], header: str = HEADER) -> Path:
    path.write_text("\n".join([header] + rows) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def survey_csv(tmp_path):
    rows = [
        "anxiety,adult,18 - 29 years,aug 2020,10,8.5,11.5",
        "Anxiety,Adult,30 - 39 years,Sep 2020,15%,13,17",
        "ANXIETY,youth,Under 18,Aug 2020,5,,",
        'Depression,Adult,18 - 29 years,Aug 2020,"$1,200",n/a,',
        "Anxiety,,Missing Group,Aug 2020,7,6,8",
        "Anxiety,Adult,Bad Value,Aug 2020,not a number,1,2",
    ]
    return write_csv(tmp_path / "survey.csv", rows)


@pytest.fixture
def scenario_records():
    return (
        CleanedRecord("Anxiety", "Adult", "All Adults", "Aug 2020", 10.0, 9.0, 11.0),
        CleanedRecord("Anxiety", "Adult", "All Adults", "Sep 2020", 15.0, 14.0, 16.0),
        CleanedRecord("Anxiety", "Youth", "All Youth", "Aug 2020", 5.0, None, None),
    )
