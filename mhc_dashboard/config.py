"""
Mental Health Care Dashboard — Configuration: paths, column names, chart layout.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths — override with MHC_DATA_SOURCE / MHC_OUTPUT_DIR for deployment
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
DATA_FILE_NAME = "Mental_Health_Care_in_the_Last_4_Weeks.csv"

# A filesystem path or an http(s) URL; pandas fetches either.
DATA_SOURCE = os.environ.get("MHC_DATA_SOURCE", str(PROJECT_ROOT / "data" / DATA_FILE_NAME))
OUTPUT_FOLDER = Path(os.environ.get("MHC_OUTPUT_DIR", str(PROJECT_ROOT / "exports")))

# ---------------------------------------------------------------------------
# Column mapping from raw survey CSV → record fields
# ---------------------------------------------------------------------------
COLUMN_MAP = {
    "Indicator": "indicator",
    "Group": "group",
    "Subgroup": "subgroup",
    "Time Period": "time_period",
    "Value": "value",
    "Confidence Interval (Low Bound)": "ci_lower",
    "Confidence Interval (High Bound)": "ci_upper",
}

TEXT_FIELDS = ["indicator", "group", "subgroup", "time_period"]
NUMERIC_FIELDS = ["value", "ci_lower", "ci_upper"]

# Characters stripped from numeric cells before parsing
NUMERIC_STRIP_CHARS = "%,$"

# Fields the dropdowns are built from (order = control order on the page)
FILTER_FIELDS = ["group", "time_period", "indicator"]

# ---------------------------------------------------------------------------
# Chart layout (pixels)
# ---------------------------------------------------------------------------
LINE_CHART = {
    "width": 800,
    "height": 400,
    "margin": {"t": 20, "r": 20, "b": 40, "l": 60},
}

BAR_CHART = {
    "width": 800,
    "height": 400,
    "margin": {"t": 20, "r": 20, "b": 80, "l": 60},
}

NO_DATA_MESSAGE = "No data available"

# Number of cleaned records echoed to the debug log after a load
LOG_SAMPLE_SIZE = 5
