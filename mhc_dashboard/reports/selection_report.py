"""
Selection Report — the two chart views for one dashboard selection, as JSON or Excel.
"""
from __future__ import annotations

from datetime import datetime
from pathlib import Path

from mhc_dashboard.data.store import DataStore
from mhc_dashboard.data.schemas import Selection
from mhc_dashboard.analytics.common import sanitize_for_json, value_summary, view_frame
from mhc_dashboard.excel.writer import ExcelWriter


LINE_COLS = [
    ("time_period", "text", "Time Period"),
    ("subgroup", "text", "Subgroup"),
    ("value", "percent", "Value"),
    ("ci_lower", "percent", "CI Low"),
    ("ci_upper", "percent", "CI High"),
]

BAR_COLS = [
    ("subgroup", "text", "Subgroup"),
    ("group", "text", "Group"),
    ("value", "percent", "Value"),
    ("ci_lower", "percent", "CI Low"),
    ("ci_upper", "percent", "CI High"),
]


def generate_json(store: DataStore, selection: Selection) -> dict:
    views = store.views(selection)
    return sanitize_for_json({
        "selection": {
            "group": selection.group,
            "time_period": selection.time_period,
            "indicator": selection.indicator,
        },
        "label": selection.label,
        "line": {"summary": value_summary(views.line), "records": list(views.line)},
        "bar": {"summary": value_summary(views.bar), "records": list(views.bar)},
    })


def _write_view_sheet(ew: ExcelWriter, title: str, subtitle: str, summary: dict, frame, columns) -> None:
    ws = ew.add_sheet(title)
    row = ew.write_title(ws, title, subtitle, merge_cols=len(columns))
    row = ew.write_kpi_row(ws, row, [
        (summary["count"], "Estimates", "number"),
        (summary["min"], "Lowest Value", "percent"),
        (summary["max"], "Highest Value", "percent"),
    ])
    if frame.empty:
        ew.write_note(ws, row, "No data available for this selection.")
        return
    ew.write_table(ws, row, columns, frame)


def generate_excel(store: DataStore, selection: Selection, output_path: str | Path) -> Path:
    data = generate_json(store, selection)
    views = store.views(selection)
    stamp = f"Generated {datetime.now():%Y-%m-%d %H:%M}"
    ew = ExcelWriter()

    _write_view_sheet(
        ew, "Over Time",
        f"{selection.indicator} — {selection.group} | {stamp}",
        data["line"]["summary"], view_frame(views.line), LINE_COLS,
    )
    _write_view_sheet(
        ew, "By Subgroup",
        f"{selection.indicator} — {selection.time_period} | {stamp}",
        data["bar"]["summary"], view_frame(views.bar), BAR_COLS,
    )
    return ew.save(output_path)
