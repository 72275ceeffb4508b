"""
View endpoints — filtered records, chart figures, selection report and Excel export.
"""
from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse, JSONResponse

from mhc_dashboard.config import OUTPUT_FOLDER
from mhc_dashboard.data.store import DataStore
from mhc_dashboard.data.schemas import Selection
from mhc_dashboard.api.dependencies import get_store, parse_selection
from mhc_dashboard.api.response_models import ChartsResponse, ViewsResponse
from mhc_dashboard.analytics.common import sanitize_for_json
from mhc_dashboard.charts import build_bar_chart, build_line_chart, figure_to_dict
from mhc_dashboard.reports import selection_report

router = APIRouter(prefix="/api", tags=["views"])

logger = logging.getLogger(__name__)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _output_path(name: str) -> Path:
    OUTPUT_FOLDER.mkdir(parents=True, exist_ok=True)
    return OUTPUT_FOLDER / name


@router.get("/views", response_model=ViewsResponse)
def views(
    store: DataStore = Depends(get_store),
    selection: Selection = Depends(parse_selection),
):
    """Line view (group + indicator over time) and bar view (time + indicator by subgroup)."""
    v = store.views(selection)
    return JSONResponse(content=sanitize_for_json({
        "selection": {
            "group": selection.group,
            "time_period": selection.time_period,
            "indicator": selection.indicator,
        },
        "line": list(v.line),
        "bar": list(v.bar),
    }))


@router.get("/charts", response_model=ChartsResponse)
def charts(
    store: DataStore = Depends(get_store),
    selection: Selection = Depends(parse_selection),
):
    """Plotly figures for both charts; empty views come back as placeholder figures."""
    v = store.views(selection)
    logger.info(
        "Render %s | line points: %d | bars: %d",
        selection, len(v.line), len(v.bar),
    )
    return ChartsResponse(
        line=figure_to_dict(build_line_chart(v.line)),
        bar=figure_to_dict(build_bar_chart(v.bar)),
    )


@router.get("/views/report")
def report_json(
    store: DataStore = Depends(get_store),
    selection: Selection = Depends(parse_selection),
):
    return JSONResponse(content=selection_report.generate_json(store, selection))


@router.get("/views/excel")
def report_excel(
    store: DataStore = Depends(get_store),
    selection: Selection = Depends(parse_selection),
):
    path = selection_report.generate_excel(store, selection, _output_path("Selection_Report.xlsx"))
    return FileResponse(path=str(path), filename=path.name, media_type=XLSX_MEDIA_TYPE)
