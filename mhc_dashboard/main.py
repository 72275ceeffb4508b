"""
Mental Health Care Dashboard — FastAPI app factory with startup data loading.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from mhc_dashboard.config import DATA_SOURCE
from mhc_dashboard.data.loader import LoadError
from mhc_dashboard.data.store import DataStore
from mhc_dashboard.api.dependencies import set_store
from mhc_dashboard.api.router_meta import router as meta_router
from mhc_dashboard.api.router_views import router as views_router

logger = logging.getLogger(__name__)


def _lifespan_for(source: str | Path):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Load the survey dataset once at startup."""
        store = DataStore(source)
        set_store(store)
        try:
            await store.load_async()
        except LoadError:
            # Already logged by the store; the page stays empty until a reload
            logger.error("Dashboard started without data — source: %s", source)
        else:
            options = store.filter_options()
            logger.info(
                "Dashboard ready — %d records, %d groups, %d time periods, %d indicators",
                store.row_count(), len(options.groups), len(options.time_periods), len(options.indicators),
            )
        yield

    return lifespan


def create_app(source: str | Path = DATA_SOURCE) -> FastAPI:
    app = FastAPI(
        title="Mental Health Care Dashboard",
        description="Survey estimates of mental health care in the last 4 weeks, by group and time period",
        version="1.0.0",
        lifespan=_lifespan_for(source),
    )

    app.include_router(meta_router)
    app.include_router(views_router)

    # Serve the dashboard with no-cache headers so browsers always get fresh JS
    static_dir = Path(__file__).parent / "static"
    if static_dir.is_dir():
        index_html = static_dir / "index.html"

        @app.get("/", response_class=HTMLResponse)
        async def serve_index():
            return HTMLResponse(
                content=index_html.read_text(encoding="utf-8"),
                headers={"Cache-Control": "no-cache, no-store, must-revalidate", "Pragma": "no-cache"},
            )

        app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

    return app


app = create_app()
