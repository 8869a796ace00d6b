"""
CSV Charts — FastAPI app factory with startup data loading.
"""
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from csvcharts.data.store import DatasetStore
from csvcharts.api.dependencies import set_store
from csvcharts.api.router_meta import router as meta_router
from csvcharts.api.router_charts import router as charts_router
from csvcharts.api.router_upload import router as upload_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load all datasets at startup."""
    from csvcharts.config import INBOX_FOLDER, EXPORTS_FOLDER
    for d in [INBOX_FOLDER, EXPORTS_FOLDER]:
        d.mkdir(parents=True, exist_ok=True)

    print(f"  INBOX_FOLDER = {INBOX_FOLDER}")

    store = DatasetStore()
    store.load(INBOX_FOLDER)
    set_store(store)

    if store.names():
        print(f"\nCSV Charts ready — {len(store.names())} datasets, {store.row_count():,} rows\n")
    else:
        print("\nCSV Charts ready — no data yet. Upload CSVs to /api/upload.\n")
    yield
    set_store(None)


def create_app() -> FastAPI:
    app = FastAPI(
        title="CSV Charts API",
        description="Bar, line and pie chart series from CSV data",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(meta_router)
    app.include_router(charts_router)
    app.include_router(upload_router)

    return app


app = create_app()
