"""
Meta endpoints: health, datasets, detected columns, reload.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from csvcharts import config
from csvcharts.api.dependencies import get_dataset_rows, get_store
from csvcharts.api.response_models import (
    HealthResponse, DatasetsResponse, DatasetInfo, ColumnsResponse, ReloadResponse,
)
from csvcharts.charts.dispatch import detect_columns
from csvcharts.data.columns import headers_of
from csvcharts.data.loader import Row
from csvcharts.data.store import DatasetStore

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
def health(store: DatasetStore = Depends(get_store)):
    return HealthResponse(status="ok", datasets=len(store.names()), rows=store.row_count())


@router.get("/datasets", response_model=DatasetsResponse)
def list_datasets(store: DatasetStore = Depends(get_store)):
    infos = [DatasetInfo(**d) for d in store.summary()]
    return DatasetsResponse(datasets=infos, count=len(infos))


@router.get("/columns", response_model=ColumnsResponse)
def dataset_columns(dataset: str, rows: list[Row] = Depends(get_dataset_rows)):
    """Headers and the columns each chart kind would detect by default."""
    headers = headers_of(rows)
    return ColumnsResponse(dataset=dataset, headers=headers, **detect_columns(headers))


@router.post("/reload", response_model=ReloadResponse)
def reload_data(store: DatasetStore = Depends(get_store)):
    """Re-scan the inbox and reload all datasets."""
    store.load(config.INBOX_FOLDER)
    print(f"  Reload complete — {len(store.names())} datasets, {store.row_count():,} rows")
    return ReloadResponse(status="reloaded", datasets=len(store.names()), rows=store.row_count())
