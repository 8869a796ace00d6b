"""
FastAPI dependencies — DatasetStore singleton, dataset lookup.
"""
from __future__ import annotations

from fastapi import Depends, HTTPException, Query

from csvcharts.data.loader import Row
from csvcharts.data.store import DatasetStore

# ---------------------------------------------------------------------------
# Global store singleton (set during startup)
# ---------------------------------------------------------------------------
_store: DatasetStore | None = None


def set_store(store: DatasetStore | None) -> None:
    global _store
    _store = store


def get_store() -> DatasetStore:
    if _store is None or not _store.is_loaded:
        raise HTTPException(503, "Data not loaded yet")
    return _store


def get_dataset_rows(
    dataset: str = Query(..., description="Dataset name, e.g. 'tests_by_lga' or '2024/sales'"),
    store: DatasetStore = Depends(get_store),
) -> list[Row]:
    """Rows of the requested dataset, 404 if it is not in the store."""
    rows = store.get(dataset)
    if rows is None:
        raise HTTPException(404, f"Dataset not found: {dataset}")
    return rows
