"""
Pydantic response schemas for the API.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    datasets: int
    rows: int


class DatasetInfo(BaseModel):
    name: str
    rows: int
    headers: list[str]


class DatasetsResponse(BaseModel):
    datasets: list[DatasetInfo]
    count: int


class BarColumns(BaseModel):
    label: Optional[str] = None
    value: Optional[str] = None


class LineColumns(BaseModel):
    date: Optional[str] = None
    values: list[str]


class PieColumns(BaseModel):
    category: Optional[str] = None
    value: Optional[str] = None


class ColumnsResponse(BaseModel):
    dataset: str
    headers: list[str]
    bar: BarColumns
    line: LineColumns
    pie: PieColumns


class ReloadResponse(BaseModel):
    status: str
    datasets: int
    rows: int
