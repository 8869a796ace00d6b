"""
Chart endpoints — bar / line / pie series for a dataset, plus Excel export.
"""
from __future__ import annotations

import re
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import FileResponse

from csvcharts import config
from csvcharts.api.dependencies import get_dataset_rows
from csvcharts.data.columns import normalize_hints
from csvcharts.charts.dispatch import build_chart, parse_kind
from csvcharts.charts.errors import ChartDataError
from csvcharts.data.loader import Row
from csvcharts.data.schemas import ChartKind
from csvcharts.reports.chart_report import generate_excel

router = APIRouter(prefix="/api/charts", tags=["charts"])


class ChartOptions:
    """Query parameters shared by the chart and export endpoints."""

    def __init__(
        self,
        label_hint: Optional[list[str]] = Query(None, description="Bar label column hint(s)"),
        value_hint: Optional[list[str]] = Query(None, description="Bar/pie value column hint(s)"),
        category_hint: Optional[list[str]] = Query(None, description="Pie category column hint(s)"),
        date_hint: Optional[list[str]] = Query(None, description="Line period column hint(s)"),
        top_n: int = Query(config.DEFAULT_TOP_N, ge=1, description="Bar: categories before 'Other'"),
        threshold_pct: float = Query(config.DEFAULT_THRESHOLD_PCT, ge=0, le=100,
                                     description="Pie: slices below this % become 'Other'"),
        moving_average: bool = Query(False, description="Line: add 3-point moving averages"),
    ) -> None:
        self.label_hint = normalize_hints(label_hint)
        self.value_hint = normalize_hints(value_hint)
        self.category_hint = normalize_hints(category_hint)
        self.date_hint = normalize_hints(date_hint)
        self.top_n = top_n
        self.threshold_pct = threshold_pct
        self.moving_average = moving_average

    def for_kind(self, kind: ChartKind) -> dict:
        if kind == ChartKind.BAR:
            return {"label_hints": self.label_hint, "value_hints": self.value_hint, "top_n": self.top_n}
        if kind == ChartKind.LINE:
            return {"date_hints": self.date_hint, "moving_avg": self.moving_average}
        return {
            "category_hints": self.category_hint,
            "value_hints": self.value_hint,
            "threshold_pct": self.threshold_pct,
        }


def _build(kind: str, rows: list[Row], options: ChartOptions) -> dict:
    try:
        chart_kind = parse_kind(kind)
        return build_chart(chart_kind, rows, **options.for_kind(chart_kind))
    except ChartDataError as exc:
        raise HTTPException(422, str(exc))


@router.get("/{kind}")
def chart_series(
    kind: str,
    dataset: str,
    rows: list[Row] = Depends(get_dataset_rows),
    options: ChartOptions = Depends(),
):
    """Chart-ready labels/values for ``dataset``."""
    data = _build(kind, rows, options)
    data["dataset"] = dataset
    return data


@router.get("/{kind}/export")
def chart_export(
    kind: str,
    dataset: str,
    rows: list[Row] = Depends(get_dataset_rows),
    options: ChartOptions = Depends(),
):
    """Download the chart series as an Excel workbook."""
    data = _build(kind, rows, options)
    safe = re.sub(r"[^\w\-]+", "_", dataset).strip("_")[:40] or "dataset"
    download_name = f"{data['kind'].title()}_Chart_{safe}.xlsx"
    # unique per request: every worker writes into the same exports folder
    out_path = config.EXPORTS_FOLDER / f"{data['kind'].title()}_Chart_{safe}_{uuid.uuid4().hex[:8]}.xlsx"
    generate_excel(data, out_path, title=f"{data['kind'].title()} — {dataset}")
    return FileResponse(
        path=str(out_path),
        filename=download_name,
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )
