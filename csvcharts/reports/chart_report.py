"""
Chart Report — a chart series as a styled Excel workbook.
"""
from __future__ import annotations

from pathlib import Path

from csvcharts.config import OTHER_LABEL
from csvcharts.excel.writer import ExcelWriter


def _highlight_other(_idx: int, row: dict) -> str | None:
    return "other" if row.get("label") == OTHER_LABEL else None


def _category_table(series: dict) -> tuple[list, list[dict], dict]:
    """Bar / pie: one row per label."""
    columns = [("label", "text", series.get("label_column") or series.get("category_column")),
               ("value", "number", series["value_column"])]
    if series["kind"] == "pie":
        columns.append(("pct", "percent", "% of Total"))

    pcts = series.get("percentages") or [None] * len(series["labels"])
    rows = [
        {"label": label, "value": value, "pct": pct}
        for label, value, pct in zip(series["labels"], series["values"], pcts)
    ]
    total = {"label": "TOTAL", "value": series["total"], "pct": 100.0}
    return columns, rows, total


def _period_table(series: dict) -> tuple[list, list[dict], None]:
    """Line: one row per period, one column per series."""
    columns = [("period", "text", series["date_column"])]
    columns += [(f"s{i}", "number", s["name"]) for i, s in enumerate(series["series"])]
    rows = []
    for idx, label in enumerate(series["labels"]):
        row = {"period": label}
        for i, s in enumerate(series["series"]):
            row[f"s{i}"] = s["values"][idx]
        rows.append(row)
    return columns, rows, None


def generate_excel(series: dict, output_path: str | Path, title: str | None = None) -> Path:
    """Write a chart series (output of any builder) to an .xlsx file."""
    kind = series["kind"]
    ew = ExcelWriter()
    ws = ew.add_sheet(f"{kind.title()} Chart")

    row = ew.write_title(ws, title or f"{kind.title()} Chart", f"{series['rows']:,} source rows")

    kpis = [
        (series["rows"], "Rows", "integer"),
        (series["dropped"], "Dropped Rows", "integer"),
        (len(series["labels"]), "Labels", "integer"),
    ]
    if kind != "line":
        kpis.append((series["total"], "Total", "number"))
    row = ew.write_kpi_row(ws, row, kpis)

    if kind == "line":
        columns, rows, total = _period_table(series)
    else:
        columns, rows, total = _category_table(series)

    row = ew.write_section(ws, row, "Series")
    ew.write_table(ws, row, columns, rows, highlight_fn=_highlight_other, freeze=False, total_row=total)

    return ew.save(output_path)
