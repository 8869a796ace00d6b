"""
Line chart series — one period column on the x axis, every other column a series.
"""
from __future__ import annotations

from typing import Mapping, Optional, Sequence

import pandas as pd

from csvcharts.config import LINE_DATE_HINTS, MOVING_AVERAGE_WINDOW
from csvcharts.charts.common import require_rows, sanitize_for_json
from csvcharts.charts.errors import MissingColumnError, NoValuesError
from csvcharts.data.aggregate import column_series, running_totals
from csvcharts.data.columns import find_column
from csvcharts.data.normalize import clean_numeric_series, natural_sort_key, period_label


def moving_average(values: Sequence[Optional[float]], window: int = MOVING_AVERAGE_WINDOW) -> list[Optional[float]]:
    """Centred moving average that skips gaps; None where the window is all gaps."""
    half = window // 2
    out: list[Optional[float]] = []
    for i in range(len(values)):
        win = [v for v in values[max(0, i - half): i + half + 1] if v is not None]
        out.append(round(sum(win) / len(win), 2) if win else None)
    return out


def _series_by_period(periods: pd.Series, values: pd.Series, labels: list[str]) -> list[Optional[float]]:
    has_value = values.notna()
    sums = running_totals(periods[has_value], values[has_value])
    return [sums.get(label) for label in labels]


def build_line_series(
    rows: Sequence[Mapping],
    date_hints: Optional[Sequence[str]] = None,
    moving_avg: bool = False,
) -> dict:
    """Build one series per numeric column against a sorted period axis.

    The period column falls back to the first header when no hint matches.
    Values are summed per period; periods without a number are gaps (None).
    Columns with no parseable value at all are left out.
    """
    headers = require_rows(rows, "line")
    if not headers:
        print("  [line_chart] first row has no columns")
        raise MissingColumnError("line", ["date"], headers)
    date_col = find_column(headers, date_hints or LINE_DATE_HINTS) or headers[0]
    value_cols = [h for h in headers if h != date_col]
    if not value_cols:
        print(f"  [line_chart] no value columns detected. Headers: {headers}")
        raise NoValuesError(f"line chart: no value columns besides {date_col!r}")

    periods = column_series(rows, date_col).map(period_label)
    keep = periods.notna()
    periods = periods[keep]
    dropped = int((~keep).sum())

    # first-seen order, then natural sort (stable for ties like "a"/"A")
    labels = sorted(dict.fromkeys(periods), key=natural_sort_key)

    series = []
    skipped = []
    for col in value_cols:
        values = clean_numeric_series(column_series(rows, col))[keep]
        points = _series_by_period(periods, values, labels)
        valid = sum(1 for p in points if p is not None)
        if not valid:
            skipped.append(col)
            continue
        series.append({"name": col, "values": points, "valid_count": valid})
        if moving_avg:
            series.append({
                "name": f"{col} (MA)",
                "values": moving_average(points),
                "valid_count": valid,
                "moving_average": True,
            })

    if not series:
        print("  [line_chart] no valid numeric series to plot after parsing.")
        raise NoValuesError("line chart: no valid numeric series to plot")

    print(f"  [line_chart] {len(series)} dataset series (labels={len(labels)}, droppedRows={dropped})")

    return sanitize_for_json({
        "kind": "line",
        "date_column": date_col,
        "value_columns": [s["name"] for s in series if not s.get("moving_average")],
        "skipped_columns": skipped,
        "labels": labels,
        "series": series,
        "rows": len(rows),
        "dropped": dropped,
    })
