"""
Bar chart series — one category column, one value column, top-N + "Other".
"""
from __future__ import annotations

import math
from typing import Mapping, Optional, Sequence

from csvcharts.config import BAR_LABEL_HINTS, VALUE_HINTS, DEFAULT_TOP_N, Y_AXIS_HEADROOM
from csvcharts.charts.common import require_rows, resolve_columns, sanitize_for_json
from csvcharts.data.aggregate import aggregate_rows, collapse_top_n


def suggested_max(values: Sequence[float]) -> int:
    """Value-axis ceiling with headroom above the tallest bar (at least 1)."""
    top = max([*values, 0])
    return math.ceil(top * Y_AXIS_HEADROOM) or 1


def build_bar_series(
    rows: Sequence[Mapping],
    label_hints: Optional[Sequence[str]] = None,
    value_hints: Optional[Sequence[str]] = None,
    top_n: int = DEFAULT_TOP_N,
) -> dict:
    """Sum values per category, keep the ``top_n`` largest, bucket the rest."""
    headers = require_rows(rows, "bar")
    cols = resolve_columns("bar", headers, {
        "label": label_hints or BAR_LABEL_HINTS,
        "value": value_hints or VALUE_HINTS,
    })
    label_col, value_col = cols["label"], cols["value"]

    agg = aggregate_rows(rows, label_col, value_col)
    print(f"  [bar_chart] rows={agg.rows} aggregatedLabels={len(agg.totals)} droppedRows={agg.dropped}")

    bucketed = collapse_top_n(agg.totals, top_n)
    if bucketed.other_count:
        other = bucketed.values[-1]
        print(f"  [bar_chart] collapsed {bucketed.other_count} categories into Other (sum={other:g})")

    return sanitize_for_json({
        "kind": "bar",
        "label_column": label_col,
        "value_column": value_col,
        "labels": bucketed.labels,
        "values": bucketed.values,
        "total": bucketed.total,
        "rows": agg.rows,
        "dropped": agg.dropped,
        "other_count": bucketed.other_count,
        "top_n": top_n,
        "suggested_max": suggested_max(bucketed.values),
    })
