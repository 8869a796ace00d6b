"""
Pie chart series — category totals with small slices merged into "Other".
"""
from __future__ import annotations

from typing import Mapping, Optional, Sequence

from csvcharts.config import PIE_CATEGORY_HINTS, VALUE_HINTS, DEFAULT_THRESHOLD_PCT, UNKNOWN_LABEL
from csvcharts.charts.common import pct_of_total, require_rows, resolve_columns, sanitize_for_json
from csvcharts.charts.errors import NoValuesError
from csvcharts.data.aggregate import aggregate_rows, collapse_by_percent


def build_pie_series(
    rows: Sequence[Mapping],
    category_hints: Optional[Sequence[str]] = None,
    value_hints: Optional[Sequence[str]] = None,
    threshold_pct: float = DEFAULT_THRESHOLD_PCT,
) -> dict:
    """Positive values summed per category; slices under ``threshold_pct``% become "Other".

    Blank categories are counted as "Unknown" rather than dropped.
    """
    headers = require_rows(rows, "pie")
    cols = resolve_columns("pie", headers, {
        "category": category_hints or PIE_CATEGORY_HINTS,
        "value": value_hints or VALUE_HINTS,
    })
    cat_col, val_col = cols["category"], cols["value"]

    agg = aggregate_rows(rows, cat_col, val_col, empty_label=UNKNOWN_LABEL, positive_only=True)
    if not agg.totals:
        print("  [pie_chart] no positive values found")
        raise NoValuesError(f"pie chart: no positive values in column {val_col!r}")

    bucketed = collapse_by_percent(agg.totals, threshold_pct)
    if bucketed.other_count:
        other = bucketed.values[-1]
        print(f"  [pie_chart] combined {bucketed.other_count} small categories into Other (sum={other:g})")

    total = agg.total
    print(f"  [pie_chart] {len(bucketed)} slices (total={total:g}, droppedRows={agg.dropped})")

    return sanitize_for_json({
        "kind": "pie",
        "category_column": cat_col,
        "value_column": val_col,
        "labels": bucketed.labels,
        "values": bucketed.values,
        "percentages": [round(pct_of_total(v, total), 1) for v in bucketed.values],
        "total": total,
        "rows": agg.rows,
        "dropped": agg.dropped,
        "other_count": bucketed.other_count,
        "threshold_pct": threshold_pct,
    })
