"""
Chart kind dispatch and column preview.
"""
from __future__ import annotations

from typing import Mapping, Sequence

from csvcharts.config import BAR_LABEL_HINTS, PIE_CATEGORY_HINTS, VALUE_HINTS, LINE_DATE_HINTS
from csvcharts.charts.bar import build_bar_series
from csvcharts.charts.errors import UnknownChartKindError
from csvcharts.charts.line import build_line_series
from csvcharts.charts.pie import build_pie_series
from csvcharts.data.columns import find_column
from csvcharts.data.schemas import ChartKind

_BUILDERS = {
    ChartKind.BAR: build_bar_series,
    ChartKind.LINE: build_line_series,
    ChartKind.PIE: build_pie_series,
}


def parse_kind(kind: str | ChartKind) -> ChartKind:
    try:
        return ChartKind(kind)
    except ValueError:
        raise UnknownChartKindError(str(kind))


def build_chart(kind: str | ChartKind, rows: Sequence[Mapping], **options) -> dict:
    """Build the series for ``kind``; options go to the kind's builder as-is."""
    return _BUILDERS[parse_kind(kind)](rows, **options)


def detect_columns(headers: Sequence[str]) -> dict:
    """Which columns each chart kind would pick with its default hints."""
    date_col = find_column(headers, LINE_DATE_HINTS) or (headers[0] if headers else None)
    return {
        "bar": {
            "label": find_column(headers, BAR_LABEL_HINTS),
            "value": find_column(headers, VALUE_HINTS),
        },
        "line": {
            "date": date_col,
            "values": [h for h in headers if h != date_col],
        },
        "pie": {
            "category": find_column(headers, PIE_CATEGORY_HINTS),
            "value": find_column(headers, VALUE_HINTS),
        },
    }
