"""Per-kind chart series builders (bar, line, pie) on top of csvcharts.data."""
from .bar import build_bar_series
from .line import build_line_series, moving_average
from .pie import build_pie_series
from .dispatch import build_chart, detect_columns, parse_kind
from .errors import (
    ChartDataError, EmptyInputError, MissingColumnError, NoValuesError, UnknownChartKindError,
)
