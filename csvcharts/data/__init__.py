"""Column detection, numeric cleanup, aggregation, and CSV dataset loading."""
from .columns import find_column, headers_of, normalize_hints
from .normalize import clean_number, clean_label, period_label, natural_sort_key
from .aggregate import aggregate_rows, collapse_top_n, collapse_by_percent
from .loader import discover_csvs, read_csv_rows
from .store import DatasetStore
from .schemas import AggregateResult, BucketedSeries, ChartKind
