"""
Row aggregation and tail collapsing ("Other" bucketing).
"""
from __future__ import annotations

from typing import Mapping, Optional, Sequence

import pandas as pd

from csvcharts.config import OTHER_LABEL
from csvcharts.data.normalize import clean_label_series, clean_numeric_series
from csvcharts.data.schemas import AggregateResult, BucketedSeries


def column_series(rows: Sequence[Mapping], col: str) -> pd.Series:
    """One column of a row list as an object Series (missing cells → None)."""
    return pd.Series([row.get(col) for row in rows], dtype=object)


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------

def running_totals(labels: pd.Series, values: pd.Series) -> dict[str, float]:
    """Add each value to its label's total in row order, starting at 0.

    Totals equal adding the parsed values one by one; no compensated summation.
    """
    totals: dict[str, float] = {}
    for label, value in zip(labels, values):
        totals[str(label)] = totals.get(str(label), 0.0) + float(value)
    return totals


def aggregate_rows(
    rows: Sequence[Mapping],
    label_col: str,
    value_col: str,
    empty_label: Optional[str] = None,
    positive_only: bool = False,
) -> AggregateResult:
    """Sum cleaned ``value_col`` per trimmed ``label_col``.

    Rows with an empty label (unless ``empty_label`` is given) or a value that
    does not parse to a finite number are dropped and counted. With
    ``positive_only`` values <= 0 are dropped as well. Labels keep their
    first-seen order and are matched case-sensitively.
    """
    if not rows:
        return AggregateResult()

    labels = clean_label_series(column_series(rows, label_col))
    if empty_label is not None:
        labels = labels.mask(labels == "", empty_label)
    values = clean_numeric_series(column_series(rows, value_col))

    keep = (labels != "") & values.notna()
    if positive_only:
        keep &= values > 0

    return AggregateResult(
        totals=running_totals(labels[keep], values[keep]),
        dropped=int((~keep).sum()),
        rows=len(rows),
    )


# ---------------------------------------------------------------------------
# Tail collapsing
# ---------------------------------------------------------------------------

def rank_entries(totals: Mapping[str, float]) -> list[tuple[str, float]]:
    """Entries by descending value; equal values keep first-seen order."""
    # sorted() stays stable with reverse=True
    return sorted(totals.items(), key=lambda item: item[1], reverse=True)


def collapse_top_n(totals: Mapping[str, float], top_n: int) -> BucketedSeries:
    """Keep the ``top_n`` largest entries and merge the rest into "Other"."""
    if top_n < 1:
        raise ValueError(f"top_n must be at least 1 (got {top_n})")
    ranked = rank_entries(totals)
    if len(ranked) <= top_n:
        return BucketedSeries(entries=ranked)

    top, rest = ranked[:top_n], ranked[top_n:]
    other_sum = sum(value for _, value in rest)
    return BucketedSeries(entries=top + [(OTHER_LABEL, other_sum)], other_count=len(rest))


def collapse_by_percent(totals: Mapping[str, float], threshold_pct: float) -> BucketedSeries:
    """Merge entries below ``threshold_pct`` percent of the grand total into "Other".

    "Other" is appended last whatever its size. A zero grand total has no
    shares to compare, so nothing is merged.
    """
    if not 0 <= threshold_pct <= 100:
        raise ValueError(f"threshold_pct must be between 0 and 100 (got {threshold_pct})")
    ranked = rank_entries(totals)
    grand_total = sum(value for _, value in ranked)
    if grand_total == 0:
        return BucketedSeries(entries=ranked)

    big: list[tuple[str, float]] = []
    small: list[tuple[str, float]] = []
    for label, value in ranked:
        if value / grand_total * 100 < threshold_pct:
            small.append((label, value))
        else:
            big.append((label, value))

    if small:
        big.append((OTHER_LABEL, sum(value for _, value in small)))
    return BucketedSeries(entries=big, other_count=len(small))
