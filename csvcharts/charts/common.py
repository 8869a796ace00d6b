"""
Helpers shared by the chart builders: input checks, safe math, JSON cleanup.
"""
from __future__ import annotations

import math
from typing import Mapping, Optional, Sequence

import numpy as np
import pandas as pd

from csvcharts.charts.errors import EmptyInputError, MissingColumnError
from csvcharts.data.columns import find_column, headers_of


def require_rows(rows: Sequence[Mapping], chart: str) -> list[str]:
    """Raise EmptyInputError for no rows, else return the headers."""
    if not rows:
        print(f"  [{chart}_chart] no rows to render")
        raise EmptyInputError(chart)
    return headers_of(rows)


def resolve_columns(
    chart: str,
    headers: Sequence[str],
    hints_by_role: Mapping[str, Sequence[str]],
) -> dict[str, str]:
    """Detect one column per role; all missing roles are reported together."""
    found: dict[str, Optional[str]] = {
        role: find_column(headers, hints) for role, hints in hints_by_role.items()
    }
    missing = [role for role, col in found.items() if col is None]
    if missing:
        print(f"  [{chart}_chart] missing required columns {missing}. Found headers: {list(headers)}")
        raise MissingColumnError(chart, missing, headers)
    return found  # type: ignore[return-value]


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Divide safely, returning default if denominator is zero or NaN."""
    if denominator == 0 or pd.isna(denominator):
        return default
    result = numerator / denominator
    return default if pd.isna(result) else result


def pct_of_total(part: float, total: float) -> float:
    """Percentage of total."""
    return safe_divide(part, total) * 100


def sanitize_for_json(obj):
    """Recursively convert numpy/pandas types to native Python for JSON serialization.

    NaN/Inf floats become None so line gaps survive the round trip.
    """
    if isinstance(obj, dict):
        return {str(k): sanitize_for_json(v) for k, v in obj.items() if k is not None}
    if isinstance(obj, (list, tuple)):
        return [sanitize_for_json(v) for v in obj]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.bool_):
        return bool(obj)
    if isinstance(obj, (float, np.floating)):
        v = float(obj)
        return None if (math.isnan(v) or math.isinf(v)) else v
    if isinstance(obj, np.ndarray):
        return sanitize_for_json(obj.tolist())
    return obj
