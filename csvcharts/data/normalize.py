"""
Cell cleanup: best-effort numbers, trimmed labels, period labels, natural sort.
"""
from __future__ import annotations

import math
import re
import warnings

import pandas as pd


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------

_NON_NUMERIC_RE = re.compile(r"[^0-9.\-]")


def clean_number(raw) -> float:
    """Parse a cell like "$1,234.50" or "12 kg" to a float.

    Everything except digits, "." and "-" is stripped before parsing.
    Returns NaN when nothing parseable is left or the result is not finite.
    """
    if raw is None:
        return math.nan
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        value = float(raw)
        return value if math.isfinite(value) else math.nan

    cleaned = _NON_NUMERIC_RE.sub("", str(raw))
    try:
        value = float(cleaned)
    except ValueError:
        return math.nan
    return value if math.isfinite(value) else math.nan


def clean_numeric_series(s: pd.Series) -> pd.Series:
    """Vectorised clean_number — NaN marks unparseable cells."""
    return s.map(clean_number).astype("float64")


# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------

def clean_label(raw) -> str:
    """Trimmed text of a cell; missing cells become ""."""
    if raw is None or (isinstance(raw, float) and math.isnan(raw)):
        return ""
    return str(raw).strip()


def clean_label_series(s: pd.Series) -> pd.Series:
    return s.map(clean_label).astype(object)


# ---------------------------------------------------------------------------
# Period labels (line chart x axis)
# ---------------------------------------------------------------------------

_YEAR_RE = re.compile(r"\d{4}")
_QUARTER_RE = re.compile(r"\d{4}\s*-?\s*Q[1-4]|Q[1-4]\s*-?\s*\d{4}", re.IGNORECASE)


def period_label(raw) -> str | None:
    """Normalise a date/period cell for the x axis.

    "2021" stays a year and quarters ("2021Q2", "Q2 2021") stay as written.
    Anything pandas can read as a date becomes YYYY-MM-DD; other text
    (e.g. "Week 3") is kept as-is. Empty → None.
    """
    text = clean_label(raw)
    if not text:
        return None
    if _YEAR_RE.fullmatch(text) or _QUARTER_RE.fullmatch(text):
        return text
    # Without a 4-digit run the date parser would invent the current year
    if not _YEAR_RE.search(text):
        return text
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            parsed = pd.to_datetime(text)
    except (ValueError, TypeError, OverflowError):
        return text
    if pd.isna(parsed):
        return text
    return parsed.date().isoformat()


def natural_sort_key(label: str) -> tuple:
    """Sort key comparing digit runs numerically: "Week 2" < "Week 10"."""
    parts = re.split(r"(\d+)", label.lower())
    # re.split with a capture group alternates text, digits, text, ...
    return tuple(int(p) if i % 2 else p for i, p in enumerate(parts))
