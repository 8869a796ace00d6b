"""
Heuristic column detection from header names.
"""
from __future__ import annotations

from typing import Optional, Sequence


def find_column(headers: Sequence[str], hints: Sequence[str]) -> Optional[str]:
    """Return the first header containing one of ``hints`` (case-insensitive).

    Hints are tried in priority order; for each hint the headers are scanned
    left to right, so an earlier hint always beats an earlier header:

        >>> find_column(["Region", "Category Name", "Value"], ["category", "label"])
        'Category Name'

    Returns None when no hint matches any header.
    """
    lowered = [(h or "").lower() for h in headers]
    for hint in hints:
        for idx, header in enumerate(lowered):
            if hint in header:
                return headers[idx]
    return None


def headers_of(rows: Sequence[dict]) -> list[str]:
    """Column names, taken from the first row."""
    if not rows:
        return []
    return list(rows[0].keys())


def normalize_hints(hints: Sequence[str] | None) -> list[str] | None:
    """Lowercase, trimmed user-supplied hints; None when nothing usable is left."""
    if not hints:
        return None
    cleaned = [h.strip().lower() for h in hints if h and h.strip()]
    return cleaned or None
