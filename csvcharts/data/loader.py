"""
CSV discovery and loading into row dicts.
"""
from __future__ import annotations

import io
from pathlib import Path
from typing import Union

import pandas as pd

from csvcharts.config import INBOX_FOLDER


Row = dict[str, str]


# ---------------------------------------------------------------------------
# CSV discovery
# ---------------------------------------------------------------------------

def discover_csvs(inbox: Path = INBOX_FOLDER) -> list[Path]:
    """Recursively find CSVs in inbox (including subfolders), sorted by path."""
    if not inbox.exists():
        return []
    return sorted(inbox.rglob("*.csv"))


def dataset_name(filepath: Path, inbox: Path = INBOX_FOLDER) -> str:
    """Inbox-relative path without the .csv suffix, e.g. "2024/tests_by_lga"."""
    try:
        rel = filepath.relative_to(inbox)
    except ValueError:
        rel = Path(filepath.name)
    return rel.with_suffix("").as_posix()


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def read_csv_rows(source: Union[str, Path, bytes]) -> list[Row]:
    """Read a CSV (path or raw bytes) into a list of {header: cell} dicts.

    Every cell stays a string — numeric cleanup happens per chart — and
    header names are trimmed. An empty or header-only file gives [].
    """
    if isinstance(source, bytes):
        source = io.BytesIO(source)
    try:
        df = pd.read_csv(
            source,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            encoding="utf-8-sig",
        )
    except pd.errors.EmptyDataError:
        return []

    df.columns = [str(c).strip() for c in df.columns]
    # Short rows still come back as NaN
    df = df.fillna("")
    return df.to_dict("records")
