"""
DatasetStore — In-memory CSV datasets keyed by inbox-relative name.

Loaded once at startup, queried on every request.
"""
from __future__ import annotations

from pathlib import Path

from csvcharts.config import INBOX_FOLDER
from csvcharts.data.loader import Row, dataset_name, discover_csvs, read_csv_rows


class DatasetStore:
    """Parsed rows for every CSV in the inbox."""

    def __init__(self) -> None:
        self.datasets: dict[str, list[Row]] = {}
        self.headers: dict[str, list[str]] = {}
        self._loaded = False

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self, inbox: Path = INBOX_FOLDER) -> "DatasetStore":
        """Read every CSV in inbox. Unreadable files are skipped."""
        print("Loading CSV datasets...")
        datasets: dict[str, list[Row]] = {}
        headers: dict[str, list[str]] = {}

        files = discover_csvs(inbox)
        for i, f in enumerate(files, 1):
            name = dataset_name(f, inbox)
            try:
                rows = read_csv_rows(f)
            except Exception as exc:
                print(f"  Warning: skipping {f.name}: {exc}")
                continue
            datasets[name] = rows
            headers[name] = list(rows[0].keys()) if rows else []
            print(f"  [{i}/{len(files)}] {name}: {len(rows):,} rows")

        if not datasets:
            print("  No CSVs found — starting with no datasets")

        self.datasets = datasets
        self.headers = headers
        self._loaded = True
        return self

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def names(self) -> list[str]:
        return sorted(self.datasets)

    def get(self, name: str) -> list[Row] | None:
        return self.datasets.get(name)

    def row_count(self) -> int:
        return sum(len(rows) for rows in self.datasets.values())

    def summary(self) -> list[dict]:
        """[{name, rows, headers}] for every dataset, sorted by name."""
        return [
            {"name": name, "rows": len(self.datasets[name]), "headers": self.headers.get(name, [])}
            for name in self.names()
        ]
