"""Pytest fixtures shared across the chart, API and CLI tests."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from csvcharts import config


BAR_CSV = """LGA Name,Total Tests,Notes
Sydney,"1,200",
Parramatta,800,
Sydney,300,late batch
Penrith,n/a,
Liverpool,150,
Blacktown,50,
"""

LINE_CSV = """Year,Tests,Positive
2021,10,1
2019,5,
2020,7,n/a
"""

PIE_CSV = """Type,Count
A,98
B,1
,1
C,-4
"""


@pytest.fixture
def inbox(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary inbox/exports folders wired into csvcharts.config."""

    inbox_dir = tmp_path / "inbox"
    exports_dir = tmp_path / "exports"
    (inbox_dir / "2024").mkdir(parents=True)
    (inbox_dir / "tests_by_lga.csv").write_text(BAR_CSV)
    (inbox_dir / "yearly.csv").write_text(LINE_CSV)
    (inbox_dir / "2024" / "types.csv").write_text(PIE_CSV)

    monkeypatch.setattr(config, "INBOX_FOLDER", inbox_dir)
    monkeypatch.setattr(config, "EXPORTS_FOLDER", exports_dir)
    return inbox_dir


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests with no filesystem or HTTP access.
    - `integration`: tests touching files, the CLI, or the HTTP API.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            invalid.append(item.nodeid)

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n" + joined
        )
