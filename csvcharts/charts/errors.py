"""
Chart data failures. Unparseable rows are not errors — they are tallied.
"""
from __future__ import annotations

from typing import Sequence


class ChartDataError(ValueError):
    """A chart series could not be built from the supplied rows."""


class EmptyInputError(ChartDataError):
    def __init__(self, chart: str) -> None:
        super().__init__(f"{chart} chart: no rows to render")
        self.chart = chart


class MissingColumnError(ChartDataError):
    """No header matched the hints for one or more required columns."""

    def __init__(self, chart: str, missing: Sequence[str], headers: Sequence[str]) -> None:
        self.chart = chart
        self.missing = list(missing)
        self.headers = list(headers)
        super().__init__(
            f"{chart} chart required columns missing: {', '.join(self.missing)} "
            f"(found headers: {', '.join(self.headers) or 'none'})"
        )


class NoValuesError(ChartDataError):
    """Rows exist but nothing plottable survived cleanup."""


class UnknownChartKindError(ChartDataError):
    def __init__(self, kind: str) -> None:
        super().__init__(f"Unknown chart kind: {kind!r} (expected bar, line or pie)")
        self.kind = kind
