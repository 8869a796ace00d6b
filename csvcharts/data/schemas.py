"""
Aggregation result schemas and chart kinds.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ChartKind(str, Enum):
    BAR = "bar"
    LINE = "line"
    PIE = "pie"


@dataclass
class AggregateResult:
    """Per-label totals plus the number of rows that could not be used."""
    totals: dict[str, float] = field(default_factory=dict)
    dropped: int = 0
    rows: int = 0              # rows seen, kept + dropped

    @property
    def total(self) -> float:
        return sum(self.totals.values())


@dataclass
class BucketedSeries:
    """Ordered (label, value) pairs after tail collapsing.

    ``other_count`` is how many real entries were merged into the synthetic
    "Other" entry; it is 0 when no "Other" entry is present.
    """
    entries: list[tuple[str, float]] = field(default_factory=list)
    other_count: int = 0

    @property
    def labels(self) -> list[str]:
        return [label for label, _ in self.entries]

    @property
    def values(self) -> list[float]:
        return [value for _, value in self.entries]

    @property
    def total(self) -> float:
        return sum(self.values)

    def __len__(self) -> int:
        return len(self.entries)
