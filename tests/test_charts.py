"""Unit tests for the per-kind chart series builders."""

from __future__ import annotations

import pytest

from csvcharts.charts import (
    EmptyInputError,
    MissingColumnError,
    NoValuesError,
    UnknownChartKindError,
    build_bar_series,
    build_chart,
    build_line_series,
    build_pie_series,
    detect_columns,
    moving_average,
)
from csvcharts.charts.bar import suggested_max

pytestmark = pytest.mark.unit


LGA_ROWS = [
    {"LGA Name": "Sydney", "Total Tests": "1,200"},
    {"LGA Name": "Parramatta", "Total Tests": "800"},
    {"LGA Name": "Sydney", "Total Tests": "300"},
    {"LGA Name": "Penrith", "Total Tests": "n/a"},
    {"LGA Name": "Liverpool", "Total Tests": "150"},
    {"LGA Name": "Blacktown", "Total Tests": "50"},
]


# ---------------------------------------------------------------------------
# Bar
# ---------------------------------------------------------------------------

def test_bar_detects_columns_and_collapses_tail() -> None:
    data = build_bar_series(LGA_ROWS, top_n=2)

    assert data["label_column"] == "LGA Name"
    assert data["value_column"] == "Total Tests"
    assert data["labels"] == ["Sydney", "Parramatta", "Other"]
    assert data["values"] == [1500.0, 800.0, 200.0]
    assert data["dropped"] == 1
    assert data["other_count"] == 2
    assert data["total"] == 2500.0


def test_bar_hint_overrides() -> None:
    rows = [
        {"dept": "ER", "bill": "120.50"},
        {"dept": "ER", "bill": "30"},
        {"dept": "", "bill": "10"},
        {"dept": "ICU", "bill": "abc"},
    ]
    data = build_bar_series(rows, label_hints=["dept"], value_hints=["bill"])

    assert data["labels"] == ["ER"]
    assert data["values"] == [150.5]
    assert data["dropped"] == 2
    assert data["suggested_max"] == 163


def test_bar_reports_every_missing_column() -> None:
    with pytest.raises(MissingColumnError) as excinfo:
        build_bar_series([{"dept": "ER", "bill": "1"}])

    assert excinfo.value.missing == ["label", "value"]
    assert excinfo.value.headers == ["dept", "bill"]
    assert "required columns missing: label, value" in str(excinfo.value)


def test_bar_empty_input() -> None:
    with pytest.raises(EmptyInputError):
        build_bar_series([])


def test_suggested_max_has_headroom_and_floor() -> None:
    assert suggested_max([10, 8, 6]) == 11
    assert suggested_max([]) == 1
    assert suggested_max([-5]) == 1


# ---------------------------------------------------------------------------
# Line
# ---------------------------------------------------------------------------

YEAR_ROWS = [
    {"Year": "2021", "Tests": "10", "Positive": "1", "Notes": "final"},
    {"Year": "2019", "Tests": "5", "Positive": "", "Notes": "draft"},
    {"Year": "2020", "Tests": "7", "Positive": "n/a", "Notes": ""},
]


def test_line_sorts_periods_and_leaves_gaps() -> None:
    data = build_line_series(YEAR_ROWS)

    assert data["date_column"] == "Year"
    assert data["labels"] == ["2019", "2020", "2021"]
    by_name = {s["name"]: s for s in data["series"]}
    assert by_name["Tests"]["values"] == [5.0, 7.0, 10.0]
    assert by_name["Positive"]["values"] == [None, None, 1.0]
    assert by_name["Positive"]["valid_count"] == 1
    assert data["skipped_columns"] == ["Notes"]
    assert data["value_columns"] == ["Tests", "Positive"]


def test_line_sums_duplicate_periods_and_drops_blank_periods() -> None:
    rows = [
        {"Month": "Week 10", "Cases": "4"},
        {"Month": "Week 2", "Cases": "1"},
        {"Month": "Week 10", "Cases": "6"},
        {"Month": " ", "Cases": "99"},
    ]
    data = build_line_series(rows)

    assert data["labels"] == ["Week 2", "Week 10"]
    assert data["series"][0]["values"] == [1.0, 10.0]
    assert data["dropped"] == 1


def test_line_falls_back_to_first_column() -> None:
    rows = [{"Region": "North", "Q1": "3"}, {"Region": "East", "Q1": "4"}]
    data = build_line_series(rows)

    assert data["date_column"] == "Region"
    assert data["labels"] == ["East", "North"]


def test_line_moving_average_series() -> None:
    data = build_line_series(YEAR_ROWS, moving_avg=True)
    names = [s["name"] for s in data["series"]]

    assert names == ["Tests", "Tests (MA)", "Positive", "Positive (MA)"]
    assert data["series"][1]["values"] == [6.0, 7.33, 8.5]
    assert data["series"][3]["values"] == [None, 1.0, 1.0]


def test_moving_average_skips_gaps() -> None:
    assert moving_average([None, None, None]) == [None, None, None]
    assert moving_average([1.0, None, 3.0]) == [1.0, 2.0, 3.0]


def test_line_without_numeric_columns() -> None:
    with pytest.raises(NoValuesError):
        build_line_series([{"Date": "2020-01-01", "Note": "x"}])
    with pytest.raises(NoValuesError):
        build_line_series([{"Date": "2020-01-01"}])


def test_line_first_row_without_columns() -> None:
    with pytest.raises(MissingColumnError) as excinfo:
        build_line_series([{}])
    assert excinfo.value.missing == ["date"]


# ---------------------------------------------------------------------------
# Pie
# ---------------------------------------------------------------------------

def test_pie_merges_small_slices_and_reports_percentages() -> None:
    rows = [
        {"Type": "A", "Count": "98"},
        {"Type": "B", "Count": "1"},
        {"Type": "", "Count": "1"},
        {"Type": "C", "Count": "-4"},
        {"Type": "D", "Count": "none"},
    ]
    data = build_pie_series(rows)

    assert data["category_column"] == "Type"
    assert data["labels"] == ["A", "Other"]
    assert data["values"] == [98.0, 2.0]
    assert data["percentages"] == [98.0, 2.0]
    assert data["other_count"] == 2
    assert data["dropped"] == 2
    assert data["total"] == 100.0


def test_pie_counts_blank_categories_as_unknown() -> None:
    rows = [{"Type": "A", "Count": "50"}, {"Type": "", "Count": "50"}]
    data = build_pie_series(rows)
    assert data["labels"] == ["A", "Unknown"]


def test_pie_without_positive_values() -> None:
    with pytest.raises(NoValuesError):
        build_pie_series([{"Type": "A", "Count": "0"}, {"Type": "B", "Count": "-1"}])


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def test_build_chart_dispatches_by_kind() -> None:
    assert build_chart("bar", LGA_ROWS)["kind"] == "bar"
    assert build_chart("pie", LGA_ROWS)["kind"] == "pie"


def test_build_chart_unknown_kind() -> None:
    with pytest.raises(UnknownChartKindError):
        build_chart("donut", LGA_ROWS)


def test_detect_columns_per_kind() -> None:
    detected = detect_columns(["Year", "Category", "Amount"])

    assert detected["bar"] == {"label": "Category", "value": "Amount"}
    assert detected["line"] == {"date": "Year", "values": ["Category", "Amount"]}
    assert detected["pie"] == {"category": "Category", "value": "Amount"}


def test_detect_columns_without_headers() -> None:
    detected = detect_columns([])

    assert detected["line"] == {"date": None, "values": []}
    assert detected["bar"] == {"label": None, "value": None}
