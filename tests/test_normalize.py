"""Unit tests for cell cleanup helpers."""

from __future__ import annotations

import math

import pytest

from csvcharts.data.normalize import clean_label, clean_number, natural_sort_key, period_label

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("120.50", 120.5),
        ("$1,234.50", 1234.5),
        ("-42 kg", -42.0),
        (" 7 ", 7.0),
        (15, 15.0),
    ],
)
def test_clean_number_parses_after_stripping(raw, expected) -> None:
    assert clean_number(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "", "-", ".", "1.2.3", "n/a", None, float("inf")])
def test_clean_number_unparseable_is_nan(raw) -> None:
    assert math.isnan(clean_number(raw))


def test_clean_label_trims_and_handles_missing() -> None:
    assert clean_label("  ER ") == "ER"
    assert clean_label(None) == ""
    assert clean_label(float("nan")) == ""


def test_period_label_years_dates_and_text() -> None:
    assert period_label("2021") == "2021"
    assert period_label(" 2021-03-01 ") == "2021-03-01"
    assert period_label("03/15/2021") == "2021-03-15"
    assert period_label("Week 3") == "Week 3"
    assert period_label("Jan") == "Jan"
    assert period_label("2021Q2") == "2021Q2"
    assert period_label("2021-Q2") == "2021-Q2"
    assert period_label("Q3 2020") == "Q3 2020"
    assert period_label("") is None
    assert period_label(None) is None


def test_natural_sort_orders_digit_runs_numerically() -> None:
    labels = ["Week 10", "week 2", "Week 1"]
    assert sorted(labels, key=natural_sort_key) == ["Week 1", "week 2", "Week 10"]
    assert sorted(["2021", "2019", "2020"], key=natural_sort_key) == ["2019", "2020", "2021"]
