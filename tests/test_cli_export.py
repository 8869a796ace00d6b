"""Integration tests for the CLI and the Excel chart export."""

from __future__ import annotations

from pathlib import Path

import pytest
from openpyxl import load_workbook

from csvcharts.cli import main
from csvcharts.data.loader import read_csv_rows
from csvcharts.charts.dispatch import build_chart
from csvcharts.reports.chart_report import generate_excel

pytestmark = pytest.mark.integration


def _column_a(path: Path) -> list:
    ws = load_workbook(path).active
    return [row[0] for row in ws.iter_rows(min_col=1, max_col=1, values_only=True)]


def test_cli_bar_prints_table(inbox: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["bar", str(inbox / "tests_by_lga.csv"), "--top", "2"])
    out = capsys.readouterr().out

    assert "BAR CHART — tests_by_lga.csv" in out
    assert "Sydney" in out
    assert "Other" in out
    assert "Merged into Other: 2" in out


def test_cli_columns(inbox: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["columns", str(inbox / "yearly.csv")])
    out = capsys.readouterr().out

    assert "line  date=Year  values=Tests, Positive" in out


def test_cli_chart_error_exits_nonzero(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "zeros.csv"
    path.write_text("Type,Count\nA,0\n")

    with pytest.raises(SystemExit) as excinfo:
        main(["pie", str(path)])

    assert excinfo.value.code == 1
    assert "no positive values" in capsys.readouterr().out


def test_cli_export_writes_workbook(inbox: Path, tmp_path: Path) -> None:
    out = tmp_path / "pie.xlsx"
    main(["export", "pie", str(inbox / "2024" / "types.csv"), "--output", str(out)])

    assert out.exists()
    column_a = _column_a(out)
    assert column_a[0] == "Pie — types"
    assert "Other" in column_a
    assert "TOTAL" in column_a


def test_line_export_has_one_column_per_series(inbox: Path, tmp_path: Path) -> None:
    rows = read_csv_rows(inbox / "yearly.csv")
    series = build_chart("line", rows)
    path = generate_excel(series, tmp_path / "line.xlsx")

    ws = load_workbook(path).active
    assert ws.title == "Line Chart"
    header = next(
        row for row in ws.iter_rows(values_only=True) if row and row[0] == "Year"
    )
    assert list(header[:3]) == ["Year", "Tests", "Positive"]
    assert "2019" in _column_a(path)


@pytest.mark.parametrize("flags", [["--top", "-1"], ["--top", "0"], ["--threshold", "150"]])
def test_cli_rejects_out_of_range_options(inbox: Path, flags: list[str]) -> None:
    kind = "pie" if flags[0] == "--threshold" else "bar"

    with pytest.raises(SystemExit) as excinfo:
        main([kind, str(inbox / "tests_by_lga.csv"), *flags])

    assert excinfo.value.code == 2
