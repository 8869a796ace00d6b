#!/usr/bin/env python3
"""
CSV Charts CLI — chart series from the terminal, Excel export, and API server.

USAGE:
  python -m csvcharts.cli columns data/tests.csv             # Show detected columns
  python -m csvcharts.cli bar data/tests.csv                 # Top 12 categories + Other
  python -m csvcharts.cli bar data/tests.csv --top 5 --value-hint amount
  python -m csvcharts.cli line data/yearly.csv --moving-average
  python -m csvcharts.cli pie data/types.csv --threshold 5

  python -m csvcharts.cli export pie data/types.csv          # Excel workbook in exports/
  python -m csvcharts.cli export bar data/tests.csv --output ./bar.xlsx

  python -m csvcharts.cli serve                              # Start API server
  python -m csvcharts.cli serve --port 8000
"""
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from csvcharts.config import DEFAULT_TOP_N, DEFAULT_THRESHOLD_PCT, EXPORTS_FOLDER
from csvcharts.data.columns import headers_of, normalize_hints
from csvcharts.charts.dispatch import build_chart, detect_columns
from csvcharts.charts.errors import ChartDataError
from csvcharts.data.loader import read_csv_rows
from csvcharts.reports.chart_report import generate_excel


def _load_rows(path: str) -> list[dict]:
    csv_path = Path(path)
    if not csv_path.exists():
        print(f"  File not found: {csv_path}")
        sys.exit(1)
    rows = read_csv_rows(csv_path)
    print(f"  Loaded {len(rows):,} rows from {csv_path.name}")
    return rows


def _chart_options(kind: str, args) -> dict:
    """Map CLI flags onto the chart builder keyword arguments."""
    if kind == "bar":
        return {
            "label_hints": normalize_hints(args.label_hint),
            "value_hints": normalize_hints(args.value_hint),
            "top_n": args.top,
        }
    if kind == "line":
        return {"date_hints": normalize_hints(args.date_hint), "moving_avg": args.moving_average}
    return {
        "category_hints": normalize_hints(args.category_hint),
        "value_hints": normalize_hints(args.value_hint),
        "threshold_pct": args.threshold,
    }


def _build_or_exit(kind: str, rows: list[dict], args) -> dict:
    try:
        return build_chart(kind, rows, **_chart_options(kind, args))
    except ChartDataError as exc:
        print(f"\n  Error: {exc}\n")
        sys.exit(1)


def _print_category_table(data: dict) -> None:
    label_col = data.get("label_column") or data.get("category_column")
    print(f"\n{label_col[:40]:<42}{data['value_column'][:16]:>16}")
    print("-" * 58)
    pcts = data.get("percentages") or [None] * len(data["labels"])
    for label, value, pct in zip(data["labels"], data["values"], pcts):
        suffix = f"  {pct:5.1f}%" if pct is not None else ""
        print(f"{label[:40]:<42}{value:>16,.2f}{suffix}")
    print("-" * 58)
    print(f"{'TOTAL':<42}{data['total']:>16,.2f}")


def _print_line_table(data: dict) -> None:
    names = [s["name"] for s in data["series"]]
    print("\n" + f"{data['date_column'][:20]:<22}" + "".join(f"{n[:14]:>16}" for n in names))
    print("-" * (22 + 16 * len(names)))
    for idx, label in enumerate(data["labels"]):
        cells = []
        for s in data["series"]:
            v = s["values"][idx]
            cells.append(f"{'—':>16}" if v is None else f"{v:>16,.2f}")
        print(f"{label[:20]:<22}" + "".join(cells))
    if data["skipped_columns"]:
        print(f"\n  Skipped non-numeric columns: {', '.join(data['skipped_columns'])}")


def cmd_chart(args):
    """Print a chart series as a table."""
    kind = args.command
    rows = _load_rows(args.file)
    data = _build_or_exit(kind, rows, args)

    print("\n" + "=" * 70)
    print(f"  {kind.upper()} CHART — {Path(args.file).name}")
    print("=" * 70)
    if kind == "line":
        _print_line_table(data)
    else:
        _print_category_table(data)
    print(f"\n  Rows: {data['rows']:,}  |  Dropped: {data['dropped']:,}", end="")
    if data.get("other_count"):
        print(f"  |  Merged into Other: {data['other_count']}", end="")
    print("\n")


def cmd_columns(args):
    """Show headers and the columns each chart kind would detect."""
    rows = _load_rows(args.file)
    headers = headers_of(rows)
    detected = detect_columns(headers)
    print(f"\nHEADERS ({len(headers)}):\n")
    for i, h in enumerate(headers, 1):
        print(f"  {i:<4}{h}")
    print("\nDETECTED:\n")
    print(f"  bar   label={detected['bar']['label']}  value={detected['bar']['value']}")
    print(f"  line  date={detected['line']['date']}  values={', '.join(detected['line']['values'])}")
    print(f"  pie   category={detected['pie']['category']}  value={detected['pie']['value']}\n")


def cmd_export(args):
    """Export a chart series to an Excel workbook."""
    rows = _load_rows(args.file)
    data = _build_or_exit(args.kind, rows, args)
    stem = Path(args.file).stem
    out = Path(args.output) if args.output else EXPORTS_FOLDER / f"{args.kind.title()}_Chart_{stem}.xlsx"
    path = generate_excel(data, out, title=f"{args.kind.title()} — {stem}")
    print(f"  Saved {path}")


def cmd_serve(args):
    """Start the API server."""
    import uvicorn
    print(f"\nStarting CSV Charts API on port {args.port}...")
    uvicorn.run("csvcharts.main:app", host="0.0.0.0", port=args.port, reload=args.reload,
                timeout_keep_alive=65)


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1 (got {value})")
    return n


def _percent(value: str) -> float:
    pct = float(value)
    if not 0 <= pct <= 100:
        raise argparse.ArgumentTypeError(f"must be between 0 and 100 (got {value})")
    return pct


def _add_chart_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument("--label-hint", action="append", help="Bar label column hint (repeatable)")
    p.add_argument("--value-hint", action="append", help="Value column hint (repeatable)")
    p.add_argument("--category-hint", action="append", help="Pie category column hint (repeatable)")
    p.add_argument("--date-hint", action="append", help="Line period column hint (repeatable)")
    p.add_argument("--top", type=_positive_int, default=DEFAULT_TOP_N, help=f"Bar: top N categories (default {DEFAULT_TOP_N})")
    p.add_argument("--threshold", type=_percent, default=DEFAULT_THRESHOLD_PCT,
                   help=f"Pie: merge slices below this %% (default {DEFAULT_THRESHOLD_PCT})")
    p.add_argument("--moving-average", action="store_true", help="Line: add 3-point moving averages")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="CSV Charts — bar, line and pie chart series from CSV data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    columns_parser = subparsers.add_parser("columns", help="Show detected columns")
    columns_parser.add_argument("file", help="CSV file")
    columns_parser.set_defaults(func=cmd_columns)

    for kind in ("bar", "line", "pie"):
        chart_parser = subparsers.add_parser(kind, help=f"Print {kind} chart series")
        chart_parser.add_argument("file", help="CSV file")
        _add_chart_flags(chart_parser)
        chart_parser.set_defaults(func=cmd_chart)

    export_parser = subparsers.add_parser("export", help="Export chart series to Excel")
    export_parser.add_argument("kind", choices=["bar", "line", "pie"], help="Chart kind")
    export_parser.add_argument("file", help="CSV file")
    export_parser.add_argument("--output", help="Output .xlsx path (default: exports folder)")
    _add_chart_flags(export_parser)
    export_parser.set_defaults(func=cmd_export)

    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8000")), help="Port (default 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return

    args.func(args)


if __name__ == "__main__":
    main()
