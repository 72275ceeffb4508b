#!/usr/bin/env python3
"""
Mental Health Care Dashboard CLI — option lists, filtered views, exports, and the web server.

USAGE:
  python -m mhc_dashboard.cli options                                  # Dropdown values
  python -m mhc_dashboard.cli options --source other.csv

  python -m mhc_dashboard.cli views --group "By Age" \\
      --time-period "Aug 19 - Aug 31, 2020" \\
      --indicator "Received Counseling Or Therapy, Last 4 Weeks"         # Print both views

  python -m mhc_dashboard.cli export --group ... --time-period ... --indicator ...
  python -m mhc_dashboard.cli export ... --output ./exports             # Charts (HTML) + Excel

  python -m mhc_dashboard.cli serve                                    # Start the dashboard
  python -m mhc_dashboard.cli serve --port 8000
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from mhc_dashboard.config import DATA_SOURCE, OUTPUT_FOLDER
from mhc_dashboard.data.loader import LoadError
from mhc_dashboard.data.store import DataStore
from mhc_dashboard.data.schemas import Selection
from mhc_dashboard.analytics.common import view_frame


def _load_store(args) -> DataStore:
    """Load the dataset or exit with status 1."""
    try:
        return DataStore(args.source).load()
    except LoadError as exc:
        print(f"  Could not load data: {exc}", file=sys.stderr)
        sys.exit(1)


def _build_selection(args) -> Selection:
    return Selection(group=args.group, time_period=args.time_period, indicator=args.indicator)


def cmd_options(args):
    """Print the sorted dropdown values."""
    store = _load_store(args)
    options = store.filter_options()
    print(f"\n{store.row_count():,} records from {store.source}\n")
    for title, values in (
        ("GROUPS", options.groups),
        ("TIME PERIODS", options.time_periods),
        ("INDICATORS", options.indicators),
    ):
        print(f"{title} ({len(values)}):")
        for v in values:
            print(f"  {v}")
        print()


def cmd_views(args):
    """Print the line and bar views for a selection."""
    store = _load_store(args)
    selection = _build_selection(args)
    views = store.views(selection)

    print(f"\n{selection.label}\n")
    for title, view, cols in (
        ("OVER TIME", views.line, ["time_period", "subgroup", "value", "ci_lower", "ci_upper"]),
        ("BY SUBGROUP", views.bar, ["subgroup", "value", "ci_lower", "ci_upper"]),
    ):
        print(f"{title} ({len(view)}):")
        if view:
            print(view_frame(view)[cols].to_string(index=False))
        else:
            print("  No data available")
        print()


def cmd_export(args):
    """Write both charts as standalone HTML plus the Excel selection report."""
    from mhc_dashboard.charts import build_bar_chart, build_line_chart
    from mhc_dashboard.reports.selection_report import generate_excel

    store = _load_store(args)
    selection = _build_selection(args)
    views = store.views(selection)

    out = Path(args.output)
    out.mkdir(parents=True, exist_ok=True)

    build_line_chart(views.line).write_html(out / "line_chart.html", include_plotlyjs="cdn")
    build_bar_chart(views.bar).write_html(out / "bar_chart.html", include_plotlyjs="cdn")
    generate_excel(store, selection, out / "Selection_Report.xlsx")

    print(f"\n  {selection.label}")
    print(f"  Line points: {len(views.line)}  |  Bars: {len(views.bar)}")
    print(f"  Saved to: {out.resolve()}\n")


def cmd_serve(args):
    """Start the dashboard server."""
    import uvicorn
    print(f"\nStarting Mental Health Care Dashboard on port {args.port}...")
    uvicorn.run("mhc_dashboard.main:app", host="0.0.0.0", port=args.port, reload=args.reload,
                timeout_keep_alive=65)


def _add_selection_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--group", required=True, help="Group, e.g. 'By Age'")
    parser.add_argument("--time-period", required=True, help="Time period label")
    parser.add_argument("--indicator", required=True, help="Indicator label")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Mental Health Care Dashboard — survey estimates by group and time period",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command")

    # options subcommand
    options_parser = subparsers.add_parser("options", help="List dropdown values")
    options_parser.add_argument("--source", default=DATA_SOURCE, help="CSV path or URL")
    options_parser.set_defaults(func=cmd_options)

    # views subcommand
    views_parser = subparsers.add_parser("views", help="Print filtered views")
    _add_selection_args(views_parser)
    views_parser.add_argument("--source", default=DATA_SOURCE, help="CSV path or URL")
    views_parser.set_defaults(func=cmd_views)

    # export subcommand
    export_parser = subparsers.add_parser("export", help="Export charts and Excel report")
    _add_selection_args(export_parser)
    export_parser.add_argument("--source", default=DATA_SOURCE, help="CSV path or URL")
    export_parser.add_argument("--output", default=str(OUTPUT_FOLDER), help="Output directory")
    export_parser.set_defaults(func=cmd_export)

    # serve subcommand
    serve_parser = subparsers.add_parser("serve", help="Start the dashboard server")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8000")), help="Port (default 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return

    args.func(args)


if __name__ == "__main__":
    main()
