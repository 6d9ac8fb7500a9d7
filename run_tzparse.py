#!/usr/bin/env python3
"""
tzparse - Command Line Entry Point

Examples:
    python3 run_tzparse.py Europe/Paris
    python3 run_tzparse.py Europe/Paris --year 2019
    python3 run_tzparse.py America/New_York --all --format csv --output ny.csv
    python3 run_tzparse.py Australia/Sydney --all --summary
"""

import argparse
import sys

import pandas as pd

from tzparse.config_loader import OUTPUT_FORMATS, load_config
from tzparse.data_processing import process_yearly_summary, timechanges_to_dataframe
from tzparse.errors import TzError
from tzparse.query import get_timechanges, get_zoneinfo
from tzparse.serialization import render_text, render_timechanges_text, to_json, zone_state_to_dict
from tzparse.timezone_utils import resolve_zone_path
from tzparse.utils import export_to_csv, parse_year


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="Show DST transitions and current offset facts for a timezone."
    )
    parser.add_argument('zone', nargs='?', help="Zone name (Europe/Paris) or zone file path")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument('--year', help="Show offset changes for a year ('current' for this year)")
    mode.add_argument('--all', action='store_true', help="Show every recorded offset change")
    parser.add_argument('--summary', action='store_true', help="Summarize offset changes per year")
    parser.add_argument('--format', choices=OUTPUT_FORMATS, help="Output format")
    parser.add_argument('--output', help="Write CSV output to this file")
    parser.add_argument('--zoneinfo-dir', help="Zone database directory")
    parser.add_argument('--config', default='config.ini', help="Path to config file")
    return parser


def show_timechanges(path: str, zone: str, year, fmt: str, summary: bool, output: str | None) -> None:
    """Print offset changes in the requested format."""
    changes = get_timechanges(path, year)

    if summary or fmt == 'csv':
        df = timechanges_to_dataframe(changes)
        if summary:
            print(f"Offset changes per year for {zone}:")
            print(process_yearly_summary(df).to_string())
            return
        if output:
            export_to_csv(df, output)
        else:
            print(df.to_csv(index=False), end='')
        return

    if fmt == 'json':
        print(to_json(changes))
    else:
        print(render_timechanges_text(changes))


def show_zoneinfo(path: str, fmt: str, output: str | None) -> None:
    """Print the present state of a zone in the requested format."""
    state = get_zoneinfo(path)

    if fmt == 'json':
        print(to_json(state))
    elif fmt == 'csv':
        df = pd.DataFrame([zone_state_to_dict(state)])
        if output:
            export_to_csv(df, output)
        else:
            print(df.to_csv(index=False), end='')
    else:
        print(render_text(state))


def main(argv=None) -> int:
    """Run the command line interface."""
    args = build_parser().parse_args(argv)

    try:
        settings = load_config(args.config)
    except ValueError as e:
        print(f"\nConfiguration Error:\n{e}\n", file=sys.stderr)
        return 2

    zone = args.zone or settings.default_zone
    fmt = args.format or settings.output_format

    try:
        year = parse_year(args.year) if args.year is not None else None
        path = resolve_zone_path(zone, args.zoneinfo_dir or settings.zoneinfo_dir)

        if args.year is not None or args.all or args.summary:
            show_timechanges(path, zone, year, fmt, args.summary, args.output)
        else:
            show_zoneinfo(path, fmt, args.output)
    except TzError as e:
        print(f"Error ({type(e).__name__}): {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
