"""CLI entry point for snowfall-tracker."""

import argparse
import logging
import sys

from snowfall_tracker.config import BUNDLE_JSON, DEFAULT_SOURCE, MIN_SEASON_DAYS


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="snowfall-tracker",
        description="Cumulative seasonal snowfall: build the data bundle and chart series",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command")

    # build subcommand
    build_parser = subparsers.add_parser("build", help="Build the JSON bundle from a GHCN Daily CSV export")
    build_parser.add_argument("--input", required=True, help="GHCN Daily CSV (needs DATE and SNOW/SNWD columns)")
    build_parser.add_argument("--output", default=str(BUNDLE_JSON), help="Bundle JSON path")
    build_parser.add_argument("--mode", choices=["direct", "depth"], default="direct",
                              help="direct: use SNOW; depth: derive from SNWD changes")
    build_parser.add_argument("--source", default=DEFAULT_SOURCE, help="Station attribution")
    build_parser.add_argument("--min-days", type=int, default=MIN_SEASON_DAYS,
                              help="Exclude seasons with fewer recorded days")

    # summary subcommand
    summary_parser = subparsers.add_parser("summary", help="Print season totals from a bundle")
    summary_parser.add_argument("--bundle", default=str(BUNDLE_JSON), help="Bundle JSON path")
    summary_parser.add_argument("--last", type=int, default=None, help="Only the most recent N seasons")

    # chart subcommand
    chart_parser = subparsers.add_parser("chart", help="Print chart-ready series JSON for a year range")
    chart_parser.add_argument("--bundle", default=str(BUNDLE_JSON), help="Bundle JSON path")
    chart_parser.add_argument("--start", type=int, default=None, help="First season start year")
    chart_parser.add_argument("--end", type=int, default=None, help="Last season start year")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "build":
        _build(args)
    elif args.command == "summary":
        _summary(args)
    elif args.command == "chart":
        _chart(args)


def _build(args: argparse.Namespace) -> None:
    from snowfall_tracker.compute.seasons import aggregate_seasons
    from snowfall_tracker.ingest.bundle import build_bundle, write_bundle
    from snowfall_tracker.ingest.ghcn_daily import read_ghcn_daily

    observations = read_ghcn_daily(args.input)
    if observations.empty:
        print(f"No usable rows in {args.input}", file=sys.stderr)
        sys.exit(1)

    seasons = aggregate_seasons(observations, mode=args.mode, min_days=args.min_days)
    bundle = build_bundle(seasons, source=args.source, mode=args.mode)
    path = write_bundle(bundle, args.output)
    print(f"Wrote {len(seasons)} seasons ({bundle.data_range}) to {path}")


def _summary(args: argparse.Namespace) -> None:
    bundle = _load_or_exit(args.bundle)

    seasons = bundle.seasons
    if args.last is not None:
        seasons = seasons[-args.last:] if args.last > 0 else []

    print(f"{bundle.source} ({bundle.units}, {bundle.data_range})")
    for season in seasons:
        print(f"  {season.label}: {season.total_snowfall:.1f} total, {len(season.daily_data)} days")


def _chart(args: argparse.Namespace) -> None:
    from snowfall_tracker.chart.controller import ChartController

    bundle = _load_or_exit(args.bundle)
    controller = ChartController(bundle.seasons)

    if args.start is not None or args.end is not None:
        if controller.year_range is None:
            data = controller.chart_data()
        else:
            start = args.start if args.start is not None else controller.year_range.min_year
            end = args.end if args.end is not None else controller.year_range.max_year
            data = controller.apply_range(start, end)
    else:
        data = controller.chart_data()

    print(data.model_dump_json(by_alias=True, indent=2))


def _load_or_exit(path: str):
    from snowfall_tracker.ingest.bundle import BundleError, load_bundle

    try:
        return load_bundle(path)
    except BundleError as e:
        print(f"Could not load data: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
