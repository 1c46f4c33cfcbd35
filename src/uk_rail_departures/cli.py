"""Command line interface for UK rail departures."""

import argparse
import asyncio
import json
import sys
from collections.abc import Sequence

import aiohttp

from uk_rail_departures.adapters.config import AppConfig
from uk_rail_departures.adapters.darwin_api import (
    DarwinApiError,
    DepartureParser,
    HuxleyDepartureBoardSource,
)
from uk_rail_departures.application.services import TrainProcessingService
from uk_rail_departures.domain.models import (
    DEFAULT_COLUMNS,
    Column,
    DisplayRow,
    WidgetConfiguration,
)

COLUMN_TITLES = {
    Column.PLATFORM: "Plat",
    Column.DESTINATION: "Destination",
    Column.ORIGIN: "Origin",
    Column.DEP_SCHEDULED: "Sched",
    Column.DEP_ESTIMATED: "Expected",
    Column.STATUS: "Status",
    Column.FIRST_STOP: "First stop",
    Column.ETA: "ETA",
    Column.DURATION: "Mins",
}


def parse_columns(value: str | None) -> tuple[Column, ...]:
    """Parse a comma separated column list. Raises ValueError on unknown names."""
    if not value:
        return DEFAULT_COLUMNS
    columns = []
    for name in value.split(","):
        name = name.strip()
        if not name:
            continue
        try:
            columns.append(Column(name))
        except ValueError as e:
            raise ValueError(
                f"Unknown column '{name}' (valid: {', '.join(Column.names())})"
            ) from e
    return tuple(columns)


def render_text_table(rows: Sequence[DisplayRow], columns: Sequence[Column]) -> str:
    """Render display rows as a left-aligned plain text table."""
    if not rows:
        return "No trains found"

    header = [COLUMN_TITLES[column] for column in columns]
    body = [[row.cell_text(column.value) for column in columns] for row in rows]
    widths = [
        max(len(cells[i]) for cells in [header, *body]) for i in range(len(columns))
    ]

    lines = []
    for cells in [header, *body]:
        lines.append("  ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip())
    lines.insert(1, "  ".join("-" * width for width in widths))
    return "\n".join(lines)


def generate_config_snippet(
    station: str,
    widget_id: str | None = None,
    destinations: Sequence[str] = (),
) -> str:
    """Generate a TOML [[widgets]] snippet for a station."""
    station = station.strip().upper()
    snippet = f"""[[widgets]]
id = "{widget_id or station.lower()}"
header = "Departures from {station}"
station = "{station}"
# token = "your-openldbws-token"
update_interval_ms = 300000
fetch_rows = 20
display_rows = 10
filter_destination = {json.dumps([d.strip().upper() for d in destinations])}
filter_first_stop = []
filter_cancelled = false
columns = {json.dumps([column.value for column in DEFAULT_COLUMNS])}
"""
    return snippet


async def fetch_board_rows(
    widget_config: WidgetConfiguration, config: AppConfig
) -> list[DisplayRow]:
    """Fetch one board and run it through the same processing as a widget."""
    options = widget_config.filter_options()
    async with aiohttp.ClientSession() as session:
        source = HuxleyDepartureBoardSource(
            widget_config.token,
            session,
            base_url=config.darwin_base_url,
            timeout_seconds=config.darwin_timeout_seconds,
        )
        board = await source.get_departure_board(
            widget_config.station,
            rows=widget_config.fetch_rows,
            destination=widget_config.destination_hint,
        )

    records = DepartureParser.parse_board(board) or []
    return TrainProcessingService().process_trains(records, options)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uk-rail-departures",
        description="UK National Rail departure boards",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the web dashboard from config.toml
  uk-rail-departures serve

  # Print the next departures from Clapham Junction to London Waterloo
  uk-rail-departures board CLJ --destination WAT --token <token>

  # Generate config snippet
  uk-rail-departures generate CLJ
        """,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    subparsers.add_parser("serve", help="Run the web dashboard (default)")

    board_parser = subparsers.add_parser("board", help="Print the departure board of a station")
    board_parser.add_argument("station", help="Station CRS code (e.g., CLJ)")
    board_parser.add_argument("--token", help="OpenLDBWS token (default: DARWIN_TOKEN)")
    board_parser.add_argument(
        "--destination",
        action="append",
        default=[],
        help="Only trains calling at this CRS code (repeatable)",
    )
    board_parser.add_argument(
        "--first-stop",
        action="append",
        default=[],
        help="Only trains whose first stop is this CRS code (repeatable)",
    )
    board_parser.add_argument(
        "--hide-cancelled", action="store_true", help="Hide cancelled trains"
    )
    board_parser.add_argument("--rows", type=int, default=10, help="Rows to display")
    board_parser.add_argument(
        "--columns", help=f"Comma separated columns (valid: {', '.join(Column.names())})"
    )
    board_parser.add_argument("--json", action="store_true", help="Output as JSON")

    generate_parser = subparsers.add_parser("generate", help="Generate config snippet")
    generate_parser.add_argument("station", help="Station CRS code")
    generate_parser.add_argument("--id", dest="widget_id", help="Widget id")
    generate_parser.add_argument(
        "--destination", action="append", default=[], help="Destination filter (repeatable)"
    )

    return parser


async def run_board(args: argparse.Namespace) -> int:
    config = AppConfig()
    token = args.token or config.darwin_token
    if not token:
        print("An OpenLDBWS token is required (--token or DARWIN_TOKEN).", file=sys.stderr)
        return 1

    try:
        columns = parse_columns(args.columns)
        widget_config = WidgetConfiguration(
            widget_id="cli",
            station=args.station.strip().upper(),
            token=token,
            filter_destination=tuple(d.strip().upper() for d in args.destination),
            filter_first_stop=tuple(s.strip().upper() for s in args.first_stop),
            filter_cancelled=args.hide_cancelled,
            display_rows=args.rows,
            columns=columns,
        )
        rows = await fetch_board_rows(widget_config, config)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (DarwinApiError, aiohttp.ClientError, asyncio.TimeoutError) as e:
        print(f"Failed to fetch departures for {args.station}: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps([row.to_dict() for row in rows], indent=2, ensure_ascii=False))
    else:
        print(render_text_table(rows, columns))
    return 0


async def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    if args.command in (None, "serve"):
        from uk_rail_departures.main import main as serve

        await serve()
        return 0

    if args.command == "board":
        return await run_board(args)

    if args.command == "generate":
        print(generate_config_snippet(args.station, args.widget_id, args.destination))
        return 0

    return 1


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
