"""Command line for inspecting positions.

Usage:
    airgeo show "40.0, -73.0, 1000.0"
    airgeo --precision 3 show "0.7 rad 1.2 rad 3 km"
    airgeo distance "(40.64, -73.78, 13)" "(51.47, -0.45, 83)"
    airgeo estimate "40, -73, 1000" --north 5000 --east -2000
    airgeo antipode "40, -73, 1000"

Positions use the text forms accepted by LatLonAlt.parse. A position that
starts with a minus sign has to follow ``--`` or be wrapped in parentheses.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from airgeo.config import DEFAULT_CONFIG
from airgeo.geo import LatLonAlt, great_circle
from airgeo.unit import converter

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool, console: Console):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _parse_position(text: str, console: Console) -> LatLonAlt | None:
    pos = LatLonAlt.parse(text)
    if pos.is_invalid():
        console.print(f"[red]Cannot parse position:[/red] {escape(repr(text))}")
        return None
    return pos


def _cmd_show(args: argparse.Namespace, console: Console) -> int:
    pos = _parse_position(args.position, console)
    if pos is None:
        return 1
    p = args.precision
    t = Table.grid(padding=(0, 2))
    lat, lon, alt = pos.to_text_list(p)
    t.add_row("[b]Latitude[/b]: ", f"{lat} deg")
    t.add_row("[b]Longitude[/b]: ", f"{lon} deg")
    t.add_row("[b]Altitude[/b]: ", f"{alt} ft")
    t.add_section()
    t.add_row("[b]lat[/b]: ", f"{pos.lat:.{p + 4}f} rad")
    t.add_row("[b]lon[/b]: ", f"{pos.lon:.{p + 4}f} rad")
    t.add_row("[b]alt[/b]: ", f"{pos.alt:.{p}f} m")
    console.print(Panel(t, title="Position", padding=(1, 2)))
    return 0


def _cmd_distance(args: argparse.Namespace, console: Console) -> int:
    p1 = _parse_position(args.first, console)
    p2 = _parse_position(args.second, console)
    if p1 is None or p2 is None:
        return 1
    dist = p1.distance_h(p2)
    course = converter.from_internal("deg", great_circle.initial_course(p1, p2))
    t = Table.grid(padding=(0, 2))
    t.add_row("[b]Distance[/b]: ", f"{dist:.{args.precision}f} m")
    t.add_row("[b]Distance[/b]: ", f"{converter.from_internal('NM', dist):.{args.precision}f} NM")
    t.add_row("[b]Initial course[/b]: ", f"{course:.{args.precision}f} deg")
    console.print(t)
    return 0


def _cmd_estimate(args: argparse.Namespace, console: Console) -> int:
    pos = _parse_position(args.position, console)
    if pos is None:
        return 1
    moved = pos.linear_est(args.north, args.east)
    logger.debug("Linear estimate %s -> %s", pos, moved)
    console.print(moved.to_text(args.precision))
    return 0


def _cmd_antipode(args: argparse.Namespace, console: Console) -> int:
    pos = _parse_position(args.position, console)
    if pos is None:
        return 1
    console.print(pos.antipode().to_text(args.precision))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="airgeo", description="Inspect geodetic positions")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--precision",
        type=int,
        default=DEFAULT_CONFIG.output_precision,
        help="Decimal places in the output",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    show = sub.add_parser("show", help="Parse a position and print its coordinates")
    show.add_argument("position")
    show.set_defaults(func=_cmd_show)

    dist = sub.add_parser("distance", help="Great-circle distance and course between positions")
    dist.add_argument("first")
    dist.add_argument("second")
    dist.set_defaults(func=_cmd_distance)

    est = sub.add_parser("estimate", help="Offset a position by meters north and east")
    est.add_argument("position")
    est.add_argument("--north", type=float, default=0.0, help="Offset north [m]")
    est.add_argument("--east", type=float, default=0.0, help="Offset east [m]")
    est.set_defaults(func=_cmd_estimate)

    anti = sub.add_parser("antipode", help="Print the antipodal position")
    anti.add_argument("position")
    anti.set_defaults(func=_cmd_antipode)
    return parser


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    """Run the command line and return the exit status."""
    console = console or Console()
    args = build_parser().parse_args(argv)
    if args.precision < 0:
        console.print("[red]--precision must be >= 0[/red]")
        return 2
    _setup_logging(args.verbose, console)
    return args.func(args, console)


if __name__ == "__main__":
    sys.exit(main())
