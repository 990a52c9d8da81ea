"""Command-line dry run of the sizing core.

Computes what a key press would do for a given frame and work area without
touching any window.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .config import DEFAULT_SIZES, ConfigurationError, parse_sizes
from .geometry import Area
from .message import format_size_message
from .sizing import NoFittingCandidate, center, cycle, fitting_candidates


def parse_rect(text: str) -> Area:
    """Parse ``X,Y,W,H`` into an Area."""
    parts = text.split(",")
    try:
        x, y, width, height = (int(p) for p in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid rectangle {text!r}, expected X,Y,WIDTH,HEIGHT"
        ) from None
    return Area(x, y, width, height)


def parse_scale(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid scale {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError("scale must be positive")
    return int(value) if value.is_integer() else value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wsizer",
        description="Preview window size cycling and centering.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # --- cycle subcommand ---
    cycle_cmd = subparsers.add_parser("cycle", help="Pick the next preferred size.")
    cycle_cmd.add_argument("--frame", type=parse_rect, required=True, help="X,Y,W,H")
    cycle_cmd.add_argument("--work-area", type=parse_rect, required=True, help="X,Y,W,H")
    cycle_cmd.add_argument("--scale", type=parse_scale, default=1)
    cycle_cmd.add_argument("--backward", action="store_true")
    cycle_cmd.add_argument("--sizes", help="Comma separated WIDTHxHEIGHT list.")

    # --- center subcommand ---
    center_cmd = subparsers.add_parser("center", help="Center a frame.")
    center_cmd.add_argument("--frame", type=parse_rect, required=True, help="X,Y,W,H")
    center_cmd.add_argument("--work-area", type=parse_rect, required=True, help="X,Y,W,H")

    # --- sizes subcommand ---
    sizes_cmd = subparsers.add_parser("sizes", help="List candidate sizes.")
    sizes_cmd.add_argument("--scale", type=parse_scale, default=1)
    sizes_cmd.add_argument("--work-area", type=parse_rect, help="X,Y,W,H")
    sizes_cmd.add_argument("--sizes", help="Comma separated WIDTHxHEIGHT list.")

    return parser


def _run_cycle(args: argparse.Namespace) -> int:
    sizes = parse_sizes(args.sizes) if args.sizes else list(DEFAULT_SIZES)
    result = cycle(args.frame, args.work_area, sizes, args.scale, args.backward)
    print(f"geometry: {result.x},{result.y},{result.width},{result.height}")
    print(f"message: {format_size_message(result.width, result.height, args.scale)}")
    return 0


def _run_center(args: argparse.Namespace) -> int:
    x, y = center(args.frame, args.work_area)
    print(f"geometry: {x},{y},{args.frame.width},{args.frame.height}")
    return 0


def _run_sizes(args: argparse.Namespace) -> int:
    sizes = parse_sizes(args.sizes) if args.sizes else list(DEFAULT_SIZES)
    if args.work_area is not None:
        candidates = fitting_candidates(sizes, args.work_area, args.scale)
    else:
        candidates = [size.scaled(args.scale) for size in sizes]
    for i, size in enumerate(candidates):
        print(f"{i}: {size}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    handlers = {"cycle": _run_cycle, "center": _run_center, "sizes": _run_sizes}
    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 2

    try:
        return handler(args)
    except (NoFittingCandidate, ConfigurationError) as e:
        print(f"wsizer: {e}", file=sys.stderr)
        return 1
