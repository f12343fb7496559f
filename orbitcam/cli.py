from __future__ import annotations

import argparse

from orbitcam.app import run_app
from orbitcam.config import (
    APP_VERSION,
    WINDOW_WIDTH,
    WINDOW_HEIGHT,
    DEFAULT_POSITION,
    DEFAULT_TARGET,
    DEFAULT_GRID_EXTENT,
    DEFAULT_GRID_STEP,
    EPSILON,
)

def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="orbitcam", description=f"Orbit camera viewer (ModernGL + pygame) v{APP_VERSION}")
    p.add_argument("--position", type=float, nargs=3, default=list(DEFAULT_POSITION), metavar=("X", "Y", "Z"), help="initial eye position")
    p.add_argument("--target", type=float, nargs=3, default=list(DEFAULT_TARGET), metavar=("X", "Y", "Z"), help="initial look-at target")
    p.add_argument("--width", type=int, default=WINDOW_WIDTH, help="window width in pixels")
    p.add_argument("--height", type=int, default=WINDOW_HEIGHT, help="window height in pixels")
    p.add_argument("--grid-extent", type=float, default=DEFAULT_GRID_EXTENT, help="half size of the ground grid")
    p.add_argument("--grid-step", type=float, default=DEFAULT_GRID_STEP, help="spacing of ground grid lines")
    p.add_argument("--debug", action="store_true", help="enable debug overlay (HUD + logs)")
    args = p.parse_args(argv)

    if args.width <= 0 or args.height <= 0:
        p.error("--width and --height must be positive")
    if args.grid_extent <= 0 or args.grid_step <= 0:
        p.error("--grid-extent and --grid-step must be positive")
    if sum((a - b) ** 2 for a, b in zip(args.position, args.target)) ** 0.5 <= EPSILON:
        p.error("--position and --target must differ")
    return args

def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)

    run_app(
        position=tuple(float(v) for v in args.position),
        target=tuple(float(v) for v in args.target),
        width=int(args.width),
        height=int(args.height),
        grid_extent=float(args.grid_extent),
        grid_step=float(args.grid_step),
        debug=bool(args.debug),
    )
