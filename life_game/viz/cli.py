"""Command-line driver for running and plotting simulations.

This sits outside the core API in ``life_game.domain``; it only wires
``RunConfig``, ``run_simulation`` and the renderers to argv.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from life_game.config.constants import (
    DEFAULT_DENSITY,
    DEFAULT_PATTERN,
    GRID_HEIGHT,
    GRID_WIDTH,
    MAX_PERIOD,
    NUM_GENERATIONS,
)
from life_game.config.types import RunConfig
from life_game.simulation.engine import run_simulation
from life_game.viz.render import render_filmstrip
from life_game.viz.text import render
from life_game.viz.theme import REGISTERED_THEMES, get_theme

logger = logging.getLogger(__name__)


def _parse_offset(raw: str) -> tuple[int, int]:
    parts = raw.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"Expected X,Y format, got: {raw}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Offset must be two integers, got: {raw}") from exc


def _add_run_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument("--width", type=int, default=GRID_WIDTH)
    p.add_argument("--height", type=int, default=GRID_HEIGHT)
    p.add_argument("--generations", type=int, default=NUM_GENERATIONS)
    p.add_argument("--pattern", type=str, default=DEFAULT_PATTERN)
    p.add_argument("--offset", type=_parse_offset, default=(0, 0), metavar="X,Y")
    p.add_argument("--density", type=float, default=DEFAULT_DENSITY)
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--max-period", type=int, default=MAX_PERIOD)
    p.add_argument(
        "--no-halt-on-cycle",
        dest="halt_on_cycle",
        action="store_false",
        help="Keep running when an oscillator is detected",
    )


def _build_run_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("run", help="Print each generation as text")
    p.set_defaults(func=_handle_run)
    _add_run_arguments(p)


def _build_filmstrip_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("filmstrip", help="Render filmstrip of generations")
    p.set_defaults(func=_handle_filmstrip)
    _add_run_arguments(p)
    p.add_argument("--output", type=Path, required=True)
    p.add_argument("--n-frames", type=int, default=6)


def _config_from_args(args: argparse.Namespace) -> RunConfig:
    return RunConfig(
        width=args.width,
        height=args.height,
        generations=args.generations,
        pattern=args.pattern,
        offset=args.offset,
        density=args.density,
        sim_seed=args.seed,
        max_period=args.max_period,
        halt_on_cycle=args.halt_on_cycle,
    )


def _handle_run(args: argparse.Namespace) -> None:
    theme = get_theme(args.theme)
    result = run_simulation(_config_from_args(args))
    separator = theme.row_separator * 2
    sys.stdout.write(separator.join(render(frame, theme) for frame in result.frames) + "\n")


def _handle_filmstrip(args: argparse.Namespace) -> None:
    result = run_simulation(_config_from_args(args))
    render_filmstrip(
        frames=result.frames,
        output_path=args.output,
        n_frames=args.n_frames,
        theme=get_theme(args.theme),
    )
    logger.info("Wrote filmstrip to %s", args.output)


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint with subcommands."""
    parser = argparse.ArgumentParser(description="Conway's Game of Life on a bounded grid")
    parser.add_argument(
        "--theme",
        type=str,
        default="default",
        help=f"Theme preset name ({', '.join(sorted(REGISTERED_THEMES))})",
    )
    parser.add_argument("--log-level", type=str, default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)
    _build_run_parser(sub)
    _build_filmstrip_parser(sub)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args.func(args)


if __name__ == "__main__":
    main()
