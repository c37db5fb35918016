"""Cave generator entry point.

Loads the cave configuration, applies command line overrides, runs the
cellular automaton and prints the resulting map:
1. Load configuration (config/cave.yaml, or --config)
2. Apply command line overrides
3. Generate the cave
4. Print the map and a one-line summary

Usage:
    python -m rhombus.main --radius 10 --seed 12345
    # or via entry point:
    rhombus-cave --shape rect --width 60 --height 24
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import Any, Optional, Sequence

from rhombus.engine.cave_analysis import connected_regions
from rhombus.engine.cellular import CaveGenerator
from rhombus.loaders.cave_config_loader import (
    DEFAULT_CAVE_CONFIG_PATH,
    SHAPES,
    CaveConfig,
    load_cave_config,
)
from rhombus.models.map import CellState
from rhombus.util.errors import RhombusError
from rhombus.util.render import render_grid

log = logging.getLogger(__name__)

# Command line flag -> CaveConfig field
_OVERRIDES = {
    "shape": "shape",
    "radius": "radius",
    "width": "width",
    "height": "height",
    "probability": "wall_probability",
    "threshold": "threshold",
    "birth": "birth_threshold",
    "survival": "survival_threshold",
    "iterations": "iterations",
    "seed": "seed",
    "range_q": "range_q",
    "range_r": "range_r",
    "range_s": "range_s",
    "cell_radius": "cell_radius",
    "coarse_iterations": "coarse_iterations",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Hex cellular automaton cave generator")
    parser.add_argument(
        "--config",
        type=str,
        default=DEFAULT_CAVE_CONFIG_PATH,
        help=f"YAML config file (default: {DEFAULT_CAVE_CONFIG_PATH})",
    )
    parser.add_argument("--shape", choices=SHAPES, help="Region shape")
    parser.add_argument("--radius", type=int, help="Disk radius")
    parser.add_argument("--width", type=int, help="Rectangle width")
    parser.add_argument("--height", type=int, help="Rectangle height")
    parser.add_argument("--probability", type=float, help="Initial wall probability")
    parser.add_argument("--threshold", type=int, help="Wall neighbor threshold (0-6)")
    parser.add_argument("--birth", type=int, help="Threshold for an empty cell to become wall")
    parser.add_argument("--survival", type=int, help="Threshold for a wall to remain wall")
    parser.add_argument("--iterations", type=int, help="Number of automaton steps")
    parser.add_argument("--seed", type=int, help="Random seed")
    for axis in ("q", "r", "s"):
        parser.add_argument(
            f"--range-{axis}",
            type=int,
            nargs=2,
            metavar=("MIN", "MAX"),
            help=f"Inclusive {axis} range of the cubic shape",
        )
    parser.add_argument("--cell-radius", type=int, help="Big cell radius for the coarse pass (0: off)")
    parser.add_argument("--coarse-iterations", type=int, help="Number of coarse automaton steps")
    parser.add_argument(
        "--hard-border",
        action="store_true",
        help="Surround the region with permanent walls",
    )
    parser.add_argument(
        "--stable",
        action="store_true",
        help="Stop early once a step changes nothing",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def apply_overrides(config: CaveConfig, args: argparse.Namespace) -> CaveConfig:
    """Return ``config`` with every flag given on the command line applied."""
    changes: dict[str, Any] = {
        field_name: getattr(args, flag)
        for flag, field_name in _OVERRIDES.items()
        if getattr(args, flag) is not None
    }
    if args.hard_border:
        changes["hard_border"] = True
    if args.stable:
        changes["stop_when_stable"] = True
    return replace(config, **changes)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the cave generator. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        config = apply_overrides(load_cave_config(args.config), args)
        generator = CaveGenerator(config)
        grid = generator.run()
    except RhombusError as e:
        log.error("Cave generation failed: %s", e)
        return 2

    regions = connected_regions(grid)
    open_cells = len(grid) - grid.count(CellState.WALL) - grid.count(CellState.HARD_WALL)
    log.info(
        "Generated %s cave: %d cells, %d open, %d regions",
        config.shape, len(grid), open_cells, len(regions),
    )

    print(render_grid(grid))
    print(
        f"seed={generator.config.seed} cells={len(grid)} open={open_cells} "
        f"regions={len(regions)} steps={generator.iterations_run}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
