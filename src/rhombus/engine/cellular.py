"""Cellular automaton cave generator on a hex grid.

Generation runs through these phases:

1. SEED — every cell of the region becomes a wall with probability
   ``wall_probability``, else empty (border cells become hard walls when
   ``hard_border`` is set).
2. COARSE (only when ``cell_radius > 0``) — the same seeding and rule run
   on big cells, hex disks of radius ``cell_radius`` that tile the region.
   Neighbors are the 6 big cells around each one. ``expand()`` then copies
   every big cell's state into its member cells, which gives the cave its
   large-scale shape before the per-cell iterations smooth it.
3. ITERATE — each step counts wall neighbors among the 6 hex neighbors of
   every cell and applies the birth/survival rule. All cells read the same
   previous generation: the next grid is built in a fresh buffer and only
   swapped in once complete.
4. DONE — the final grid is exposed through ``grid``.

The random source is a private ``random.Random`` seeded from the config, so
equal configs give equal caves.
"""

from __future__ import annotations

import logging
import random
from dataclasses import replace
from enum import Enum
from typing import Optional

from rhombus.loaders.cave_config_loader import CaveConfig
from rhombus.models.hex import HexCoord
from rhombus.models.map import CellState, WorldGrid
from rhombus.models.region import HexRegion
from rhombus.util.hex_math import big_ring_iter, disk_iter

log = logging.getLogger(__name__)

_SEED_BITS = 32


class GenerationPhase(Enum):
    SEED = "seed"
    COARSE = "coarse"
    ITERATE = "iterate"
    DONE = "done"


def big_cells(region: HexRegion, cell_radius: int) -> dict[HexCoord, list[HexCoord]]:
    """Map every big cell overlapping ``region`` to its member cells in it.

    Big cell centers are found by walking big rings outwards from the first
    cell of the region until a whole ring misses the region. Members are
    listed in disk order; every region cell belongs to exactly one big cell.
    """
    anchor = next(iter(region.positions()))
    cells: dict[HexCoord, list[HexCoord]] = {}
    radius = 0
    while True:
        found = False
        for center in big_ring_iter(anchor, cell_radius, radius):
            members = [pos for pos in disk_iter(center, cell_radius) if region.contains(pos)]
            if members:
                cells[center] = members
                found = True
        if not found:
            return cells
        radius += 1


class CaveGenerator:
    """Runs the seed/iterate cycle for one cave.

    Args:
        config: Generation options. Validated here; an invalid config
            raises InvalidArgument and no generator is created.
    """

    def __init__(self, config: Optional[CaveConfig] = None) -> None:
        config = config or CaveConfig()
        config.validate()
        if config.seed is None:
            config = replace(config, seed=random.SystemRandom().getrandbits(_SEED_BITS))
            log.debug("No seed configured, drew %d", config.seed)
        self.config = config
        self.phase = GenerationPhase.SEED
        self.iterations_run = 0
        self.coarse_steps_run = 0
        self._grid: Optional[WorldGrid[HexCoord]] = None
        self._coarse: Optional[dict[HexCoord, CellState]] = None
        self._members: dict[HexCoord, list[HexCoord]] = {}
        self._boundary = CellState.WALL if config.boundary_is_wall else CellState.EMPTY

    @property
    def grid(self) -> WorldGrid[HexCoord]:
        """The current grid. Generates the starting grid if there is none yet."""
        if self._grid is None:
            return self._start()
        return self._grid

    @property
    def coarse(self) -> dict[HexCoord, CellState]:
        """Big cell states keyed by big cell center. Seeds them if needed."""
        if self._coarse is None:
            return self.seed_coarse()
        return self._coarse

    # -- Phases ----------------------------------------------------------

    def seed(self) -> WorldGrid[HexCoord]:
        """Build a fresh randomly seeded grid, discarding any previous one."""
        cfg = self.config
        rng = random.Random(cfg.seed)
        grid: WorldGrid[HexCoord] = WorldGrid(cfg.region(), CellState.EMPTY, self._boundary)
        for pos in list(grid.positions()):
            if cfg.hard_border and grid.is_border(pos):
                grid.set(pos, CellState.HARD_WALL)
            elif rng.random() < cfg.wall_probability:
                grid.set(pos, CellState.WALL)
        self._grid = grid
        self.phase = GenerationPhase.ITERATE
        self.iterations_run = 0
        log.debug(
            "Seeded %d cells (%d walls) with seed %d",
            len(grid), grid.count(CellState.WALL), cfg.seed,
        )
        return grid

    def seed_coarse(self) -> dict[HexCoord, CellState]:
        """Seed the big cells of radius ``cell_radius`` covering the region.

        With ``hard_border`` a big cell becomes a hard wall when it reaches
        the region border or sticks out of the region.
        """
        cfg = self.config
        region = cfg.region()
        rng = random.Random(cfg.seed)
        self._members = big_cells(region, cfg.cell_radius)
        coarse: dict[HexCoord, CellState] = {}
        for center in self._members:
            if cfg.hard_border and not all(
                region.contains(pos) for pos in disk_iter(center, cfg.cell_radius + 1)
            ):
                coarse[center] = CellState.HARD_WALL
            elif rng.random() < cfg.wall_probability:
                coarse[center] = CellState.WALL
            else:
                coarse[center] = CellState.EMPTY
        self._coarse = coarse
        self._grid = None
        self.phase = GenerationPhase.COARSE
        self.coarse_steps_run = 0
        self.iterations_run = 0
        log.debug("Seeded %d big cells of radius %d", len(coarse), cfg.cell_radius)
        return coarse

    def coarse_step(self) -> bool:
        """Apply one simultaneous update of the big cells.

        Returns:
            True if no big cell changed.
        """
        previous = self.coarse
        cell_radius = self.config.cell_radius
        birth = self.config.birth
        survival = self.config.survival

        following: dict[HexCoord, CellState] = {}
        changed = 0
        for center, state in previous.items():
            walls = sum(
                1
                for n in big_ring_iter(center, cell_radius, 1)
                if previous.get(n, self._boundary).is_wall
            )
            following[center] = _next_state(state, walls, birth, survival)
            if following[center] is not state:
                changed += 1

        self._coarse = following
        self.coarse_steps_run += 1
        log.debug("Coarse step %d: %d big cells changed", self.coarse_steps_run, changed)
        return changed == 0

    def expand(self) -> WorldGrid[HexCoord]:
        """Build the cell grid from the big cells; each member takes its cell's state."""
        coarse = self.coarse
        grid: WorldGrid[HexCoord] = WorldGrid(self.config.region(), CellState.EMPTY, self._boundary)
        for center, members in self._members.items():
            for pos in members:
                grid.set(pos, coarse[center])
        self._grid = grid
        self.phase = GenerationPhase.ITERATE
        self.iterations_run = 0
        return grid

    def step(self) -> bool:
        """Apply one simultaneous update of the whole grid.

        Returns:
            True if no cell changed (the grid is frozen).
        """
        previous = self.grid
        birth = self.config.birth
        survival = self.config.survival

        following = previous.copy()
        changed = 0
        for pos, state in previous.iterate_region():
            new_state = _next_state(state, previous.count_wall_neighbors(pos), birth, survival)
            if new_state is not state:
                following.set(pos, new_state)
                changed += 1

        self._grid = following
        self.iterations_run += 1
        log.debug("Step %d: %d cells changed", self.iterations_run, changed)
        return changed == 0

    def run(self) -> WorldGrid[HexCoord]:
        """Generate the starting grid, iterate the configured number of times
        and return the result."""
        cfg = self.config
        self._start()
        for _ in range(cfg.iterations):
            frozen = self.step()
            if frozen and cfg.stop_when_stable:
                log.debug("Grid frozen after %d steps", self.iterations_run)
                break
        self.phase = GenerationPhase.DONE
        grid = self.grid
        log.debug(
            "Cave generated: %d cells, %d walls, %d steps (seed %d)",
            len(grid),
            grid.count(CellState.WALL) + grid.count(CellState.HARD_WALL),
            self.iterations_run,
            cfg.seed,
        )
        return grid

    def _start(self) -> WorldGrid[HexCoord]:
        cfg = self.config
        if cfg.cell_radius == 0:
            return self.seed()
        self.seed_coarse()
        for _ in range(cfg.coarse_iterations):
            if self.coarse_step() and cfg.stop_when_stable:
                break
        return self.expand()


def _next_state(state: CellState, wall_neighbors: int, birth: int, survival: int) -> CellState:
    """Birth/survival rule for a single cell."""
    if state is CellState.EMPTY:
        return CellState.WALL if wall_neighbors >= birth else CellState.EMPTY
    if state is CellState.WALL:
        return CellState.WALL if wall_neighbors >= survival else CellState.EMPTY
    # HARD_WALL and ROOM are fixed
    return state


def generate_cave(config: Optional[CaveConfig] = None) -> WorldGrid[HexCoord]:
    """Generate a cave in one call."""
    return CaveGenerator(config).run()
