"""Cave analysis on a generated hex grid.

Provides connectivity utilities for caves produced by the cellular
automaton. An open cell is any cell that is not a wall (EMPTY or ROOM).
This module provides:
- Nearest open cell search (ring walk outwards from a center)
- Connected open regions (BFS over 6-connected neighbors)
- Filling of small disconnected pockets
"""

from __future__ import annotations

from collections import deque
from typing import Optional

from rhombus.models.hex import HexCoord
from rhombus.models.map import CellState, WorldGrid
from rhombus.util.hex_math import ring_iter


def is_open(state: CellState) -> bool:
    return not state.is_wall


def find_open_cell(grid: WorldGrid[HexCoord], center: HexCoord) -> Optional[HexCoord]:
    """Return the open cell nearest to ``center``.

    Walks rings of growing radius; the first open cell in ring order wins.
    The walk ends at the ring holding the grid cell farthest from center.

    Returns:
        The nearest open coordinate, or None if the grid has none.
    """
    reach = max((center.distance_to(pos) for pos in grid.positions()), default=-1)
    for radius in range(reach + 1):
        for pos in ring_iter(center, radius):
            if pos in grid and is_open(grid.get(pos)):
                return pos
    return None


def connected_regions(grid: WorldGrid[HexCoord]) -> list[list[HexCoord]]:
    """Group open cells into 6-connected regions.

    Returns:
        Regions sorted by size (largest first), ties broken by their
        smallest coordinate. Cells inside a region are in BFS order.
    """
    visited: set[HexCoord] = set()
    regions: list[list[HexCoord]] = []

    for start, state in grid.iterate_region():
        if start in visited or not is_open(state):
            continue

        region: list[HexCoord] = []
        queue: deque[HexCoord] = deque([start])
        visited.add(start)

        while queue:
            pos = queue.popleft()
            region.append(pos)

            # Explore neighbors
            for n in pos.neighbors():
                if n not in visited and n in grid and is_open(grid.get(n)):
                    visited.add(n)
                    queue.append(n)

        regions.append(region)

    regions.sort(key=lambda r: (-len(r), min(r)))
    return regions


def largest_region(grid: WorldGrid[HexCoord]) -> list[HexCoord]:
    """Return the largest open region, or an empty list for a solid grid."""
    regions = connected_regions(grid)
    return regions[0] if regions else []


def fill_small_regions(grid: WorldGrid[HexCoord], min_size: int) -> int:
    """Turn open regions with fewer than ``min_size`` cells into walls.

    Returns:
        Number of cells filled.
    """
    filled = 0
    for region in connected_regions(grid):
        if len(region) >= min_size:
            continue
        for pos in region:
            grid.set(pos, CellState.WALL)
        filled += len(region)
    return filled
