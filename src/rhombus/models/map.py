"""World grid model.

Holds the state of every cell of a bounded region, addressed by HexCoord
(2D) or QuadricCoord (3D). Reading outside the region returns the
configured boundary state; writing outside it is an error.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Generic, Iterator, TypeVar

from rhombus.models.hex import HexCoord
from rhombus.models.quadric import QuadricCoord
from rhombus.models.region import Region
from rhombus.util.errors import InvalidArgument

C = TypeVar("C", HexCoord, QuadricCoord)


class CellState(Enum):
    """State of a single grid cell."""

    EMPTY = "empty"
    WALL = "wall"
    HARD_WALL = "hard_wall"  # border wall, never changed by generators
    ROOM = "room"

    @property
    def is_wall(self) -> bool:
        return self in (CellState.WALL, CellState.HARD_WALL)


class WorldGrid(Generic[C]):
    """Mapping from coordinate to CellState over a region.

    Attributes:
        region: Bounds of the grid; fixes which coordinates exist.
        boundary: State reported for coordinates outside the region.
    """

    def __init__(
        self,
        region: Region,
        fill: CellState = CellState.EMPTY,
        boundary: CellState = CellState.WALL,
    ) -> None:
        self.region = region
        self.boundary = boundary
        self._cells: dict[C, CellState] = {pos: fill for pos in region.positions()}

    # -- Queries ---------------------------------------------------------

    def get(self, coord: C) -> CellState:
        """State at ``coord``, or the boundary state outside the region."""
        return self._cells.get(coord, self.boundary)

    def contains(self, coord: C) -> bool:
        return coord in self._cells

    def region_bounds(self) -> Region:
        return self.region

    def iterate_region(self) -> Iterator[tuple[C, CellState]]:
        """Yield ``(coord, state)`` pairs in region order."""
        return iter(self._cells.items())

    def positions(self) -> Iterator[C]:
        return iter(self._cells)

    def neighbor_states(self, coord: C) -> list[CellState]:
        """States of all neighbors of ``coord`` (boundary state outside)."""
        return [self.get(n) for n in coord.neighbors()]

    def count_wall_neighbors(self, coord: C) -> int:
        return sum(1 for state in self.neighbor_states(coord) if state.is_wall)

    def is_border(self, coord: C) -> bool:
        """True when ``coord`` has at least one neighbor outside the region."""
        return any(n not in self._cells for n in coord.neighbors())

    def count(self, state: CellState) -> int:
        return sum(1 for s in self._cells.values() if s is state)

    def counts(self) -> dict[CellState, int]:
        return dict(Counter(self._cells.values()))

    # -- Mutation --------------------------------------------------------

    def set(self, coord: C, state: CellState) -> None:
        """Store ``state`` at ``coord``.

        Raises:
            InvalidArgument: if ``coord`` lies outside the region.
        """
        if coord not in self._cells:
            raise InvalidArgument(f"{coord!r} is outside the grid region")
        self._cells[coord] = state

    def reset(self, fill: CellState = CellState.EMPTY) -> None:
        for pos in self._cells:
            self._cells[pos] = fill

    def copy(self) -> WorldGrid[C]:
        other: WorldGrid[C] = WorldGrid.__new__(WorldGrid)
        other.region = self.region
        other.boundary = self.boundary
        other._cells = dict(self._cells)
        return other

    # -- Container protocol ----------------------------------------------

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, coord: object) -> bool:
        return coord in self._cells

    def __iter__(self) -> Iterator[C]:
        return iter(self._cells)

    def __getitem__(self, coord: C) -> CellState:
        return self.get(coord)

    def __setitem__(self, coord: C, state: CellState) -> None:
        self.set(coord, state)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WorldGrid):
            return NotImplemented
        return self.region == other.region and self._cells == other._cells

    def __repr__(self) -> str:
        return f"WorldGrid({self.region!r}, cells={len(self._cells)})"
