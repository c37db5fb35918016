"""Quadric coordinate system for the rhombic-dodecahedral honeycomb.

A cell is addressed by four integers (w, x, y, z) with w + x + y + z == 0.
Each of the 12 faces of a rhombic dodecahedron leads to a neighbor; every
neighbor step moves one unit from one component to another, so the zero-sum
constraint survives any sequence of steps.

Graph distance is half the sum of the absolute component differences, the
same law as cube coordinates on the hex grid.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator

from rhombus.util.errors import InvalidArgument, InvariantViolation

NUM_DIRECTIONS = 12

_SQRT3 = math.sqrt(3.0)
_DEPTH_SCALE = 1.0 + 1.0 / (2.0 * math.sqrt(2.0))


class QuadricDirection(IntEnum):
    """The 12 neighbor directions. ``D<i>`` and ``D<i+6>`` are opposites."""

    D0 = 0
    D1 = 1
    D2 = 2
    D3 = 3
    D4 = 4
    D5 = 5
    D6 = 6
    D7 = 7
    D8 = 8
    D9 = 9
    D10 = 10
    D11 = 11

    def opposite(self) -> QuadricDirection:
        return QuadricDirection((self + NUM_DIRECTIONS // 2) % NUM_DIRECTIONS)


@dataclass(frozen=True, order=True)
class QuadricCoord:
    """Immutable quadric coordinate.

    Raises:
        InvariantViolation: if the four components do not sum to zero.
    """

    w: int
    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        if self.w + self.x + self.y + self.z != 0:
            raise InvariantViolation(
                f"Invalid QuadricCoord w={self.w}, x={self.x}, y={self.y}, z={self.z}: "
                "components must sum to 0"
            )

    @staticmethod
    def direction(direction: int) -> QuadricCoord:
        """Unit delta for one of the 12 directions."""
        if not 0 <= direction < NUM_DIRECTIONS:
            raise InvalidArgument(
                f"Quadric direction must be in [0, {NUM_DIRECTIONS}), got {direction}"
            )
        return QUADRIC_DIRECTIONS[direction]

    def to_tuple(self) -> tuple[int, int, int, int]:
        return self.w, self.x, self.y, self.z

    def to_vertex(self, size: float = 1.0) -> tuple[float, float, float]:
        """Cell center in 3D space, for renderers.

        A layered layout, not an exact lattice embedding: layers of constant
        ``z`` are hex planes in offset rows (row = ``y``), each shifted half
        a cell against the one above it. Neighbors within a layer and across
        layers end up at slightly different distances.
        """
        col = self.w + (self.y - (self.y & 1)) // 2
        row = self.y
        depth = self.z
        return (
            size * _SQRT3 * (col + ((row & 1) + depth) / 2.0),
            size * (-1.5 * row - depth / 2.0),
            size * -_DEPTH_SCALE * depth,
        )

    # -- Arithmetic ------------------------------------------------------

    def __add__(self, other: QuadricCoord) -> QuadricCoord:
        return QuadricCoord(self.w + other.w, self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: QuadricCoord) -> QuadricCoord:
        return QuadricCoord(self.w - other.w, self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, k: int) -> QuadricCoord:
        return QuadricCoord(self.w * k, self.x * k, self.y * k, self.z * k)

    __rmul__ = __mul__

    def __neg__(self) -> QuadricCoord:
        return QuadricCoord(-self.w, -self.x, -self.y, -self.z)

    # -- Geometry --------------------------------------------------------

    def distance_to(self, other: QuadricCoord) -> int:
        """Minimum number of unit steps between two cells."""
        total = (
            abs(self.w - other.w)
            + abs(self.x - other.x)
            + abs(self.y - other.y)
            + abs(self.z - other.z)
        )
        if total % 2:
            raise InvariantViolation(f"Odd quadric distance between {self!r} and {other!r}")
        return total // 2

    def neighbor(self, direction: int) -> QuadricCoord:
        return self + QuadricCoord.direction(direction)

    def neighbors(self) -> list[QuadricCoord]:
        """Return the 12 adjacent cells, in QuadricDirection order."""
        return [self + delta for delta in QUADRIC_DIRECTIONS]

    def sphere(self, radius: int) -> Iterator[QuadricCoord]:
        """Lazily yield all cells at exactly `radius` steps away."""
        from rhombus.util.quadric_math import sphere_iter

        return sphere_iter(self, radius)

    def ball(self, radius: int) -> Iterator[QuadricCoord]:
        """Lazily yield all cells within `radius` steps (inclusive)."""
        from rhombus.util.quadric_math import ball_iter

        return ball_iter(self, radius)

    def __repr__(self) -> str:
        return f"Quadric({self.w},{self.x},{self.y},{self.z})"


# The 12 face directions; index i + 6 is the opposite of index i
QUADRIC_DIRECTIONS: tuple[QuadricCoord, ...] = (
    QuadricCoord(1, -1, 0, 0),
    QuadricCoord(1, 0, -1, 0),
    QuadricCoord(0, 1, -1, 0),
    QuadricCoord(1, 0, 0, -1),
    QuadricCoord(0, 1, 0, -1),
    QuadricCoord(0, 0, 1, -1),
    QuadricCoord(-1, 1, 0, 0),
    QuadricCoord(-1, 0, 1, 0),
    QuadricCoord(0, -1, 1, 0),
    QuadricCoord(-1, 0, 0, 1),
    QuadricCoord(0, -1, 0, 1),
    QuadricCoord(0, 0, -1, 1),
)

QUADRIC_ORIGIN = QuadricCoord(0, 0, 0, 0)
