"""Hexagonal coordinate system using cubic coordinates (q, r, s).

Cubic coordinates define position on a hex grid where:
- q axis runs roughly east
- r axis runs roughly south-east
- s = -q - r closes the triple, so q + r + s == 0 always holds

The axial form (q, r) drops the redundant s.

Reference: https://www.redblobgames.com/grids/hexagons/
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator

from rhombus.util.errors import InvalidArgument, InvariantViolation

NUM_DIRECTIONS = 6

_SQRT3 = math.sqrt(3.0)


class HexDirection(IntEnum):
    """The 6 neighbor directions, counter-clockwise starting East."""

    E = 0
    NE = 1
    NW = 2
    W = 3
    SW = 4
    SE = 5

    def opposite(self) -> HexDirection:
        return HexDirection((self + NUM_DIRECTIONS // 2) % NUM_DIRECTIONS)

    def rotate(self, steps: int = 1) -> HexDirection:
        """Turn by ``steps`` sixths of a circle (positive is counter-clockwise)."""
        return HexDirection((self + steps) % NUM_DIRECTIONS)


@dataclass(frozen=True, order=True)
class HexCoord:
    """Immutable cubic hex coordinate.

    ``HexCoord(q, r)`` derives ``s``; ``HexCoord(q, r, s)`` checks that the
    three components sum to zero.

    Attributes:
        q: Column coordinate (east axis).
        r: Row coordinate (south-east axis).
        s: Third cube coordinate, always ``-q - r``.
    """

    q: int
    r: int
    s: int = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.s is None:
            object.__setattr__(self, "s", -self.q - self.r)
        elif self.q + self.r + self.s != 0:
            raise InvariantViolation(
                f"Invalid HexCoord q={self.q}, r={self.r}, s={self.s}: components must sum to 0"
            )

    # -- Construction ----------------------------------------------------

    @classmethod
    def from_axial(cls, q: int, r: int) -> HexCoord:
        return cls(q, r)

    @classmethod
    def from_pixel(cls, x: float, y: float, size: float = 1.0) -> HexCoord:
        """Return the hex containing pixel ``(x, y)`` (pointy-top layout).

        Inverse of :meth:`to_pixel`; fractional results are cube-rounded.
        """
        from rhombus.util.hex_math import cube_round

        fq = (_SQRT3 / 3.0 * x - y / 3.0) / size
        fr = (2.0 / 3.0 * y) / size
        return cube_round(fq, fr, -fq - fr)

    @staticmethod
    def direction(direction: int) -> HexCoord:
        """Unit delta for one of the 6 directions."""
        if not 0 <= direction < NUM_DIRECTIONS:
            raise InvalidArgument(f"Hex direction must be in [0, {NUM_DIRECTIONS}), got {direction}")
        return HEX_DIRECTIONS[direction]

    # -- Conversion ------------------------------------------------------

    def to_axial(self) -> tuple[int, int]:
        return self.q, self.r

    def to_pixel(self, size: float = 1.0) -> tuple[float, float]:
        """Center of this hex in pixel space (pointy-top, y grows downwards)."""
        x = size * _SQRT3 * (self.q + self.r / 2.0)
        y = size * 1.5 * self.r
        return x, y

    # -- Arithmetic ------------------------------------------------------

    def __add__(self, other: HexCoord) -> HexCoord:
        return HexCoord(self.q + other.q, self.r + other.r, self.s + other.s)

    def __sub__(self, other: HexCoord) -> HexCoord:
        return HexCoord(self.q - other.q, self.r - other.r, self.s - other.s)

    def __mul__(self, k: int) -> HexCoord:
        return HexCoord(self.q * k, self.r * k, self.s * k)

    __rmul__ = __mul__

    def __neg__(self) -> HexCoord:
        return HexCoord(-self.q, -self.r, -self.s)

    # -- Geometry --------------------------------------------------------

    def distance_to(self, other: HexCoord) -> int:
        """Hex grid distance (number of steps along hex edges)."""
        total = abs(self.q - other.q) + abs(self.r - other.r) + abs(self.s - other.s)
        if total % 2:
            raise InvariantViolation(f"Odd cube distance between {self!r} and {other!r}")
        return total // 2

    def neighbor(self, direction: int) -> HexCoord:
        """Return the adjacent hex in the given direction."""
        return self + HexCoord.direction(direction)

    def neighbors(self) -> list[HexCoord]:
        """Return the 6 adjacent hex coordinates, in HexDirection order."""
        return [self + delta for delta in HEX_DIRECTIONS]

    def ring(self, radius: int) -> Iterator[HexCoord]:
        """Lazily yield all hexes at exactly `radius` steps away."""
        from rhombus.util.hex_math import ring_iter

        return ring_iter(self, radius)

    def disk(self, radius: int) -> Iterator[HexCoord]:
        """Lazily yield all hexes within `radius` steps (inclusive)."""
        from rhombus.util.hex_math import disk_iter

        return disk_iter(self, radius)

    def line_to(self, other: HexCoord) -> list[HexCoord]:
        """Return a list of hex coordinates forming a line from self to other.

        Uses linear interpolation in cube space with rounding.
        """
        from rhombus.util.hex_math import hex_linedraw

        return hex_linedraw(self, other)

    # -- Serialization ---------------------------------------------------

    def __repr__(self) -> str:
        return f"Hex({self.q},{self.r},{self.s})"


# The 6 cube direction vectors, indexed by HexDirection
HEX_DIRECTIONS: tuple[HexCoord, ...] = (
    HexCoord(1, 0, -1),   # E
    HexCoord(1, -1, 0),   # NE
    HexCoord(0, -1, 1),   # NW
    HexCoord(-1, 0, 1),   # W
    HexCoord(-1, 1, 0),   # SW
    HexCoord(0, 1, -1),   # SE
)

ORIGIN = HexCoord(0, 0, 0)
