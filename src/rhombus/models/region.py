"""Region descriptors — the bounded shapes a world grid is laid over.

Every region answers two questions: does it contain a coordinate, and which
positions does it cover. ``positions()`` always yields the same cells in the
same order, which is what makes seeded generation reproducible.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union

from rhombus.models.hex import ORIGIN, HexCoord
from rhombus.models.quadric import QUADRIC_ORIGIN, QuadricCoord
from rhombus.util.errors import InvalidArgument
from rhombus.util.hex_math import cube_round, disk_iter
from rhombus.util.quadric_math import ball_iter


@dataclass(frozen=True)
class HexDiskRegion:
    """All hexes within ``radius`` of ``center``."""

    radius: int
    center: HexCoord = ORIGIN

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise InvalidArgument(f"Disk radius must be >= 0, got {self.radius}")

    def contains(self, coord: HexCoord) -> bool:
        return self.center.distance_to(coord) <= self.radius

    def positions(self) -> Iterator[HexCoord]:
        return disk_iter(self.center, self.radius)

    def __len__(self) -> int:
        return 1 + 3 * self.radius * (self.radius + 1)


@dataclass(frozen=True)
class HexRectRegion:
    """A ``width`` x ``height`` rectangle of hexes in offset rows.

    Odd rows are shoved half a cell to the right ("odd-r" layout), so the
    shape looks rectangular on screen. ``origin`` is the top-left cell.
    """

    width: int
    height: int
    origin: HexCoord = ORIGIN

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise InvalidArgument(
                f"Rectangle must be at least 1x1, got {self.width}x{self.height}"
            )

    def to_offset(self, coord: HexCoord) -> tuple[int, int]:
        """Return ``(col, row)`` of a coordinate relative to the origin."""
        d = coord - self.origin
        return d.q + (d.r - (d.r & 1)) // 2, d.r

    def from_offset(self, col: int, row: int) -> HexCoord:
        return self.origin + HexCoord(col - (row - (row & 1)) // 2, row)

    def contains(self, coord: HexCoord) -> bool:
        col, row = self.to_offset(coord)
        return 0 <= col < self.width and 0 <= row < self.height

    def positions(self) -> Iterator[HexCoord]:
        for row in range(self.height):
            for col in range(self.width):
                yield self.from_offset(col, row)

    def __len__(self) -> int:
        return self.width * self.height


@dataclass(frozen=True)
class CubicRangeRegion:
    """Hexes whose q, r and s each fall in an inclusive range.

    The result is a hexagon with possibly unequal sides. A combination of
    ranges whose hexagon would need a negative side length is rejected.
    """

    range_q: tuple[int, int]
    range_r: tuple[int, int]
    range_s: tuple[int, int]

    def __post_init__(self) -> None:
        for name, (start, end) in (("q", self.range_q), ("r", self.range_r), ("s", self.range_s)):
            if start > end:
                raise InvalidArgument(f"Empty {name} range [{start}, {end}]")
        if any(length < 0 for length in self.edge_lengths()):
            raise InvalidArgument(
                f"Invalid cubic ranges q={self.range_q}, r={self.range_r}, s={self.range_s}"
            )

    def edge_lengths(self) -> tuple[int, int, int, int, int, int]:
        """Side lengths of the hexagon, starting at the min-q/max-r vertex."""
        qs, qe = self.range_q
        rs, re = self.range_r
        ss, se = self.range_s
        return (
            -qs - ss - re,
            qe + ss + re,
            -qe - ss - rs,
            qe + se + rs,
            -qs - se - rs,
            qs + se + re,
        )

    def vertices(self) -> list[HexCoord]:
        qs, qe = self.range_q
        rs, re = self.range_r
        ss, se = self.range_s
        return [
            HexCoord(qs, re),
            HexCoord(-ss - re, re),
            HexCoord(qe, -qe - ss),
            HexCoord(qe, rs),
            HexCoord(-se - rs, rs),
            HexCoord(qs, -qs - se),
        ]

    def center(self) -> HexCoord:
        return cube_round(
            (self.range_q[0] + self.range_q[1]) / 2,
            (self.range_r[0] + self.range_r[1]) / 2,
            (self.range_s[0] + self.range_s[1]) / 2,
        )

    def contains(self, coord: HexCoord) -> bool:
        return (
            self.range_q[0] <= coord.q <= self.range_q[1]
            and self.range_r[0] <= coord.r <= self.range_r[1]
            and self.range_s[0] <= coord.s <= self.range_s[1]
        )

    def positions(self) -> Iterator[HexCoord]:
        ss, se = self.range_s
        for r in range(self.range_r[0], self.range_r[1] + 1):
            for q in range(self.range_q[0], self.range_q[1] + 1):
                if ss <= -q - r <= se:
                    yield HexCoord(q, r)


@dataclass(frozen=True)
class QuadricBallRegion:
    """All rhombic-dodecahedral cells within ``radius`` of ``center``."""

    radius: int
    center: QuadricCoord = field(default=QUADRIC_ORIGIN)

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise InvalidArgument(f"Ball radius must be >= 0, got {self.radius}")

    def contains(self, coord: QuadricCoord) -> bool:
        return self.center.distance_to(coord) <= self.radius

    def positions(self) -> Iterator[QuadricCoord]:
        return ball_iter(self.center, self.radius)


HexRegion = Union[HexDiskRegion, HexRectRegion, CubicRangeRegion]
Region = Union[HexDiskRegion, HexRectRegion, CubicRangeRegion, QuadricBallRegion]
