"""Hex math utilities — arithmetic, rings, disks and lines on hexagonal grids.

All functions operate on HexCoord (cubic coordinates). The iterators are
generators: they compute cells on demand and can be restarted by calling
them again. Radius validation happens eagerly, when the iterator is created.

Reference: https://www.redblobgames.com/grids/hexagons/
"""

from __future__ import annotations

from typing import Iterator

from rhombus.models.hex import HEX_DIRECTIONS, NUM_DIRECTIONS, HexCoord
from rhombus.util.errors import InvalidArgument

# A ring starts on the E axis; walking begins two directions further (NW),
# so the walk stays on the ring and closes where it started.
_RING_START_DIRECTION = 0
_RING_WALK_OFFSET = 2


def add(a: HexCoord, b: HexCoord) -> HexCoord:
    return a + b


def sub(a: HexCoord, b: HexCoord) -> HexCoord:
    return a - b


def scale(a: HexCoord, k: int) -> HexCoord:
    return a * k


def hex_distance(a: HexCoord, b: HexCoord) -> int:
    """Compute the hex grid distance between two coordinates."""
    return a.distance_to(b)


def hex_neighbors(coord: HexCoord) -> list[HexCoord]:
    """Return the 6 neighbors of a hex coordinate."""
    return coord.neighbors()


def check_radius(radius: int, name: str = "radius") -> None:
    """Raise InvalidArgument for a negative radius."""
    if radius < 0:
        raise InvalidArgument(f"{name} must be >= 0, got {radius}")


def ring_iter(center: HexCoord, radius: int) -> Iterator[HexCoord]:
    """Yield all hexes at exactly `radius` distance from center.

    Radius 0 yields the center alone. Otherwise the walk starts at
    ``center + E * radius`` and proceeds counter-clockwise, ``radius`` steps
    per side, producing ``6 * radius`` cells in the same order on every call.

    Raises:
        InvalidArgument: if radius is negative.
    """
    check_radius(radius)
    return _walk_ring(center, radius, HEX_DIRECTIONS)


def big_ring_iter(center: HexCoord, cell_radius: int, radius: int) -> Iterator[HexCoord]:
    """Yield the centers of the big cells at big-cell distance `radius`.

    Big cells are hex disks of radius `cell_radius` tiling the plane; with
    ``cell_radius == 0`` this is exactly :func:`ring_iter`.

    Raises:
        InvalidArgument: if either radius is negative.
    """
    check_radius(cell_radius, "cell_radius")
    check_radius(radius)
    steps = tuple(
        HEX_DIRECTIONS[d] * (cell_radius + 1) + HEX_DIRECTIONS[(d + 1) % NUM_DIRECTIONS] * cell_radius
        for d in range(NUM_DIRECTIONS)
    )
    return _walk_ring(center, radius, steps)


def _walk_ring(center: HexCoord, radius: int, steps: tuple[HexCoord, ...]) -> Iterator[HexCoord]:
    if radius == 0:
        yield center
        return
    h = center + steps[_RING_START_DIRECTION] * radius
    for i in range(NUM_DIRECTIONS):
        step = steps[(_RING_WALK_OFFSET + i) % NUM_DIRECTIONS]
        for _ in range(radius):
            yield h
            h = h + step


def disk_iter(center: HexCoord, radius: int) -> Iterator[HexCoord]:
    """Yield all hexes within `radius` of center, ring by ring outwards.

    Produces ``1 + 3 * radius * (radius + 1)`` distinct cells.

    Raises:
        InvalidArgument: if radius is negative.
    """
    check_radius(radius)
    return _walk_disk(center, radius)


def _walk_disk(center: HexCoord, radius: int) -> Iterator[HexCoord]:
    for k in range(radius + 1):
        yield from _walk_ring(center, k, HEX_DIRECTIONS)


def hex_ring(center: HexCoord, radius: int) -> list[HexCoord]:
    """Return all hexes at exactly `radius` distance from center."""
    return list(ring_iter(center, radius))


def hex_disk(center: HexCoord, radius: int) -> set[HexCoord]:
    """Return all hexes within `radius` distance from center (inclusive)."""
    return set(disk_iter(center, radius))


def hex_linedraw(a: HexCoord, b: HexCoord) -> list[HexCoord]:
    """Cells on the straight line from `a` to `b`, both ends included.

    Samples ``distance + 1`` evenly spaced points between the two centers
    and snaps each to its hex, so consecutive cells are neighbors.
    """
    n = a.distance_to(b)
    if n == 0:
        return [a]

    cells: list[HexCoord] = []
    for i in range(n + 1):
        t = i / n
        cells.append(cube_round(a.q + (b.q - a.q) * t, a.r + (b.r - a.r) * t, a.s + (b.s - a.s) * t))
    return cells


def cube_round(fq: float, fr: float, fs: float) -> HexCoord:
    """Snap fractional cube coordinates to the hex containing them.

    The component that moved most under rounding is rebuilt from the other
    two, restoring ``q + r + s == 0``.
    """
    q, r, s = round(fq), round(fr), round(fs)
    dq, dr, ds = abs(q - fq), abs(r - fr), abs(s - fs)
    if dq > dr and dq > ds:
        return HexCoord(-r - s, r)
    if dr > ds:
        return HexCoord(q, -q - s)
    return HexCoord(q, r)
