"""Quadric math utilities — spheres and balls in the rhombic-dodecahedral lattice.

A sphere of radius k is the cuboctahedron-shaped shell of cells at exactly
quadric distance k from a center. It is enumerated by scanning the bounded
cube of offsets ``(dw, dx, dy)`` in ``[-k, k]``, deriving ``dz``, and keeping
the offsets at distance k. Scanning in increasing order of each offset gives
a lexicographic order over (w, x, y, z) that is identical on every call.
"""

from __future__ import annotations

from typing import Iterator

from rhombus.models.quadric import QuadricCoord
from rhombus.util.errors import InvalidArgument


def quadric_distance(a: QuadricCoord, b: QuadricCoord) -> int:
    return a.distance_to(b)


def sphere_size(radius: int) -> int:
    """Number of cells on a sphere: 1 for radius 0, else ``10k² + 2``."""
    if radius == 0:
        return 1
    return 10 * radius * radius + 2


def ball_size(radius: int) -> int:
    """Number of cells within `radius` (inclusive)."""
    return sum(sphere_size(k) for k in range(radius + 1))


def sphere_iter(center: QuadricCoord, radius: int) -> Iterator[QuadricCoord]:
    """Yield all cells at exactly `radius` steps from center.

    Raises:
        InvalidArgument: if radius is negative.
    """
    if radius < 0:
        raise InvalidArgument(f"radius must be >= 0, got {radius}")
    return _walk_sphere(center, radius)


def _walk_sphere(center: QuadricCoord, radius: int) -> Iterator[QuadricCoord]:
    span = range(-radius, radius + 1)
    for dw in span:
        for dx in span:
            for dy in span:
                dz = -dw - dx - dy
                if abs(dz) > radius:
                    continue
                if abs(dw) + abs(dx) + abs(dy) + abs(dz) != 2 * radius:
                    continue
                yield QuadricCoord(center.w + dw, center.x + dx, center.y + dy, center.z + dz)


def ball_iter(center: QuadricCoord, radius: int) -> Iterator[QuadricCoord]:
    """Yield all cells within `radius` of center, sphere by sphere outwards.

    Raises:
        InvalidArgument: if radius is negative.
    """
    if radius < 0:
        raise InvalidArgument(f"radius must be >= 0, got {radius}")
    return _walk_ball(center, radius)


def _walk_ball(center: QuadricCoord, radius: int) -> Iterator[QuadricCoord]:
    for k in range(radius + 1):
        yield from _walk_sphere(center, k)
