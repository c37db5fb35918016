"""Tests for region descriptors — disk, rectangle, cubic range, ball."""

import pytest

from rhombus.models.hex import HexCoord
from rhombus.models.quadric import QuadricCoord
from rhombus.models.region import (
    CubicRangeRegion,
    HexDiskRegion,
    HexRectRegion,
    QuadricBallRegion,
)
from rhombus.util.errors import InvalidArgument
from rhombus.util.hex_math import hex_disk


class TestHexDiskRegion:
    def test_positions_match_disk(self):
        region = HexDiskRegion(2, HexCoord(1, -1))
        positions = list(region.positions())
        assert len(positions) == len(region) == 19
        assert set(positions) == hex_disk(HexCoord(1, -1), 2)

    def test_contains(self):
        region = HexDiskRegion(2)
        assert region.contains(HexCoord(2, -2))
        assert not region.contains(HexCoord(3, 0))

    def test_negative_radius_raises(self):
        with pytest.raises(InvalidArgument):
            HexDiskRegion(-1)


class TestHexRectRegion:
    def test_size(self):
        region = HexRectRegion(5, 3)
        positions = list(region.positions())
        assert len(positions) == len(region) == 15
        assert len(set(positions)) == 15

    def test_offset_round_trip(self):
        region = HexRectRegion(4, 4, origin=HexCoord(2, -3))
        for col in range(4):
            for row in range(4):
                assert region.to_offset(region.from_offset(col, row)) == (col, row)

    def test_rows_stay_rectangular(self):
        region = HexRectRegion(3, 4)
        for pos in region.positions():
            col, _ = region.to_offset(pos)
            assert 0 <= col < 3

    def test_contains(self):
        region = HexRectRegion(3, 2)
        for pos in region.positions():
            assert region.contains(pos)
        assert not region.contains(HexCoord(-1, 0))
        assert not region.contains(HexCoord(0, 2))

    @pytest.mark.parametrize("width, height", [(0, 3), (3, 0), (-1, -1)])
    def test_empty_rectangle_raises(self, width, height):
        with pytest.raises(InvalidArgument):
            HexRectRegion(width, height)


class TestCubicRangeRegion:
    def test_symmetric_ranges_make_a_disk(self):
        region = CubicRangeRegion((-2, 2), (-2, 2), (-2, 2))
        assert set(region.positions()) == hex_disk(HexCoord(0, 0), 2)
        assert region.edge_lengths() == (2, 2, 2, 2, 2, 2)

    def test_positions_are_contained(self):
        region = CubicRangeRegion((-3, 2), (-1, 3), (-4, 2))
        positions = list(region.positions())
        assert positions
        assert all(region.contains(p) for p in positions)
        assert len(set(positions)) == len(positions)

    def test_vertices_lie_in_region(self):
        region = CubicRangeRegion((-3, 2), (-1, 3), (-4, 2))
        for v in region.vertices():
            assert region.contains(v)

    def test_center(self):
        assert CubicRangeRegion((-2, 2), (-2, 2), (-2, 2)).center() == HexCoord(0, 0)
        assert CubicRangeRegion((0, 4), (-2, 2), (-6, -2)).center() == HexCoord(2, 0)

    def test_impossible_ranges_raise(self):
        with pytest.raises(InvalidArgument):
            CubicRangeRegion((0, 0), (0, 0), (5, 5))

    def test_reversed_range_raises(self):
        with pytest.raises(InvalidArgument):
            CubicRangeRegion((2, -2), (-2, 2), (-2, 2))


class TestQuadricBallRegion:
    def test_positions(self):
        region = QuadricBallRegion(1)
        positions = list(region.positions())
        assert len(positions) == 13
        assert all(region.contains(p) for p in positions)
        assert not region.contains(QuadricCoord(2, -2, 0, 0))

    def test_negative_radius_raises(self):
        with pytest.raises(InvalidArgument):
            QuadricBallRegion(-1)
