"""Tests for cave analysis — open cell search and connected regions."""

from rhombus.engine.cave_analysis import (
    connected_regions,
    fill_small_regions,
    find_open_cell,
    largest_region,
)
from rhombus.engine.cellular import generate_cave
from rhombus.loaders.cave_config_loader import CaveConfig
from rhombus.models.hex import HexCoord
from rhombus.models.map import CellState, WorldGrid
from rhombus.models.region import HexDiskRegion


def _solid_grid(radius: int = 3) -> WorldGrid:
    return WorldGrid(HexDiskRegion(radius), fill=CellState.WALL)


class TestFindOpenCell:
    def test_center_open(self):
        grid = WorldGrid(HexDiskRegion(2))
        assert find_open_cell(grid, HexCoord(0, 0)) == HexCoord(0, 0)

    def test_nearest_open_cell(self):
        grid = _solid_grid()
        grid.set(HexCoord(-3, 0), CellState.EMPTY)
        grid.set(HexCoord(0, 2), CellState.EMPTY)
        assert find_open_cell(grid, HexCoord(0, 0)) == HexCoord(0, 2)

    def test_room_counts_as_open(self):
        grid = _solid_grid()
        grid.set(HexCoord(1, 0), CellState.ROOM)
        assert find_open_cell(grid, HexCoord(0, 0)) == HexCoord(1, 0)

    def test_solid_grid_has_none(self):
        assert find_open_cell(_solid_grid(), HexCoord(0, 0)) is None

    def test_center_outside_grid(self):
        grid = _solid_grid(2)
        grid.set(HexCoord(2, 0), CellState.EMPTY)
        assert find_open_cell(grid, HexCoord(10, 0)) == HexCoord(2, 0)


class TestConnectedRegions:
    def test_single_open_grid_is_one_region(self):
        grid = WorldGrid(HexDiskRegion(2))
        regions = connected_regions(grid)
        assert len(regions) == 1
        assert len(regions[0]) == 19

    def test_separate_pockets(self):
        grid = _solid_grid()
        for pos in (HexCoord(0, 0), HexCoord(1, 0), HexCoord(1, -1)):
            grid.set(pos, CellState.EMPTY)
        grid.set(HexCoord(-3, 3), CellState.EMPTY)
        regions = connected_regions(grid)
        assert [len(r) for r in regions] == [3, 1]
        assert set(regions[0]) == {HexCoord(0, 0), HexCoord(1, 0), HexCoord(1, -1)}
        assert largest_region(grid) == regions[0]

    def test_equal_sizes_ordered_by_smallest_coord(self):
        grid = _solid_grid()
        grid.set(HexCoord(2, 0), CellState.EMPTY)
        grid.set(HexCoord(-2, 0), CellState.EMPTY)
        assert connected_regions(grid) == [[HexCoord(-2, 0)], [HexCoord(2, 0)]]

    def test_solid_grid_has_no_regions(self):
        assert connected_regions(_solid_grid()) == []
        assert largest_region(_solid_grid()) == []

    def test_regions_partition_open_cells(self):
        grid = generate_cave(CaveConfig(radius=10, seed=77))
        regions = connected_regions(grid)
        cells = [pos for region in regions for pos in region]
        open_cells = [pos for pos, state in grid.iterate_region() if not state.is_wall]
        assert sorted(cells) == sorted(open_cells)


class TestFillSmallRegions:
    def test_fill(self):
        grid = _solid_grid()
        for pos in (HexCoord(0, 0), HexCoord(1, 0), HexCoord(1, -1)):
            grid.set(pos, CellState.EMPTY)
        grid.set(HexCoord(-3, 3), CellState.EMPTY)
        assert fill_small_regions(grid, 2) == 1
        assert grid.get(HexCoord(-3, 3)) is CellState.WALL
        assert grid.get(HexCoord(0, 0)) is CellState.EMPTY
        assert len(connected_regions(grid)) == 1
