"""Tests for text rendering of hex grids."""

from rhombus.models.hex import HexCoord
from rhombus.models.map import CellState, WorldGrid
from rhombus.models.region import HexDiskRegion, HexRectRegion
from rhombus.util.render import GLYPHS, render_grid


class TestRenderGrid:
    def test_small_disk(self):
        grid = WorldGrid(HexDiskRegion(1))
        assert render_grid(grid) == " . .\n. . .\n . ."

    def test_glyphs(self):
        grid = WorldGrid(HexDiskRegion(1))
        grid.set(HexCoord(-1, 0), CellState.WALL)
        grid.set(HexCoord(0, 0), CellState.ROOM)
        grid.set(HexCoord(1, 0), CellState.HARD_WALL)
        assert render_grid(grid).splitlines()[1] == "# R %"

    def test_one_line_per_row(self):
        grid = WorldGrid(HexRectRegion(5, 4))
        lines = render_grid(grid).splitlines()
        assert len(lines) == 4
        assert all(line.count(GLYPHS[CellState.EMPTY]) == 5 for line in lines)

    def test_every_state_has_a_glyph(self):
        assert set(GLYPHS) == set(CellState)
