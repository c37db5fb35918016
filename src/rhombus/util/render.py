"""Text rendering of hex grids.

Draws a grid as offset rows: each row of constant r is indented by half a
cell per row so neighbors line up the way they do on screen.
"""

from __future__ import annotations

from rhombus.models.hex import HexCoord
from rhombus.models.map import CellState, WorldGrid

GLYPHS: dict[CellState, str] = {
    CellState.EMPTY: ".",
    CellState.WALL: "#",
    CellState.HARD_WALL: "%",
    CellState.ROOM: "R",
}


def render_grid(grid: WorldGrid[HexCoord]) -> str:
    """Return the grid as text, one line per row of the region."""
    positions = list(grid.positions())
    if not positions:
        return ""

    min_r = min(p.r for p in positions)
    max_r = max(p.r for p in positions)
    # Screen column of a hex is 2q + r; shift so the leftmost one is column 0
    min_col = min(2 * p.q + p.r for p in positions)

    lines = []
    for r in range(min_r, max_r + 1):
        row = [p for p in positions if p.r == r]
        chars: dict[int, str] = {2 * p.q + p.r - min_col: GLYPHS[grid.get(p)] for p in row}
        width = max(chars) + 1 if chars else 0
        lines.append("".join(chars.get(i, " ") for i in range(width)).rstrip())
    return "\n".join(lines)
