"""Checking that the player cannot walk out of the map."""

from __future__ import annotations

from collections.abc import Sequence

from cub3d.mapcheck import find_player
from cub3d.model import VOID, WALL, GameMap, ParseError

_FILLED = "F"
_SPACE_LEAK = "space"
_EDGE_LEAK = "edge"


def _find_leak(rows: Sequence[str], x: int, y: int) -> str | None:
    """Flood from (x, y) and return how the fill escaped, or None."""
    grid = [list(row) for row in rows]
    stack = [(x, y)]
    while stack:
        cx, cy = stack.pop()
        # Leaving through the top or bottom is not treated as a leak:
        # the first and last rows are checked separately.
        if not 0 <= cy < len(grid):
            continue
        row = grid[cy]
        if not 0 <= cx < len(row):
            return _EDGE_LEAK
        tile = row[cx]
        if tile == VOID:
            return _SPACE_LEAK
        if tile in (WALL, _FILLED):
            continue
        row[cx] = _FILLED
        # Pushed in reverse so that down, up, right, left are visited in order.
        stack.extend(((cx - 1, cy), (cx + 1, cy), (cx, cy - 1), (cx, cy + 1)))
    return None


def is_enclosed(rows: Sequence[str], x: int, y: int) -> bool:
    """Return True when the area reachable from (x, y) is closed by walls."""
    return _find_leak(rows, x, y) is None


def check_enclosed(grid: GameMap) -> None:
    """Raise ParseError unless the player's area is closed by walls."""
    x, y = find_player(grid.rows)
    leak = _find_leak(grid.rows, x, y)
    if leak == _SPACE_LEAK:
        raise ParseError("Open map (space leak)")
    if leak == _EDGE_LEAK:
        raise ParseError("Error: open map (edge leak)")