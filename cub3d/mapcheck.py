"""Structural checks on the map part of a .cub file."""

from __future__ import annotations

from collections.abc import Sequence

from cub3d.model import VOID, WALL, GameMap, ParseError

PLAYER_TILES = frozenset("NSEW")
FIRST_LINE_ERROR = "Err: 1st line must only composed of '1' and spaces"
LAST_LINE_ERROR = "Error: Last line must only composed of '1' and spaces"

_BORDER_TILES = frozenset((WALL, VOID))


def max_line_length(rows: Sequence[str]) -> int:
    """Return the length of the longest row, 0 for no rows."""
    return max((len(row) for row in rows), default=0)


def _is_border(row: str) -> bool:
    return all(tile in _BORDER_TILES for tile in row)


def only_walls(rows: Sequence[str]) -> bool:
    """Return True when every tile is a wall or a space."""
    return all(_is_border(row) for row in rows)


def check_first_and_last_line(rows: Sequence[str]) -> None:
    """Raise ParseError unless the first and last rows hold only walls and spaces."""
    if len(rows) < 3:
        raise ParseError("Error: Map must have at least 3 lines")
    if not _is_border(rows[0]):
        raise ParseError(FIRST_LINE_ERROR)
    if not _is_border(rows[-1]):
        raise ParseError(LAST_LINE_ERROR)


def only_one_player(rows: Sequence[str]) -> bool:
    """Return True when exactly one start tile (N, S, E or W) is present."""
    return sum(tile in PLAYER_TILES for row in rows for tile in row) == 1


def quick_check_map_format(rows: Sequence[str]) -> Sequence[str]:
    """Check the size, borders and start tile of a map; return the rows."""
    if len(rows) < 3:
        raise ParseError("Error: Map must have at least 3 lines")
    if max_line_length(rows) < 3:
        raise ParseError("Error: Map lines must have at least 3 characters")
    check_first_and_last_line(rows)
    if not only_one_player(rows):
        raise ParseError("Error: Map must contain exactly one player")
    return rows


def pad_rows(rows: Sequence[str]) -> list[str]:
    """Return the rows padded with spaces to the width of the longest one."""
    return GameMap.from_rows(rows).rows


def find_player(rows: Sequence[str]) -> tuple[int, int]:
    """Return the (x, y) of the first start tile, scanning row by row."""
    for y, row in enumerate(rows):
        for x, tile in enumerate(row):
            if tile in PLAYER_TILES:
                return x, y
    raise ParseError("Error: player position not found in the map")