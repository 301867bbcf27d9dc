"""Core data structures shared by the parser and the game."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

WALL = "1"
EMPTY = "0"
DOOR = "D"
VOID = " "

RGB = tuple[int, int, int]


class ParseError(Exception):
    """Raised when a .cub file does not follow the expected format."""


@dataclass
class ParseState:
    """What has been seen so far while walking through a .cub file.

    A texture key present in ``textures`` has been declared, even when its
    path could not be read from the line (the value is then None).
    """

    textures: dict[str, str | None] = field(default_factory=dict)
    colors: dict[str, RGB] = field(default_factory=dict)
    in_texture: bool = False
    in_color: bool = False
    in_map: bool = False


@dataclass
class GameMap:
    """A rectangular tile grid with the open/closed state of every door."""

    rows: list[str]
    doors_open: list[list[bool]]

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> GameMap:
        """Build a grid from map lines, padding short lines with spaces.

        Every door starts closed.
        """
        rows = list(rows)
        if not rows:
            raise ParseError("Error: map is empty")
        width = max(len(row) for row in rows)
        padded = [row.ljust(width, VOID) for row in rows]
        doors = [[tile != DOOR for tile in row] for row in padded]
        return cls(padded, doors)

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def in_bounds(self, x: int, y: int) -> bool:
        """Return True when (x, y) lies inside the grid."""
        return 0 <= y < self.height and 0 <= x < self.width

    def tile(self, x: int, y: int) -> str:
        """Return the tile character at (x, y)."""
        if not self.in_bounds(x, y):
            raise IndexError(f"tile ({x}, {y}) is outside the map")
        return self.rows[y][x]

    def is_door_closed(self, x: int, y: int) -> bool:
        """Return True when (x, y) holds a door that is currently closed."""
        return (
            self.in_bounds(x, y)
            and self.rows[y][x] == DOOR
            and not self.doors_open[y][x]
        )

    def toggle_door(self, x: int, y: int) -> bool:
        """Open or close the door at (x, y); return True if there was one."""
        if not self.in_bounds(x, y) or self.rows[y][x] != DOOR:
            return False
        self.doors_open[y][x] = not self.doors_open[y][x]
        return True


@dataclass
class Scene:
    """A fully parsed and validated .cub file."""

    north: str | None
    south: str | None
    west: str | None
    east: str | None
    floor: RGB
    ceiling: RGB
    grid: GameMap