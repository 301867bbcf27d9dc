"""The player's position, view direction and camera plane."""

from __future__ import annotations

import math
from dataclasses import dataclass

from cub3d.mapcheck import find_player
from cub3d.model import EMPTY, GameMap

# Direction vector and camera plane for each start tile.
_FACINGS: dict[str, tuple[float, float, float, float]] = {
    "N": (0.0, -1.0, 0.66, 0.0),
    "S": (0.0, 1.0, -0.66, 0.0),
    "E": (1.0, 0.0, 0.0, 0.66),
    "W": (-1.0, 0.0, 0.0, -0.66),
}


@dataclass
class Player:
    """Where the player stands and where the camera looks."""

    x: float
    y: float
    dir_x: float
    dir_y: float
    plane_x: float
    plane_y: float

    @classmethod
    def facing(cls, direction: str, x: float, y: float) -> Player:
        """Create a player at (x, y) looking towards N, S, E or W."""
        try:
            dir_x, dir_y, plane_x, plane_y = _FACINGS[direction]
        except KeyError:
            raise ValueError(f"unknown direction: {direction!r}") from None
        return cls(x, y, dir_x, dir_y, plane_x, plane_y)

    def rotate(self, angle: float) -> None:
        """Turn the view direction and camera plane by ``angle`` radians."""
        c, s = math.cos(angle), math.sin(angle)
        self.dir_x, self.dir_y = (
            self.dir_x * c - self.dir_y * s,
            self.dir_x * s + self.dir_y * c,
        )
        self.plane_x, self.plane_y = (
            self.plane_x * c - self.plane_y * s,
            self.plane_x * s + self.plane_y * c,
        )


def spawn_player(grid: GameMap) -> Player:
    """Create the player on its start tile and turn that tile into floor."""
    x, y = find_player(grid.rows)
    row = grid.rows[y]
    direction = row[x]
    grid.rows[y] = row[:x] + EMPTY + row[x + 1 :]
    return Player.facing(direction, x + 0.5, y + 0.5)