"""Keyboard and mouse input, and moving the player through the map."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from cub3d.model import WALL, GameMap
from cub3d.player import Player

MOVE_SPEED = 3.0
ROTATION_SPEED = 2.0
MOUSE_SENSITIVITY = 0.001


class Key(enum.IntEnum):
    """X11 key codes the game reacts to."""

    ESCAPE = 65307
    E = 101
    W = 119
    S = 115
    A = 97
    D = 100
    LEFT = 65361
    RIGHT = 65363


class Action(enum.Enum):
    """A movement held down while its key is pressed."""

    MOVE_UP = enum.auto()
    MOVE_DOWN = enum.auto()
    MOVE_LEFT = enum.auto()
    MOVE_RIGHT = enum.auto()
    ROTATE_LEFT = enum.auto()
    ROTATE_RIGHT = enum.auto()


_KEY_ACTIONS = {
    Key.W: Action.MOVE_UP,
    Key.S: Action.MOVE_DOWN,
    Key.A: Action.MOVE_LEFT,
    Key.D: Action.MOVE_RIGHT,
    Key.LEFT: Action.ROTATE_LEFT,
    Key.RIGHT: Action.ROTATE_RIGHT,
}


def _as_key(keycode: int) -> Key | None:
    try:
        return Key(keycode)
    except ValueError:
        return None


@dataclass
class InputState:
    """Which actions are held, and what was requested since the last step."""

    active: set[Action] = field(default_factory=set)
    toggle_requested: bool = False
    quit_requested: bool = False

    def press(self, key: int) -> None:
        """Handle a key being pressed; unknown keys are ignored."""
        k = _as_key(key)
        if k is None:
            return
        if k is Key.ESCAPE:
            self.quit_requested = True
            return
        if k is Key.E:
            self.toggle_requested = True
        action = _KEY_ACTIONS.get(k)
        if action is not None:
            self.active.add(action)

    def release(self, key: int) -> None:
        """Handle a key being released; unknown keys are ignored."""
        k = _as_key(key)
        if k is None:
            return
        if k is Key.ESCAPE:
            self.quit_requested = True
            return
        action = _KEY_ACTIONS.get(k)
        if action is not None:
            self.active.discard(action)


def is_wall(grid: GameMap, x: float, y: float) -> bool:
    """Return True when the point (x, y) cannot be walked on."""
    mx, my = int(x), int(y)
    if not 0 <= my < grid.height:
        return True
    if not 0 <= mx < len(grid.rows[my]):
        return True
    return grid.rows[my][mx] == WALL or grid.is_door_closed(mx, my)


def toggle_door_ahead(player: Player, grid: GameMap) -> bool:
    """Open or close the door one step ahead; return True if there was one."""
    x = int(player.x + player.dir_x)
    y = int(player.y + player.dir_y)
    return grid.toggle_door(x, y)


def _slide(player: Player, grid: GameMap, dx: float, dy: float) -> None:
    new_x = player.x + dx
    if not is_wall(grid, new_x, player.y):
        player.x = new_x
    new_y = player.y + dy
    if not is_wall(grid, player.x, new_y):
        player.y = new_y


def step(player: Player, grid: GameMap, inputs: InputState, dt: float) -> None:
    """Advance the player by ``dt`` seconds according to the held actions.

    A pending door toggle is carried out first. Each axis of a move is
    tried separately, so the player slides along walls.
    """
    if inputs.toggle_requested:
        toggle_door_ahead(player, grid)
        inputs.toggle_requested = False
    move = MOVE_SPEED * dt
    turn = ROTATION_SPEED * dt
    active = inputs.active
    if Action.MOVE_UP in active:
        _slide(player, grid, player.dir_x * move, player.dir_y * move)
    if Action.MOVE_DOWN in active:
        _slide(player, grid, -player.dir_x * move, -player.dir_y * move)
    if Action.MOVE_LEFT in active:
        _slide(player, grid, -player.plane_x * move, -player.plane_y * move)
    if Action.MOVE_RIGHT in active:
        _slide(player, grid, player.plane_x * move, player.plane_y * move)
    if Action.ROTATE_LEFT in active:
        player.rotate(-turn)
    if Action.ROTATE_RIGHT in active:
        player.rotate(turn)


def mouse_rotation(player: Player, x: int, center_x: int) -> int:
    """Turn the player by the mouse offset from the centre; return the offset."""
    delta = int(x - center_x)
    if delta:
        player.rotate(delta * MOUSE_SENSITIVITY)
    return delta