"""Drawing a frame: the raycast walls, the minimap and the crosshair."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass

import numpy as np

from cub3d.images import DOOR, EAST, NORTH, SOUTH, WEST, Texture
from cub3d.model import VOID, WALL, GameMap
from cub3d.player import Player

TILE_SIZE = 32
WIN_WIDTH = 1920
WIN_HEIGHT = 1080
MM_SCALE = 4
MM_OFFSET_X = 10
MM_OFFSET_Y = 10

BACKGROUND_COLOR = 0x000000
CEILING_COLOR = 0x3B2F2F
FLOOR_COLOR = 0x5C4033
MINIMAP_WALL = 0x222222
MINIMAP_FLOOR = 0xAAAAAA
MINIMAP_PLAYER = 0xFF0000
MINIMAP_DIR = 0x00FF00
CROSSHAIR_COLOR = 0xFFFFFF

_FAR = 1e30


class Frame:
    """A picture of 0xRRGGBB pixels, indexed as ``pixels[y, x]``."""

    def __init__(self, width: int = WIN_WIDTH, height: int = WIN_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("frame size must be positive")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width), dtype=np.uint32)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; points outside the frame are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y, x] = color & 0xFFFFFFFF

    def fill(self, color: int) -> None:
        """Paint the whole frame in one color."""
        self.pixels.fill(color & 0xFFFFFFFF)

    def _fill_rect(self, x: int, y: int, w: int, h: int, color: int) -> None:
        x0, y0 = max(x, 0), max(y, 0)
        x1, y1 = min(x + w, self.width), min(y + h, self.height)
        if x0 < x1 and y0 < y1:
            self.pixels[y0:y1, x0:x1] = color & 0xFFFFFFFF


@dataclass(frozen=True)
class RayHit:
    """Where a ray stopped and how far away that is along the view direction."""

    map_x: int
    map_y: int
    side: int
    distance: float
    ray_dir_x: float
    ray_dir_y: float
    door: bool


def draw_ceiling_and_floor(frame: Frame) -> None:
    """Paint the upper half as ceiling and the lower half as floor."""
    half = frame.height // 2
    frame.pixels[:half] = CEILING_COLOR
    frame.pixels[half:] = FLOOR_COLOR


def cast_column(player: Player, grid: GameMap, camera_x: float) -> RayHit:
    """Follow one ray through the grid until it meets a wall or a closed door.

    ``camera_x`` runs from -1 (left edge of the view) to 1 (right edge).
    """
    ray_dir_x = player.dir_x + player.plane_x * camera_x
    ray_dir_y = player.dir_y + player.plane_y * camera_x
    map_x, map_y = int(player.x), int(player.y)
    delta_x = _FAR if ray_dir_x == 0 else abs(1 / ray_dir_x)
    delta_y = _FAR if ray_dir_y == 0 else abs(1 / ray_dir_y)
    if ray_dir_x < 0:
        step_x, side_x = -1, (player.x - map_x) * delta_x
    else:
        step_x, side_x = 1, (map_x + 1.0 - player.x) * delta_x
    if ray_dir_y < 0:
        step_y, side_y = -1, (player.y - map_y) * delta_y
    else:
        step_y, side_y = 1, (map_y + 1.0 - player.y) * delta_y
    door = False
    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        if not grid.in_bounds(map_x, map_y):
            break
        if grid.rows[map_y][map_x] in (WALL, VOID):
            break
        if grid.is_door_closed(map_x, map_y):
            door = True
            break
    if side == 0:
        distance = (map_x - player.x + (1 - step_x) // 2) / ray_dir_x
    else:
        distance = (map_y - player.y + (1 - step_y) // 2) / ray_dir_y
    return RayHit(map_x, map_y, side, distance, ray_dir_x, ray_dir_y, door)


def _select_texture(textures: Mapping[str, Texture], hit: RayHit) -> Texture:
    if hit.door:
        return textures[DOOR]
    if hit.side == 0:
        return textures[EAST] if hit.ray_dir_x > 0 else textures[WEST]
    return textures[SOUTH] if hit.ray_dir_y > 0 else textures[NORTH]


def cast_rays(
    frame: Frame, player: Player, grid: GameMap, textures: Mapping[str, Texture]
) -> None:
    """Draw one textured wall slice for every column of the frame."""
    height = frame.height
    for x in range(frame.width):
        camera_x = 2.0 * x / frame.width - 1.0
        hit = cast_column(player, grid, camera_x)
        line_height = int(height / hit.distance) if hit.distance > 0 else height
        if line_height <= 0:
            continue
        draw_start = max(height // 2 - line_height // 2, 0)
        draw_end = min(line_height // 2 + height // 2, height - 1)
        if draw_end <= draw_start:
            continue
        tex = _select_texture(textures, hit)
        if hit.side == 0:
            wall_x = player.y + hit.distance * hit.ray_dir_y
        else:
            wall_x = player.x + hit.distance * hit.ray_dir_x
        wall_x -= math.floor(wall_x)
        tex_x = int(wall_x * tex.width)
        if (hit.side == 0 and hit.ray_dir_x > 0) or (hit.side == 1 and hit.ray_dir_y < 0):
            tex_x = tex.width - tex_x - 1
        tex_x = min(max(tex_x, 0), tex.width - 1)
        step = tex.height / line_height
        tex_pos = (draw_start - height // 2 + line_height // 2) * step
        offsets = np.arange(draw_end - draw_start)
        tex_ys = np.clip((tex_pos + step * offsets).astype(np.int64), 0, tex.height - 1)
        frame.pixels[draw_start:draw_end, x] = tex.pixels[tex_ys, tex_x]


def draw_minimap(frame: Frame, grid: GameMap) -> None:
    """Draw the map in the top-left corner, one small square per tile."""
    for y, row in enumerate(grid.rows):
        for x, tile in enumerate(row):
            color = MINIMAP_WALL if tile == WALL else MINIMAP_FLOOR
            frame._fill_rect(
                MM_OFFSET_X + x * MM_SCALE,
                MM_OFFSET_Y + y * MM_SCALE,
                MM_SCALE,
                MM_SCALE,
                color,
            )


def _minimap_position(player: Player) -> tuple[int, int]:
    return int(player.x * MM_SCALE), int(player.y * MM_SCALE)


def draw_minimap_player(frame: Frame, player: Player) -> None:
    """Mark the player on the minimap with a small square."""
    px, py = _minimap_position(player)
    frame._fill_rect(MM_OFFSET_X + px - 1, MM_OFFSET_Y + py - 1, 3, 3, MINIMAP_PLAYER)


def draw_minimap_dir(frame: Frame, player: Player) -> None:
    """Draw a short line on the minimap along the view direction."""
    px, py = _minimap_position(player)
    for i in range(10):
        frame.put_pixel(
            int(MM_OFFSET_X + px + player.dir_x * i),
            int(MM_OFFSET_Y + py + player.dir_y * i),
            MINIMAP_DIR,
        )


def draw_crosshair(frame: Frame) -> None:
    """Draw a small cross at the centre of the frame."""
    cx, cy = frame.width // 2, frame.height // 2
    for i in range(-5, 6):
        frame.put_pixel(cx + i, cy, CROSSHAIR_COLOR)
        frame.put_pixel(cx, cy + i, CROSSHAIR_COLOR)


def render_frame(
    frame: Frame, player: Player, grid: GameMap, textures: Mapping[str, Texture]
) -> Frame:
    """Draw a complete view of the scene into the frame and return it."""
    frame.fill(BACKGROUND_COLOR)
    draw_ceiling_and_floor(frame)
    cast_rays(frame, player, grid, textures)
    draw_minimap(frame, grid)
    draw_minimap_player(frame, player)
    draw_minimap_dir(frame, player)
    draw_crosshair(frame)
    return frame