"""The game's entry point: load a .cub file and run the window."""

from __future__ import annotations

import sys
import time
from collections.abc import Mapping, Sequence

import numpy as np

from cub3d.fileformat import load_scene
from cub3d.images import DOOR_TEXTURE, Texture, load_scene_textures
from cub3d.loader import parse_arguments
from cub3d.model import GameMap, ParseError
from cub3d.movement import InputState, Key, mouse_rotation, step
from cub3d.player import Player, spawn_player
from cub3d.render import WIN_HEIGHT, WIN_WIDTH, Frame, render_frame
from cub3d.tools import print_error

WINDOW_TITLE = "cub3d"


def _to_rgb(pixels: np.ndarray) -> np.ndarray:
    """Turn rows of 0xRRGGBB into a (width, height, 3) byte array."""
    rgb = np.stack(((pixels >> 16) & 0xFF, (pixels >> 8) & 0xFF, pixels & 0xFF), axis=-1)
    return rgb.astype(np.uint8).transpose(1, 0, 2)


def _run(grid: GameMap, player: Player, textures: Mapping[str, Texture]) -> int:
    import pygame

    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode((WIN_WIDTH, WIN_HEIGHT))
        except pygame.error as exc:
            print_error(f"Error: cannot open the window: {exc}")
            return 1
        pygame.display.set_caption(WINDOW_TITLE)
        pygame.mouse.set_visible(False)
        center = (WIN_WIDTH // 2, WIN_HEIGHT // 2)
        pygame.mouse.set_pos(center)
        special_keys = {
            pygame.K_ESCAPE: Key.ESCAPE,
            pygame.K_LEFT: Key.LEFT,
            pygame.K_RIGHT: Key.RIGHT,
        }
        frame = Frame(WIN_WIDTH, WIN_HEIGHT)
        inputs = InputState()
        last_time = time.perf_counter()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN:
                    inputs.press(special_keys.get(event.key, event.key))
                elif event.type == pygame.KEYUP:
                    inputs.release(special_keys.get(event.key, event.key))
                elif event.type == pygame.MOUSEMOTION:
                    if mouse_rotation(player, event.pos[0], center[0]):
                        pygame.mouse.set_pos(center)
            if inputs.quit_requested:
                return 0
            now = time.perf_counter()
            step(player, grid, inputs, now - last_time)
            last_time = now
            render_frame(frame, player, grid, textures)
            pygame.surfarray.blit_array(screen, _to_rgb(frame.pixels))
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the .cub file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        path = parse_arguments(args)
        scene = load_scene(path)
        textures = load_scene_textures(scene, DOOR_TEXTURE)
    except (ParseError, ValueError) as exc:
        print_error(str(exc))
        return 1
    player = spawn_player(scene.grid)
    return _run(scene.grid, player, textures)


if __name__ == "__main__":
    sys.exit(main())