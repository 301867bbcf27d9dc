"""Wall textures read from XPM images."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path

import numpy as np

from cub3d.model import Scene

DOOR_TEXTURE = "textures/door.xpm"

NORTH = "NO"
SOUTH = "SO"
WEST = "WE"
EAST = "EA"
DOOR = "D"

TRANSPARENT = 0x000000

_QUOTED = re.compile(r'"((?:[^"\\]|\\.)*)"')
_CONTEXT_KEYS = frozenset(("c", "m", "g", "g4", "s"))
_PREFERRED_KEYS = ("c", "g", "g4", "m")
_NAMED_COLORS = {
    "black": 0x000000,
    "white": 0xFFFFFF,
    "red": 0xFF0000,
    "green": 0x00FF00,
    "blue": 0x0000FF,
    "yellow": 0xFFFF00,
    "cyan": 0x00FFFF,
    "magenta": 0xFF00FF,
    "gray": 0xBEBEBE,
    "grey": 0xBEBEBE,
}


@dataclass(frozen=True, eq=False)
class Texture:
    """An image stored as rows of 0xRRGGBB values."""

    pixels: np.ndarray

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    def pixel(self, x: int, y: int) -> int:
        """Return the color at (x, y), or 0 outside the image."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return 0
        return int(self.pixels[y, x])


def _parse_color(value: str) -> int:
    lowered = value.strip().lower()
    if lowered == "none":
        return TRANSPARENT
    if lowered.startswith("#"):
        digits = lowered[1:]
        try:
            int(digits, 16)
        except ValueError:
            raise ValueError(f"invalid color: {value!r}") from None
        if len(digits) == 3:
            digits = "".join(d * 2 for d in digits)
        elif len(digits) == 12:
            digits = digits[0:2] + digits[4:6] + digits[8:10]
        elif len(digits) != 6:
            raise ValueError(f"invalid color: {value!r}")
        return int(digits, 16)
    try:
        return _NAMED_COLORS[lowered]
    except KeyError:
        raise ValueError(f"unknown color name: {value!r}") from None


def _color_spec(spec: str) -> int:
    specs: dict[str, str] = {}
    key: str | None = None
    words: list[str] = []
    for token in spec.split():
        if token in _CONTEXT_KEYS and (key is None or words):
            if key is not None:
                specs[key] = " ".join(words)
            key, words = token, []
        elif key is None:
            raise ValueError(f"invalid color definition: {spec!r}")
        else:
            words.append(token)
    if key is not None:
        if not words:
            raise ValueError(f"invalid color definition: {spec!r}")
        specs[key] = " ".join(words)
    for preferred in _PREFERRED_KEYS:
        if preferred in specs:
            return _parse_color(specs[preferred])
    raise ValueError(f"no color in definition: {spec!r}")


def parse_xpm(text: str) -> Texture:
    """Decode the text of an XPM image."""
    strings = _QUOTED.findall(text)
    if not strings:
        raise ValueError("no XPM data found")
    header = strings[0].split()
    if len(header) < 4:
        raise ValueError("invalid XPM header")
    try:
        width, height, ncolors, cpp = (int(v) for v in header[:4])
    except ValueError:
        raise ValueError("invalid XPM header") from None
    if width <= 0 or height <= 0 or ncolors <= 0 or cpp <= 0:
        raise ValueError("invalid XPM dimensions")
    color_lines = strings[1 : 1 + ncolors]
    pixel_lines = strings[1 + ncolors : 1 + ncolors + height]
    if len(color_lines) != ncolors or len(pixel_lines) != height:
        raise ValueError("truncated XPM data")
    palette = {line[:cpp]: _color_spec(line[cpp:]) for line in color_lines}
    rows = []
    for line in pixel_lines:
        if len(line) < width * cpp:
            raise ValueError("XPM pixel row too short")
        try:
            rows.append(
                [palette[line[i : i + cpp]] for i in range(0, width * cpp, cpp)]
            )
        except KeyError as exc:
            raise ValueError(f"undefined XPM color key: {exc.args[0]!r}") from None
    return Texture(np.array(rows, dtype=np.uint32))


def load_xpm(path: str | os.PathLike[str] | None) -> Texture:
    """Read an XPM file; raise ValueError if it cannot be loaded."""
    message = f"Error: failed to load texture: {path}"
    if path is None:
        raise ValueError(message)
    try:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise ValueError(message) from exc
    try:
        return parse_xpm(text)
    except ValueError as exc:
        raise ValueError(message) from exc


def load_scene_textures(
    scene: Scene, door_path: str | os.PathLike[str] = DOOR_TEXTURE
) -> dict[str, Texture]:
    """Load the four wall textures of a scene and the door texture."""
    return {
        NORTH: load_xpm(scene.north),
        SOUTH: load_xpm(scene.south),
        WEST: load_xpm(scene.west),
        EAST: load_xpm(scene.east),
        DOOR: load_xpm(door_path),
    }