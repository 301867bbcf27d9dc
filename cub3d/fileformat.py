"""Walking through a whole .cub file: textures, colors, then the map."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence

from cub3d.color_lines import (
    all_colors_present,
    color_key,
    color_value,
    in_color_part,
    missing_colors,
)
from cub3d.floodfill import check_enclosed
from cub3d.loader import load_map_file, strip_line_endings
from cub3d.mapcheck import quick_check_map_format
from cub3d.model import GameMap, ParseError, ParseState, Scene
from cub3d.texture_lines import in_texture_part, parse_texture_section
from cub3d.tools import is_empty_line, required_format

MAP_TILES = frozenset("01NSEWD ")


def is_map_line(line: str | None) -> bool:
    """Return True when every character of the line is a valid map tile."""
    if line is None:
        return False
    return all(c in MAP_TILES for c in line)


def _skip_empty(lines: Sequence[str], index: int) -> int:
    while index < len(lines) and is_empty_line(lines[index]):
        index += 1
    return index


def parse_color_section(state: ParseState, lines: Sequence[str], start: int) -> int:
    """Record consecutive color lines from ``start``; return the next index."""
    index = start
    while index < len(lines) and (key := color_key(lines[index])) is not None:
        if key in state.colors:
            raise ParseError(f"Error: double {key} color")
        state.colors[key] = color_value(lines[index])
        index += 1
    if not all_colors_present(state):
        raise ParseError(
            "\n".join(f"Error: {key} color is missing" for key in missing_colors(state))
        )
    return index


def extract_map(state: ParseState, lines: Sequence[str], start: int) -> list[str]:
    """Return the map rows starting at ``start``, newlines removed.

    The map runs up to the first blank line; only blank lines may follow it.
    Those trailing blank lines stay part of the returned rows.
    """
    if start >= len(lines):
        raise ParseError("Error: map is missing")
    rows = strip_line_endings(lines)
    state.in_map = True
    index = start
    while index < len(rows) and not is_empty_line(rows[index]):
        if not is_map_line(rows[index]):
            raise ParseError("Error: invalid map character")
        index += 1
    if _skip_empty(rows, index) < len(rows):
        raise ParseError("Error: invalid content after map")
    return rows[start:]


def check_mapfile_format(lines: Iterable[str]) -> tuple[ParseState, GameMap]:
    """Check the layout of a .cub file and return its settings and map grid."""
    lines = list(lines)
    index = _skip_empty(lines, 0)
    if index >= len(lines):
        required_format()
        raise ParseError("Error: the file is empty")
    state = ParseState()
    if not in_texture_part(state, lines[index]):
        required_format()
        raise ParseError("Error: unexpected line before the textures")
    index = parse_texture_section(state, lines, index)
    index = _skip_empty(lines, index)
    current = lines[index] if index < len(lines) else None
    if not in_color_part(state, current, report=True):
        required_format()
        raise ParseError("Error: the colors must follow the textures")
    index = parse_color_section(state, lines, index)
    index = _skip_empty(lines, index)
    rows = extract_map(state, lines, index)
    quick_check_map_format(rows)
    return state, GameMap.from_rows(rows)


def parse_scene(lines: Iterable[str]) -> Scene:
    """Validate the lines of a .cub file and build the scene they describe."""
    state, grid = check_mapfile_format(lines)
    check_enclosed(grid)
    return Scene(
        north=state.textures.get("NO"),
        south=state.textures.get("SO"),
        west=state.textures.get("WE"),
        east=state.textures.get("EA"),
        floor=state.colors["F"],
        ceiling=state.colors["C"],
        grid=grid,
    )


def load_scene(path: str | os.PathLike[str]) -> Scene:
    """Read and validate a .cub file."""
    return parse_scene(load_map_file(path))