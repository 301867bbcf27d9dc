"""Recognition and recording of the texture lines of a .cub file."""

from __future__ import annotations

from collections.abc import Sequence

from cub3d.model import ParseError, ParseState
from cub3d.tools import print_error, split

TEXTURE_KEYS = ("NO", "SO", "WE", "EA")


def texture_key(line: str | None) -> str | None:
    """Return the texture key a line starts with, or None."""
    if line is None:
        return None
    prefix = line[:2]
    return prefix if prefix in TEXTURE_KEYS else None


def missing_textures(state: ParseState) -> list[str]:
    """Return the texture keys not yet declared, in file order."""
    return [key for key in TEXTURE_KEYS if key not in state.textures]


def all_textures_present(state: ParseState) -> bool:
    """Return True once all four textures have been declared."""
    return not missing_textures(state)


def _report_missing(state: ParseState) -> None:
    for key in missing_textures(state):
        print_error(f"Error: {key} texture is missing")


def in_texture_part(state: ParseState, line: str | None, report: bool = False) -> bool:
    """Tell whether the parser may be at or past the texture section.

    A texture line puts the state inside the section. Any other line is
    accepted only once all textures are known, and leaves the section;
    with ``report`` the missing textures are printed otherwise.
    """
    if texture_key(line) is not None:
        state.in_texture = True
        return True
    if all_textures_present(state):
        state.in_texture = False
        return True
    if report:
        _report_missing(state)
    return False


def record_texture(state: ParseState, line: str) -> str | None:
    """Record the texture declared on a line and return its key.

    Lines that declare no texture are ignored. The path is the second
    space-separated word, trimmed; it is None when there is none.
    """
    key = texture_key(line)
    if key is None:
        return None
    if key in state.textures:
        raise ParseError(f"Error: double {key} texture")
    words = split(line, " ")
    state.textures[key] = words[1].strip(" \t\n") if len(words) > 1 else None
    return key


def parse_texture_section(state: ParseState, lines: Sequence[str], start: int) -> int:
    """Record consecutive texture lines from ``start``; return the next index."""
    index = start
    while (
        index < len(lines)
        and in_texture_part(state, lines[index])
        and state.in_texture
    ):
        record_texture(state, lines[index])
        index += 1
    if not all_textures_present(state):
        _report_missing(state)
        raise ParseError("Error: the file must contain 4 textures information")
    return index