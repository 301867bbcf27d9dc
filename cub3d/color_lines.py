"""Recognition and validation of the floor and ceiling color lines."""

from __future__ import annotations

import re

from cub3d.model import RGB, ParseError, ParseState
from cub3d.tools import is_space, print_error, split

COLOR_KEYS = ("F", "C")

_COMPONENT = re.compile(r"[ \t\n\v\f\r]*([0-9]+)[ \t\n\v\f\r]*\Z")


def _component_value(component: str | None) -> int | None:
    if component is None:
        return None
    match = _COMPONENT.match(component)
    if match is None:
        return None
    value = int(match.group(1))
    return value if value <= 255 else None


def is_valid_rgb_component(component: str | None) -> bool:
    """Return True for a decimal number 0-255, optionally surrounded by whitespace."""
    return _component_value(component) is not None


def _rgb(value: str) -> RGB | None:
    parts = split(value, ",")
    if len(parts) != 3:
        return None
    values = [_component_value(part) for part in parts]
    if any(v is None for v in values):
        return None
    red, green, blue = values
    return red, green, blue


def is_valid_rgb_value(value: str) -> bool:
    """Return True for three comma-separated valid components."""
    return _rgb(value) is not None


def color_key(line: str | None) -> str | None:
    """Return 'F' or 'C' when the line declares that color, else None."""
    if line is None or len(line) < 2:
        return None
    if line[0] in COLOR_KEYS and is_space(line[1]):
        return line[0]
    return None


def color_value(line: str) -> RGB:
    """Parse a color line such as ``F 220,100,0`` into an RGB triple."""
    words = split(line, " ")
    rgb = _rgb(words[1]) if len(words) == 2 else None
    if rgb is None:
        raise ParseError(f"Error: invalid {line[:1]} color format")
    return rgb


def missing_colors(state: ParseState) -> list[str]:
    """Return the color keys not yet declared, floor first."""
    return [key for key in COLOR_KEYS if key not in state.colors]


def all_colors_present(state: ParseState) -> bool:
    """Return True once both colors have been declared."""
    return not missing_colors(state)


def in_color_part(state: ParseState, line: str | None, report: bool = False) -> bool:
    """Tell whether the parser may be at or past the color section.

    A color line puts the state inside the section. Any other line is
    accepted only once both colors are known, and leaves the section;
    with ``report`` the missing colors are printed otherwise.
    """
    if line is None:
        return False
    if color_key(line) is not None:
        state.in_color = True
        return True
    if all_colors_present(state):
        state.in_color = False
        return True
    if report:
        for key in missing_colors(state):
            print_error(f"Error: {key} color is missing")
    return False