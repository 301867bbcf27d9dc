"""Small text helpers and console reporting shared by the parser."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

_RED = "\033[1;31m"
_RESET = "\033[0m"

_REQUIRED_FORMAT = (
    "\tPart 1: The textures paths\n\n"
    "NO ./path_to_the_north_texture\n"
    "SO ./path_to_the_south_texture\n"
    "WE ./path_to_the_west_texture\n"
    "EA ./path_to_the_east_texture\n"
    "New line is optional but recommended\n\n"
    "\tPart 2: The colors\n\n"
    "F 220,100,0\n"
    "C 255,255,255\n"
    "New line is optional but recommended\n\n"
    "\tPart 3: The map\n\n"
    "111111\n"
    "100001\n"
    "100001\n"
    "111111\n"
)


def is_space(c: str) -> bool:
    """Return True for a space or an ASCII control whitespace (tab to CR)."""
    return c == " " or "\t" <= c <= "\r"


def is_empty_line(line: str | None) -> bool:
    """Return True when the line is missing or holds only whitespace."""
    if line is None:
        return True
    return all(is_space(c) for c in line)


def split(s: str, sep: str) -> list[str]:
    """Split on a single separator, dropping empty pieces."""
    return [word for word in s.split(sep) if word]


def print_error(message: str | None) -> None:
    """Write a message to stderr, in red when stderr is a terminal."""
    if message is None:
        return
    stream = sys.stderr
    if stream.isatty():
        print(f"{_RED}{message}{_RESET}", file=stream)
    else:
        print(message, file=stream)


def required_format() -> None:
    """Explain the expected layout of a .cub file."""
    print_error("Error: The required .cub format is  :")
    sys.stdout.write(_REQUIRED_FORMAT)


def display_maps(maps: Iterable[str] | None) -> None:
    """Print the raw lines of a map file with their indices."""
    if maps is None:
        print_error("Error: bad maps adress")
        return
    for index, line in enumerate(maps):
        sys.stdout.write(f"maps[{index}]: {line}")


def display_final_map(final_map: Sequence[str] | None) -> None:
    """Print the padded map rows with their dimensions."""
    if not final_map:
        print("Final map is NULL or empty")
        return
    rows = list(final_map)
    print("\n========== FINAL MAP ==========")
    print(f"Number of lines: {len(rows)}")
    print(f"Max line length: {max(len(row) for row in rows)}")
    print("Map content:")
    print("------------------------------")
    for row in rows:
        print(row)
    print("------------------------------")