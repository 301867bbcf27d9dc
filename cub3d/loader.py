"""Reading a .cub file from the command line into memory."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence

from cub3d.lines import LineReader, read_lines
from cub3d.model import ParseError

USAGE = "Program need two arguments to run: ./cub3D path/of/map.cub"


def parse_arguments(argv: Sequence[str]) -> str:
    """Return the map path from the arguments, program name excluded.

    Exactly one argument is expected.
    """
    args = list(argv)
    if len(args) != 1:
        raise ParseError(USAGE)
    return args[0]


def count_lines(path: str | os.PathLike[str]) -> int:
    """Return the number of lines in a file; the last may lack a newline."""
    with open(path, "rb") as stream:
        return sum(1 for _ in LineReader(stream))


def load_map_file(path: str | os.PathLike[str]) -> list[str]:
    """Return every line of a map file, terminators included.

    Raises ParseError when the file cannot be opened or holds nothing.
    """
    try:
        lines = read_lines(path)
    except OSError as exc:
        reason = exc.strerror or str(exc)
        raise ParseError(f"Error to open the map: {reason}") from exc
    if not lines:
        raise ParseError("Error the file is empty or can't be read")
    return lines


def strip_line_endings(lines: Iterable[str]) -> list[str]:
    """Drop the newline that ends each line, if there is one."""
    return [line[:-1] if line.endswith("\n") else line for line in lines]