"""Validation of the map file name."""

from __future__ import annotations

EXTENSION = ".cub"


def has_cub_extension(path: str | None) -> bool:
    """Return True when the path ends with the .cub extension."""
    return path is not None and path.endswith(EXTENSION)


def check_extension(path: str | None) -> str:
    """Return the path unchanged, or raise ValueError if it is not a .cub file."""
    if path is None:
        raise ValueError("Error: MAP Addresse not found")
    if not has_cub_extension(path):
        raise ValueError("Error: map extension has to be .cub")
    return path