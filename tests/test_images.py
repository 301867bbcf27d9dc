import numpy as np
import pytest

from cub3d.images import (
    DOOR,
    EAST,
    NORTH,
    SOUTH,
    WEST,
    Texture,
    load_scene_textures,
    load_xpm,
    parse_xpm,
)
from cub3d.model import GameMap, Scene

RED_HEX = "FF0000"
BLUE_HEX = "0000FF"


def _xpm(rows, colors, cpp=1):
    width = len(rows[0]) // cpp
    lines = ["/* XPM */", "static char *img[] = {"]
    lines.append(f'"{width} {len(rows)} {len(colors)} {cpp}",')
    lines.extend(f'"{key} c {value}",' for key, value in colors.items())
    lines.extend(f'"{row}",' for row in rows)
    lines.append("};")
    return "\n".join(lines)


def test_parse_dimensions_and_pixels():
    tex = parse_xpm(_xpm(["ab", "ba", "aa"], {"a": f"#{RED_HEX}", "b": f"#{BLUE_HEX}"}))
    assert (tex.width, tex.height) == (2, 3)
    assert tex.pixel(0, 0) == int(RED_HEX, 16)
    assert tex.pixel(1, 0) == int(BLUE_HEX, 16)
    assert tex.pixel(0, 1) == int(BLUE_HEX, 16)


def test_two_chars_per_pixel():
    tex = parse_xpm(_xpm(["aabb"], {"aa": f"#{RED_HEX}", "bb": f"#{BLUE_HEX}"}, cpp=2))
    assert tex.width == 2
    assert tex.pixel(1, 0) == int(BLUE_HEX, 16)


def test_short_hex_matches_long_hex():
    short = parse_xpm(_xpm(["a"], {"a": "#F00"}))
    long = parse_xpm(_xpm(["a"], {"a": f"#{RED_HEX}"}))
    assert short.pixel(0, 0) == long.pixel(0, 0)


def test_color_key_after_symbolic_name():
    text = _xpm(["a"], {"a": "#000000"}).replace('"a c #000000"', f'"a s sym c #{BLUE_HEX}"')
    assert parse_xpm(text).pixel(0, 0) == int(BLUE_HEX, 16)


def test_pixel_outside_is_zero():
    tex = Texture(np.full((2, 2), 7, dtype=np.uint32))
    assert tex.pixel(-1, 0) == 0
    assert tex.pixel(2, 0) == 0
    assert tex.pixel(0, 5) == 0
    assert tex.pixel(1, 1) == 7


@pytest.mark.parametrize(
    "text",
    [
        "",
        '"2 2"',
        _xpm(["a"], {"a": "#zzzzzz"}),
        _xpm(["ab"], {"a": "#000000"}),
        '"2 2 1 1", "a c #000000", "aa"',
    ],
)
def test_malformed_xpm_raises(text):
    with pytest.raises(ValueError):
        parse_xpm(text)


def test_load_xpm_round_trip(tmp_path):
    path = tmp_path / "wall.xpm"
    path.write_text(_xpm(["ab"], {"a": f"#{RED_HEX}", "b": f"#{BLUE_HEX}"}))
    tex = load_xpm(path)
    assert tex.pixel(0, 0) == int(RED_HEX, 16)
    assert tex.pixel(1, 0) == int(BLUE_HEX, 16)


def test_load_xpm_missing_file(tmp_path):
    path = tmp_path / "missing.xpm"
    with pytest.raises(ValueError, match="failed to load texture"):
        load_xpm(path)


def test_load_xpm_none():
    with pytest.raises(ValueError, match="failed to load texture"):
        load_xpm(None)


def _scene(paths):
    return Scene(
        north=paths[0],
        south=paths[1],
        west=paths[2],
        east=paths[3],
        floor=(0, 0, 0),
        ceiling=(0, 0, 0),
        grid=GameMap.from_rows(["111", "1N1", "111"]),
    )


def test_load_scene_textures(tmp_path):
    colors = ["#111111", "#222222", "#333333", "#444444", "#555555"]
    paths = []
    for index, color in enumerate(colors):
        path = tmp_path / f"t{index}.xpm"
        path.write_text(_xpm(["a"], {"a": color}))
        paths.append(str(path))
    textures = load_scene_textures(_scene(paths[:4]), paths[4])
    keys = [NORTH, SOUTH, WEST, EAST, DOOR]
    assert set(textures) == set(keys)
    for key, color in zip(keys, colors):
        assert textures[key].pixel(0, 0) == int(color[1:], 16)


def test_load_scene_textures_missing(tmp_path):
    path = tmp_path / "ok.xpm"
    path.write_text(_xpm(["a"], {"a": "#000000"}))
    scene = _scene([str(path), None, str(path), str(path)])
    with pytest.raises(ValueError, match="failed to load texture"):
        load_scene_textures(scene, str(path))