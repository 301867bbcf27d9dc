import math

import pytest

from cub3d.model import GameMap, ParseError
from cub3d.player import Player, spawn_player


def test_facing_north_uses_fixed_vectors():
    player = Player.facing("N", 2.0, 3.0)
    assert (player.dir_x, player.dir_y) == (0.0, -1.0)
    assert (player.plane_x, player.plane_y) == (0.66, 0.0)
    assert (player.x, player.y) == (2.0, 3.0)


@pytest.mark.parametrize("direction", ["N", "S", "E", "W"])
def test_plane_is_perpendicular_to_direction(direction):
    player = Player.facing(direction, 0.0, 0.0)
    assert player.dir_x * player.plane_x + player.dir_y * player.plane_y == 0
    assert math.hypot(player.dir_x, player.dir_y) == 1


@pytest.mark.parametrize("direction", ["N", "S", "E", "W"])
def test_opposite_directions_are_opposite(direction):
    opposite = {"N": "S", "S": "N", "E": "W", "W": "E"}[direction]
    a = Player.facing(direction, 0.0, 0.0)
    b = Player.facing(opposite, 0.0, 0.0)
    assert (a.dir_x + b.dir_x, a.dir_y + b.dir_y) == (0.0, 0.0)


def test_unknown_direction_raises():
    with pytest.raises(ValueError):
        Player.facing("X", 0.0, 0.0)


def test_rotate_quarter_turn_from_east_faces_south():
    player = Player.facing("E", 1.0, 1.0)
    player.rotate(math.pi / 2)
    south = Player.facing("S", 1.0, 1.0)
    assert player.dir_x == pytest.approx(south.dir_x, abs=1e-12)
    assert player.dir_y == pytest.approx(south.dir_y, abs=1e-12)
    assert player.plane_x == pytest.approx(south.plane_x, abs=1e-12)
    assert player.plane_y == pytest.approx(south.plane_y, abs=1e-12)


def test_rotate_back_and_forth_restores_view():
    player = Player.facing("N", 1.0, 1.0)
    player.rotate(0.37)
    player.rotate(-0.37)
    assert player.dir_x == pytest.approx(0.0, abs=1e-12)
    assert player.dir_y == pytest.approx(-1.0)
    assert player.plane_x == pytest.approx(0.66)


def test_rotate_keeps_lengths():
    player = Player.facing("W", 1.0, 1.0)
    plane_length = math.hypot(player.plane_x, player.plane_y)
    player.rotate(1.234)
    assert math.hypot(player.dir_x, player.dir_y) == pytest.approx(1.0)
    assert math.hypot(player.plane_x, player.plane_y) == pytest.approx(plane_length)
    assert (player.x, player.y) == (1.0, 1.0)


def test_spawn_player_centres_on_tile_and_clears_it():
    grid = GameMap.from_rows(["111", "1W1", "111"])
    player = spawn_player(grid)
    assert (player.x, player.y) == (1.5, 1.5)
    assert grid.rows[1] == "101"
    west = Player.facing("W", 0.0, 0.0)
    assert (player.dir_x, player.dir_y) == (west.dir_x, west.dir_y)


def test_spawn_player_takes_first_start_tile():
    grid = GameMap.from_rows(["1111", "10S1", "1N01", "1111"])
    player = spawn_player(grid)
    assert int(player.x) == 2 and int(player.y) == 1
    assert grid.rows[1] == "1001"
    assert grid.rows[2] == "1N01"


def test_spawn_player_without_start_tile_raises():
    grid = GameMap.from_rows(["111", "101", "111"])
    with pytest.raises(ParseError, match="player position not found"):
        spawn_player(grid)