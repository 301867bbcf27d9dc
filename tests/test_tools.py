import pytest

from cub3d.tools import (
    display_final_map,
    display_maps,
    is_empty_line,
    is_space,
    print_error,
    required_format,
    split,
)


@pytest.mark.parametrize("c", [" ", "\t", "\n", "\v", "\f", "\r"])
def test_is_space_accepts_whitespace(c):
    assert is_space(c) is True


@pytest.mark.parametrize("c", ["a", "1", "\x08", "\x0e", "_"])
def test_is_space_rejects_other_characters(c):
    assert is_space(c) is False


def test_is_empty_line():
    assert is_empty_line(None) is True
    assert is_empty_line("") is True
    assert is_empty_line("  \t\n") is True
    assert is_empty_line("  a\n") is False


def test_split_drops_empty_pieces():
    assert split("a,,b,", ",") == ["a", "b"]
    assert split(",,,", ",") == []
    assert split("", " ") == []


def test_split_round_trip_without_empties():
    words = ["NO", "./path", "x"]
    assert split(" ".join(words), " ") == words


def test_print_error_plain_when_not_a_terminal(capsys):
    print_error("Error: the file is empty")
    captured = capsys.readouterr()
    assert captured.err == "Error: the file is empty\n"
    assert captured.out == ""


def test_print_error_ignores_none(capsys):
    print_error(None)
    captured = capsys.readouterr()
    assert captured.err == ""


def test_required_format_output(capsys):
    required_format()
    captured = capsys.readouterr()
    assert "Error: The required .cub format is  :" in captured.err
    assert "NO ./path_to_the_north_texture\n" in captured.out
    assert "F 220,100,0\n" in captured.out
    assert captured.out.endswith("111111\n")


def test_display_maps(capsys):
    display_maps(["111\n", "101\n"])
    assert capsys.readouterr().out == "maps[0]: 111\nmaps[1]: 101\n"


def test_display_maps_none(capsys):
    display_maps(None)
    assert capsys.readouterr().err == "Error: bad maps adress\n"


def test_display_final_map(capsys):
    display_final_map(["111", "10", "111"])
    out = capsys.readouterr().out
    assert "Number of lines: 3" in out
    assert "Max line length: 3" in out
    assert "\n10\n" in out


def test_display_final_map_empty(capsys):
    display_final_map([])
    assert capsys.readouterr().out == "Final map is NULL or empty\n"