from cub3d.app import main

VALID_MAP = (
    "NO ./no.xpm\n"
    "SO ./so.xpm\n"
    "WE ./we.xpm\n"
    "EA ./ea.xpm\n"
    "\n"
    "F 220,100,0\n"
    "C 255,255,255\n"
    "\n"
    "111111\n"
    "100001\n"
    "1N0001\n"
    "111111\n"
)


def test_no_arguments(capsys):
    assert main([]) == 1
    assert "Program need two arguments" in capsys.readouterr().err


def test_too_many_arguments(capsys):
    assert main(["a.cub", "b.cub"]) == 1
    assert "Program need two arguments" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.cub")]) == 1
    assert "Error to open the map" in capsys.readouterr().err


def test_blank_file(tmp_path, capsys):
    path = tmp_path / "blank.cub"
    path.write_text("\n\n")
    assert main([str(path)]) == 1
    assert "Error: the file is empty" in capsys.readouterr().err


def test_open_map(tmp_path, capsys):
    path = tmp_path / "open.cub"
    path.write_text(VALID_MAP.replace("1N0001", "1N000 "))
    assert main([str(path)]) == 1
    assert "leak" in capsys.readouterr().err


def test_missing_textures(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "room.cub"
    path.write_text(VALID_MAP)
    assert main([str(path)]) == 1
    assert "failed to load texture" in capsys.readouterr().err