import pytest

from cubmap.cli import main

MAP_OK = "111111\n100001\n10N001\n111111\n"
MAP_NO_PLAYER = "111111\n100001\n100001\n111111\n"


@pytest.fixture
def scene_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in ("north.xpm", "south.xpm", "east.xpm", "west.xpm"):
        (tmp_path / name).write_text("texture")
    return tmp_path


def _write_scene(directory, grid):
    text = (
        "NO north.xpm\n"
        "SO south.xpm\n"
        "WE west.xpm\n"
        "EA east.xpm\n"
        "\n"
        "F 220,100,0\n"
        "C 225,30,0\n"
        "\n" + grid
    )
    (directory / "map.cub").write_text(text)
    return "map.cub"


def test_valid_scene_is_printed(scene_dir, capsys):
    name = _write_scene(scene_dir, MAP_OK)
    assert main([name]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[:4] == [
        "no --> north.xpm",
        "so --> south.xpm",
        "ea --> east.xpm",
        "we --> west.xpm",
    ]
    assert "floor r --> 220" in lines
    assert "floor g --> 100" in lines
    assert "ceiling r --> 225" in lines
    assert "ceiling g --> 30" in lines
    assert lines[-2:] == ["playerx --> 2", "playery --> 2"]


def test_missing_player_is_reported(scene_dir, capsys):
    name = _write_scene(scene_dir, MAP_NO_PLAYER)
    assert main([name]) == 1
    assert capsys.readouterr().out == "Error\nInvalid number of player position\n"


@pytest.mark.parametrize("argv", [[], ["a.cub", "b.cub"]])
def test_usage_error(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().out.startswith("USAGE ERROR:\n")


def test_wrong_extension(scene_dir, capsys):
    assert main(["map.txt"]) == 1
    assert capsys.readouterr().out == "Error\nYour filename should end by <.cub>\n"


def test_directory_is_rejected(scene_dir, capsys):
    (scene_dir / "maps.cub").mkdir()
    assert main(["maps.cub"]) == 1
    assert capsys.readouterr().out == "Error\nThe PATH is a directory\n"