import pygame
import pytest

from mazerunner.app import (
    Textures,
    draw_board,
    image_to_surface,
    load_textures,
    main,
    parse_args,
)
from mazerunner.game import Game
from mazerunner.gamemap import validate_map
from mazerunner.xpm import XpmError, parse_xpm_text

COLORS = {
    "wall.xpm": "#0000FF",
    "floor.xpm": "#00FF00",
    "player.xpm": "#FF0000",
    "collectibles.xpm": "#FFFF00",
    "exit.xpm": "#FF00FF",
}


def _solid_xpm(color):
    return (
        "/* XPM */\n"
        "static char *img[] = {\n"
        '"1 1 1 1",\n'
        f'"a c {color}",\n'
        '"a"\n'
        "};\n"
    )


def _write_textures(directory, skip=()):
    for name, color in COLORS.items():
        if name not in skip:
            (directory / name).write_text(_solid_xpm(color))


def test_parse_args_returns_map_path():
    assert parse_args(["maps/level.ber"]) == "maps/level.ber"


def test_parse_args_wrong_count():
    with pytest.raises(ValueError, match="Error Invalid number of args"):
        parse_args([])
    with pytest.raises(ValueError, match="Error Invalid number of args"):
        parse_args(["a.ber", "b.ber"])


def test_parse_args_empty_map():
    with pytest.raises(ValueError, match="Map is null"):
        parse_args([""])


def test_image_to_surface_colors_and_transparency():
    image = parse_xpm_text(
        '"2 1 2 1",\n"r c #FF0000",\n"n c None",\n"rn"\n'
    )
    surface = image_to_surface(image)
    assert surface.get_size() == (2, 1)
    assert tuple(surface.get_at((0, 0))) == (255, 0, 0, 255)
    assert surface.get_at((1, 0)).a == 0


def test_load_textures(tmp_path):
    _write_textures(tmp_path)
    textures = load_textures(tmp_path)
    assert textures.block_size == 1
    assert tuple(textures.wall.get_at((0, 0))) == (0, 0, 255, 255)
    assert tuple(textures.exit.get_at((0, 0))) == (255, 0, 255, 255)


def test_load_textures_reports_missing_file(tmp_path):
    _write_textures(tmp_path, skip=("exit.xpm",))
    with pytest.raises(XpmError, match="Error in exit.xpm file"):
        load_textures(tmp_path)


def test_load_textures_reports_wall_first(tmp_path):
    with pytest.raises(XpmError, match="Error in wall.xpm file"):
        load_textures(tmp_path)


def test_draw_board_places_tiles(tmp_path):
    _write_textures(tmp_path)
    textures = load_textures(tmp_path)
    game = Game(validate_map(["11111", "1PCE1", "11111"]))
    surface = pygame.Surface((5, 3), pygame.SRCALPHA)
    draw_board(surface, game, textures)
    assert tuple(surface.get_at((1, 1))) == (255, 0, 0, 255)
    assert tuple(surface.get_at((2, 1))) == (255, 255, 0, 255)
    assert tuple(surface.get_at((3, 1))) == (255, 0, 255, 255)
    assert tuple(surface.get_at((0, 0))) == (0, 0, 255, 255)


def test_draw_board_after_move_shows_floor(tmp_path):
    _write_textures(tmp_path)
    textures = Textures(**{
        key: load_textures(tmp_path).__dict__[key]
        for key in ("wall", "floor", "player", "collectibles", "exit")
    })
    game = Game(validate_map(["11111", "1P0C1", "1E001", "11111"]))
    game.move(True, 1)
    surface = pygame.Surface((5, 4), pygame.SRCALPHA)
    draw_board(surface, game, textures)
    assert tuple(surface.get_at((1, 1))) == (0, 255, 0, 255)
    assert tuple(surface.get_at((2, 1))) == (255, 0, 0, 255)


def test_main_rejects_bad_arguments(capsys):
    assert main([]) == 1
    assert "Error Invalid number of args" in capsys.readouterr().err


def test_main_rejects_bad_extension(capsys, tmp_path):
    path = tmp_path / "level.txt"
    path.write_text("111\n1P1\n111\n")
    assert main([str(path)]) == 1
    assert "Error invalid map file" in capsys.readouterr().err


def test_main_rejects_invalid_map(capsys, tmp_path):
    path = tmp_path / "level.ber"
    path.write_text("1111\n1P01\n1111")
    assert main([str(path)]) == 1
    assert "Error : Invalid number of exit block" in capsys.readouterr().err


def test_main_reports_missing_textures(capsys, tmp_path, monkeypatch):
    path = tmp_path / "level.ber"
    path.write_text("11111\n1PCE1\n11111")
    monkeypatch.setenv("MAZERUNNER_TEXTURES", str(tmp_path / "none"))
    assert main([str(path)]) == 1
    assert "Error in wall.xpm file" in capsys.readouterr().err