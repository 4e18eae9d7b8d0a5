import pytest

from mazerunner.game import (
    KEY_ESCAPE,
    KEY_D,
    KEY_LEFT,
    KEY_S,
    Game,
    Outcome,
)
from mazerunner.gamemap import Position, validate_map

LINE_MAP = ["11111", "1PEC1", "11111"]
SQUARE_MAP = ["1111", "1P01", "1CE1", "1111"]


@pytest.fixture
def line_game():
    return Game(validate_map(list(LINE_MAP)))


@pytest.fixture
def square_game():
    return Game(validate_map(list(SQUARE_MAP)))


def test_initial_state(line_game):
    assert line_game.moves == 0
    assert line_game.position == Position(1, 1)
    assert line_game.collectibles_left == 1
    assert line_game.finished is False


def test_move_into_wall_is_blocked(line_game):
    assert line_game.move(False, -1) is Outcome.BLOCKED
    assert line_game.position == Position(1, 1)
    assert line_game.moves == 0


def test_exit_with_collectibles_left_is_plain_move(line_game):
    assert line_game.move(True, 1) is Outcome.MOVED
    assert line_game.position == Position(2, 1)
    assert line_game.moves == 1
    assert line_game.finished is False


def test_collect_then_win(line_game):
    line_game.move(True, 1)
    assert line_game.move(True, 1) is Outcome.COLLECTED
    assert line_game.collectibles_left == 0
    assert line_game.game_map.tile(Position(3, 1)) == "0"
    assert line_game.moves == 2
    assert line_game.move(True, -1) is Outcome.WON
    assert line_game.finished is True
    assert line_game.moves == 2


def test_move_after_win_raises(line_game):
    line_game.move(True, 1)
    line_game.move(True, 1)
    line_game.move(True, -1)
    with pytest.raises(RuntimeError):
        line_game.move(True, 1)


def test_tile_at_shows_player_and_left_behind_tiles(line_game):
    assert line_game.tile_at(Position(1, 1)) == "P"
    line_game.move(True, 1)
    assert line_game.tile_at(Position(2, 1)) == "P"
    assert line_game.tile_at(Position(1, 1)) == "0"
    line_game.move(True, 1)
    assert line_game.tile_at(Position(2, 1)) == "E"
    assert line_game.tile_at(Position(0, 0)) == "1"


def test_escape_key_quits(line_game):
    assert line_game.handle_key(KEY_ESCAPE) is Outcome.QUIT
    assert line_game.position == Position(1, 1)


def test_unknown_key_is_ignored(line_game):
    assert line_game.handle_key(ord("x")) is None
    assert line_game.moves == 0


def test_keys_move_player(line_game):
    assert line_game.handle_key(KEY_D) is Outcome.MOVED
    assert line_game.position == Position(2, 1)
    assert line_game.handle_key(KEY_LEFT) is Outcome.MOVED
    assert line_game.position == Position(1, 1)


def test_down_key_collects(square_game):
    assert square_game.handle_key(KEY_S) is Outcome.COLLECTED
    assert square_game.position == Position(1, 2)
    assert square_game.collectibles_left == 0
    assert square_game.handle_key(KEY_D) is Outcome.WON