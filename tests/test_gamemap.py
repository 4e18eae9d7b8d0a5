import pytest

from mazerunner.gamemap import (
    GameMap,
    MapError,
    Position,
    check_border,
    check_rectangular,
    count_elements,
    has_ber_extension,
    load_map,
    path_is_valid,
    read_map_rows,
    trim_chars,
    validate_map,
)

VALID = ["1111111", "1P0C0E1", "1111111"]


def _write(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content, encoding="latin-1")
    return path


def test_trim_chars_removes_newline():
    assert trim_chars("101\n", "\n") == "101"
    assert trim_chars("\n", "\n") == ""


def test_trim_chars_trailing_limited_by_leading():
    assert trim_chars("\n\n\na\n", "\n") == "a\n"


def test_has_ber_extension():
    assert has_ber_extension("maps/level.ber") is True
    assert has_ber_extension("maps/level.txt") is False
    assert has_ber_extension("level.ber.txt") is False


def test_read_map_rows(tmp_path):
    path = _write(tmp_path, "m.ber", "111\n1P1\n111")
    assert read_map_rows(path) == ["111", "1P1", "111"]


def test_read_map_rows_keeps_last_newline(tmp_path):
    path = _write(tmp_path, "m.ber", "111\n111\n")
    assert read_map_rows(path) == ["111", "111\n"]


def test_read_map_rows_empty(tmp_path):
    path = _write(tmp_path, "m.ber", "")
    with pytest.raises(MapError, match="Error Empty file"):
        read_map_rows(path)


def test_read_map_rows_missing(tmp_path):
    with pytest.raises(MapError, match="ERROR Failed to open map file"):
        read_map_rows(tmp_path / "absent.ber")


def test_check_rectangular():
    assert check_rectangular(VALID) is True
    assert check_rectangular(["111", "11", "111"]) is False


def test_check_border():
    assert check_border(VALID) is True
    assert check_border(["1111111", "0P0C0E1", "1111111"]) is False
    assert check_border(["1111111", "1P0C0E1", "1110111"]) is False


def test_count_elements():
    collectibles, start = count_elements(VALID)
    assert collectibles == 1
    assert start == Position(1, 1)


@pytest.mark.parametrize(
    "rows, message",
    [
        (["11111", "1PXE1", "11111"], "Error : Invalid entity on map"),
        (["111111", "1PC001", "111111"], "Error : Invalid number of exit block"),
        (["111111", "1PCEE1", "111111"], "Error : Invalid number of exit block"),
        (["111111", "10CE01", "111111"], "Error : Invalid number of start block"),
        (["111111", "1PPCE1", "111111"], "Error : Invalid number of start block"),
        (["111111", "1P0E01", "111111"], "Error : Invalid number of collectibles block"),
    ],
)
def test_count_elements_errors(rows, message):
    with pytest.raises(MapError, match=message):
        count_elements(rows)


def test_path_is_valid():
    assert path_is_valid(VALID, Position(1, 1), 1) is True


def test_path_blocked_collectible():
    rows = ["11111", "1P1C1", "10101", "1E101", "11111"]
    assert path_is_valid(rows, Position(1, 1), 1) is False


def test_path_blocked_exit():
    rows = ["1111111", "1PC1E01", "1111111"]
    assert path_is_valid(rows, Position(1, 1), 1) is False


def test_validate_map():
    game_map = validate_map(VALID)
    assert game_map.collectibles == 1
    assert game_map.player_position == Position(1, 1)
    assert ["".join(row) for row in game_map.grid] == VALID
    assert (game_map.width, game_map.height) == (len(VALID[0]), len(VALID))


@pytest.mark.parametrize(
    "rows, message",
    [
        (["1111111", "1P0C0E1", "111111"], "Error : Invalid map shape"),
        (["1111111", "0P0C0E1", "1111111"], "Error : Invalid map borders"),
        (["1111111", "1PC1E01", "1111111"], "Error : Invalid path"),
    ],
)
def test_validate_map_errors(rows, message):
    with pytest.raises(MapError, match=message):
        validate_map(rows)


def test_load_map_round_trip(tmp_path):
    path = _write(tmp_path, "level.ber", "\n".join(VALID))
    game_map = load_map(path)
    assert ["".join(row) for row in game_map.grid] == VALID


def test_load_map_trailing_newline_is_bad_shape(tmp_path):
    path = _write(tmp_path, "level.ber", "\n".join(VALID) + "\n")
    with pytest.raises(MapError, match="Error : Invalid map shape"):
        load_map(path)


def test_load_map_bad_extension(tmp_path):
    path = _write(tmp_path, "level.txt", "\n".join(VALID))
    with pytest.raises(MapError, match="Error invalid map file"):
        load_map(path)


def test_tile_and_set_tile():
    game_map = validate_map(VALID)
    spot = Position(3, 1)
    assert game_map.tile(spot) == "C"
    game_map.set_tile(spot, "0")
    assert game_map.tile(spot) == "0"
    assert isinstance(game_map, GameMap)


def test_tile_out_of_range():
    game_map = validate_map(VALID)
    with pytest.raises(IndexError):
        game_map.tile(Position(-1, 0))
    with pytest.raises(IndexError):
        game_map.set_tile(Position(0, len(VALID)), "0")


def test_set_tile_rejects_long_value():
    game_map = validate_map(VALID)
    with pytest.raises(ValueError):
        game_map.set_tile(Position(2, 1), "00")