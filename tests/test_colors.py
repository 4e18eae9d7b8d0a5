import pytest

from mazerunner.colors import color_from_text, lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("gray50", 0x7F7F7F),
        ("light green", 0x90EE90),
        ("none", -1),
    ],
)
def test_lookup_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_ignores_case():
    assert lookup_color("ReD") == lookup_color("red")
    assert lookup_color("GHOST WHITE") == lookup_color("ghostwhite")


def test_lookup_unknown_raises():
    with pytest.raises(KeyError):
        lookup_color("no such colour")


def test_duplicate_names_use_first_entry():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_gray_and_grey_spellings_agree():
    for level in range(101):
        assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_hex_colour():
    assert color_from_text("#FF0000") == 0xFF0000
    assert color_from_text("#ffdab9") == lookup_color("peachpuff")


def test_hex_stops_at_non_hex_character():
    assert color_from_text("#ff00ffzz") == color_from_text("#ff00ff")


def test_hex_without_digits_is_zero():
    assert color_from_text("#zz") == 0


def test_hex_ignores_end_word():
    assert color_from_text("#8b0000", "ignored") == lookup_color("darkred")


def test_named_colour_without_end():
    assert color_from_text("Snow") == 0xFFFAFA


def test_named_colour_joined_with_end():
    assert color_from_text("dark", "slate") == lookup_color("dark slate")
    assert color_from_text("light", "green") == 0x90EE90


def test_transparent_none():
    assert color_from_text("None") == -1


def test_unknown_name_is_zero():
    assert color_from_text("mauve-ish") == 0
    assert color_from_text("dark", "nothing") == 0