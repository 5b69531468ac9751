import pytest

from cubmap.colornames import COLOR_NAMES, lookup_color


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("snow", 0xFFFAFA),
        ("black", 0x0),
        ("gray50", 0x7F7F7F),
        ("lightgoldenrodyellow", 0xFAFAD2),
        ("thistle4", 0x8B7B8B),
        ("darkred", 0x8B0000),
    ],
)
def test_known_names(name, expected):
    assert lookup_color(name) == expected


def test_none_is_transparent_marker():
    assert lookup_color("none") == -1


def test_repeated_name_uses_first_entry():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_suffix_is_joined_with_space():
    assert lookup_color("ghost", "white") == lookup_color("ghost white")
    assert lookup_color("ghost", "white") == 0xF8F8FF


def test_case_is_ignored():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Navy", "Blue") == lookup_color("navyblue")


def test_non_ascii_case_folding_does_not_match():
    assert lookup_color("blac\u212a") == 0


def test_unknown_name_is_zero():
    assert lookup_color("no such colour") == 0


def test_overlong_name_is_truncated_before_lookup():
    assert lookup_color("a" * 70) == 0
    assert lookup_color("snow" + " " * 70) == 0


def test_hex_values():
    assert lookup_color("#ff0000") == lookup_color("red")
    assert lookup_color("#FF00FF") == lookup_color("magenta")


def test_hex_suffix_is_ignored():
    assert lookup_color("#00ff00", "ignored") == lookup_color("green")


def test_hex_stops_at_first_non_digit():
    assert lookup_color("#ffzz") == lookup_color("#ff")
    assert lookup_color("#") == 0


def test_hex_wraps_to_signed_int():
    assert lookup_color("#ffffffff") == lookup_color("none")


def test_gray_and_grey_spellings_agree():
    for number in range(101):
        assert lookup_color(f"gray{number}") == lookup_color(f"grey{number}")


def test_gray_levels_are_neutral_and_increasing():
    values = [lookup_color(f"gray{n}") for n in range(101)]
    assert values == sorted(values)
    for value in values:
        assert value == (value & 0xFF) * 0x010101
    assert values[0] == lookup_color("black")
    assert values[100] == lookup_color("white")


def test_first_shade_matches_base_colour():
    for family in ("snow", "seashell", "bisque", "ivory", "azure", "red", "gold"):
        assert lookup_color(f"{family}1") == lookup_color(family)


def test_table_values_in_range():
    assert all(-1 <= value <= 0xFFFFFF for value in COLOR_NAMES.values())
    assert all(name == name.lower() for name in COLOR_NAMES)


def test_table_is_read_only():
    with pytest.raises(TypeError):
        COLOR_NAMES["snow"] = 0  # type: ignore[index]
    assert lookup_color("snow") == 0xFFFAFA