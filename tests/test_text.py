import pytest

from cubmap.text import c_atoi, filler, split_fields, trim


@pytest.mark.parametrize("value", [0, 7, 255, 1000, -1, -255, 2147483647])
def test_atoi_round_trip(value):
    assert c_atoi(str(value)) == value


def test_atoi_skips_leading_whitespace():
    assert c_atoi(" \t\n\v\f\r42") == 42


def test_atoi_stops_at_first_non_digit():
    assert c_atoi("  -17abc") == -17
    assert c_atoi("12,34") == 12


def test_atoi_plus_sign():
    assert c_atoi("+5") == 5


def test_atoi_without_digits_is_zero():
    assert c_atoi("abc") == c_atoi("") == c_atoi("--1") == 0


def test_atoi_wraps_like_c_int():
    assert c_atoi("2147483648") == -2147483648


def test_split_drops_empty_fields():
    assert split_fields("a,,b,", ",") == ["a", "b"]


def test_split_of_separators_only():
    assert split_fields(",,,", ",") == []


def test_split_keeps_inner_spaces():
    assert split_fields(" 1, 2 ,3", ",") == [" 1", " 2 ", "3"]


def test_trim_both_ends():
    assert trim(" \tpath/to.xpm \t", " \t") == "path/to.xpm"


def test_trim_everything():
    assert trim("\t\n\t", "\t\n") == ""


def test_trim_empty_set_keeps_text():
    assert trim("  x  ", "") == "  x  "


def test_filler_repeats():
    assert filler("a", 3) == "aaa"


@pytest.mark.parametrize("size", [0, -4])
def test_filler_minimum_one(size):
    assert filler("a", size) == "a"