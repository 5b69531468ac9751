import pytest

from cubmap.xpm import (
    TRANSPARENT,
    XpmError,
    parse_xpm,
    quoted_lines,
    read_xpm,
    split_words,
    strip_comments,
)


def test_split_words_on_spaces_and_tabs():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]
    assert split_words("a\nb") == ["a\nb"]
    assert split_words(" \t ") == []


def test_strip_block_comment_keeps_length():
    text = "x /* note */ y"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result.split() == ["x", "y"]


def test_strip_line_comment():
    text = "// header\nabc"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result.split() == ["abc"]


def test_comment_inside_quotes_is_kept():
    text = '"a/*b*/c" /* gone */'
    result = strip_comments(text)
    assert result.startswith('"a/*b*/c"')
    assert "gone" not in result


def test_quoted_lines():
    text = 'static char *x[] = {"a b", "cd",\n"e"};'
    assert list(quoted_lines(text)) == ["a b", "cd", "e"]


def test_quoted_lines_unterminated():
    assert list(quoted_lines('"ok" "broken')) == ["ok"]


def test_parse_hex_and_none():
    image = parse_xpm(["2 2 2 1", ". c #FF0000", "x c None", ".x", "x."])
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == TRANSPARENT
    assert image.get_pixel(0, 1) == TRANSPARENT
    assert image.get_pixel(1, 1) == 0xFF0000


def test_parse_named_colors():
    image = parse_xpm(["2 1 2 1", "r c red", "g c dark green", "rg"])
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == 0x006400


def test_two_chars_per_pixel():
    image = parse_xpm(["2 1 2 2", "aa c #000001", "bb c #000002", "bbaa"])
    assert image.get_pixel(0, 0) == 0x000002
    assert image.get_pixel(1, 0) == 0x000001


def test_duplicate_names_short_codes_last_wins():
    image = parse_xpm(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert image.get_pixel(0, 0) == 0x000002


def test_duplicate_names_long_codes_first_wins():
    image = parse_xpm(["1 1 2 3", "abc c #000001", "abc c #000002", "abc"])
    assert image.get_pixel(0, 0) == 0x000001


def test_unknown_code_is_black():
    image = parse_xpm(["2 1 1 1", "a c #123456", "az"])
    assert image.get_pixel(0, 0) == 0x123456
    assert image.get_pixel(1, 0) == 0


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["2 2 1"],
        ["0 2 1 1", "a c #000000", "aa", "aa"],
        ["1 1 1 1", "a #000000", "a"],
        ["1 1 1 1", "a x c", "a"],
        ["1 2 1 1", "a c #000000", "a"],
        ["1 1 2 1", "a c #000000"],
    ],
)
def test_invalid_pixmaps(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_read_xpm_file(tmp_path):
    content = (
        "/* XPM */\n"
        "static char *img[] = {\n"
        "/* columns rows colors chars-per-pixel */\n"
        '"2 1 2 1",\n'
        '"a c #00FF00",\n'
        '"b c blue",\n'
        "// pixels\n"
        '"ab"\n'
        "};\n"
    )
    path = tmp_path / "img.xpm"
    path.write_text(content)
    image = read_xpm(path)
    assert (image.width, image.height) == (2, 1)
    assert image.get_pixel(0, 0) == 0x00FF00
    assert image.get_pixel(1, 0) == 0x0000FF


def test_read_missing_file(tmp_path):
    with pytest.raises(XpmError):
        read_xpm(tmp_path / "missing.xpm")