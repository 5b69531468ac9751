"""Reading of XPM pixmaps into images."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator

from .colornames import lookup_color
from .image import Image
from .text import c_atoi

TRANSPARENT = 0xFF000000
_WORD_SEPARATORS = " \t"


class XpmError(Exception):
    """Raised when an XPM pixmap cannot be read."""


def split_words(text: str) -> list[str]:
    """Split ``text`` on spaces and tabs, dropping empty words."""
    words: list[str] = []
    current: list[str] = []
    for char in text:
        if char in _WORD_SEPARATORS:
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        words.append("".join(current))
    return words


def _find_unquoted(text: str, token: str) -> int:
    last = len(text) - len(token)
    quoted = False
    for pos, char in enumerate(text):
        if pos > last:
            break
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(token, pos):
            return pos
    return -1


def strip_comments(text: str) -> str:
    """Blank out ``/* */`` and ``//`` comments found outside double quotes.

    Comments are replaced by spaces so that the text keeps its length.
    """
    for opener, closer in (("/*", "*/"), ("//", "\n")):
        while (begin := _find_unquoted(text, opener)) != -1:
            body = begin + len(opener)
            found = text.find(closer, body)
            relative = found - body if found != -1 else -1
            end = min(len(text), begin + relative + len(opener) + len(closer))
            text = text[:begin] + " " * (end - begin) + text[end:]
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in ``text``."""
    pos = 0
    while (start := text.find('"', pos)) != -1:
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1 : end]
        pos = end + 1


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM pixmap.

    The first string holds width, height, colour count and characters per
    pixel; colour definitions and pixel rows follow. Colours named ``None``
    become fully transparent pixels.
    """
    source = iter(lines)
    header = split_words(_next_line(source, "header"))
    if len(header) < 4:
        raise XpmError("incomplete header")
    width, height, ncolors, cpp = (c_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("invalid header values")

    direct = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "colour definition")
        words = split_words(line[cpp:])
        try:
            index = words.index("c") + 1
        except ValueError:
            raise XpmError(f"no colour key in {line!r}") from None
        if index >= len(words):
            raise XpmError(f"no colour value in {line!r}")
        suffix = words[index + 1] if index + 1 < len(words) else None
        value = lookup_color(words[index], suffix)
        key = line[:cpp]
        if direct:
            palette[key] = value
        else:
            palette.setdefault(key, value)

    image = Image(width, height)
    for y in range(height):
        row = _next_line(source, "pixel row")
        for x in range(width):
            color = palette.get(row[x * cpp : (x + 1) * cpp], 0)
            if color == -1:
                color = TRANSPARENT
            image.set_pixel(x, y, color)
    return image


def read_xpm(path: str | os.PathLike[str]) -> Image:
    """Read the XPM file at ``path``."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read {os.fspath(path)}") from exc
    return parse_xpm(quoted_lines(strip_comments(text)))