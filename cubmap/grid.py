"""Validation of the map grid found at the end of a scene description."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .text import filler, split_fields, trim

MAP_CHARS = "10NSEW "
PLAYER_CHARS = "NSEW"
WALL_LINE_CHARS = "1 "
OUTSIDE = "a"
_OPEN_CHARS = "0NSEW"


class ParseError(Exception):
    """Raised when a scene description is invalid."""


@dataclass(frozen=True)
class MapLayout:
    """A validated map: padded rows with outside cells marked, plus the player."""

    rows: tuple[str, ...]
    player_x: int
    player_y: int

    @property
    def player_facing(self) -> str:
        """The direction letter found at the player's cell."""
        return self.rows[self.player_y][self.player_x]


def is_map_char(c: str) -> bool:
    """Tell whether ``c`` is a single character allowed in the map."""
    return len(c) == 1 and c in MAP_CHARS


def has_foreign_chars(rows: Iterable[str]) -> bool:
    """Tell whether any row holds a character that is neither a map character nor a newline."""
    return any(not is_map_char(ch) and ch != "\n" for row in rows for ch in row)


def is_all_whitespace(text: str) -> bool:
    """Tell whether ``text`` holds only spaces, tabs and newlines."""
    return all(ch in " \n\t" for ch in text)


def extract_map(rows: Iterable[str]) -> list[str]:
    """Return the rows from the first one that starts with a map character.

    Every row is first checked for characters that have no place in the
    configuration once the texture and colour lines have been consumed.
    """
    rows = list(rows)
    if has_foreign_chars(rows):
        raise ParseError("Invalid char in the configuration file")
    for index, row in enumerate(rows):
        if row and is_map_char(row[0]):
            return rows[index:]
    return []


def join_map(rows: Iterable[str]) -> list[str]:
    """Join the map rows, reject empty maps and blank lines, and split them again."""
    content = trim("".join(rows), "\t\n")
    if not content or is_all_whitespace(content):
        raise ParseError("Empty map")
    last = content[-1]
    if not is_map_char(content[0]) or (not is_map_char(last) and last != "\n"):
        raise ParseError("Invalid configuration")
    if "\n\n" in content:
        raise ParseError("Found an empty line inside the map")
    return split_fields(content, "\n")


def _is_wall_line(row: str) -> bool:
    return all(ch in WALL_LINE_CHARS for ch in row)


def check_borders(rows: Sequence[str]) -> None:
    """Check that the first, last and side cells of the map are walls or spaces."""
    if not rows:
        raise ParseError("Empty map")
    if not _is_wall_line(rows[0]):
        raise ParseError("Map isn't closed by walls (T)")
    if not _is_wall_line(rows[-1]):
        raise ParseError("Map isn't closed by walls (B)")
    for row in rows:
        if not row or row[0] not in WALL_LINE_CHARS or row[-1] not in WALL_LINE_CHARS:
            raise ParseError("The map isn't closed by walls (side border)")


def mark_outside(rows: Iterable[str]) -> list[str]:
    """Replace every space with the outside marker."""
    return [row.replace(" ", OUTSIDE) for row in rows]


def find_player(rows: Sequence[str]) -> tuple[int, int]:
    """Return the (x, y) position of the single player start."""
    found = [
        (x, y)
        for y, row in enumerate(rows)
        for x, ch in enumerate(row)
        if ch in PLAYER_CHARS
    ]
    if len(found) != 1:
        raise ParseError("Invalid number of player position")
    return found[0]


def pad_rows(rows: Sequence[str]) -> list[str]:
    """Extend short rows with outside cells so that neighbours can be looked up."""
    width = 0
    for row in rows:
        if width < len(row):
            width = len(row) + 1
    return [
        row + filler(OUTSIDE, width - len(row) + 1) if len(row) < width else row
        for row in rows
    ]


def _cell(rows: Sequence[str], x: int, y: int) -> str:
    if 0 <= y < len(rows) and 0 <= x < len(rows[y]):
        return rows[y][x]
    return ""


def check_enclosed(rows: Sequence[str]) -> None:
    """Check that no open cell or player start touches an outside cell."""
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            if ch not in _OPEN_CHARS:
                continue
            neighbours = (
                _cell(rows, x + 1, y),
                _cell(rows, x - 1, y),
                _cell(rows, x, y + 1),
                _cell(rows, x, y - 1),
            )
            if OUTSIDE in neighbours:
                raise ParseError(
                    f"Open area touches the outside at line {y + 1}: {row}"
                )


def check_map(rows: Iterable[str]) -> MapLayout:
    """Validate the map rows and return the resulting layout."""
    grid = join_map(rows)
    check_borders(grid)
    grid = mark_outside(grid)
    player_x, player_y = find_player(grid)
    grid = pad_rows(grid)
    check_enclosed(grid)
    return MapLayout(tuple(grid), player_x, player_y)