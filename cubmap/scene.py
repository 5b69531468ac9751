"""Reading and validation of ``.cub`` scene descriptions."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import IntEnum

from .grid import MapLayout, ParseError, check_map, extract_map, is_all_whitespace
from .lines import read_lines
from .text import c_atoi, split_fields, trim

SCENE_EXTENSION = ".cub"
_DIGITS = "0123456789"
_COLOR_CHARS = _DIGITS + " \t\n\v\f\r"


class Direction(IntEnum):
    """Wall orientation a texture belongs to."""

    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3

    @property
    def key(self) -> str:
        """The identifier that introduces this texture in a scene file."""
        return _TEXTURE_KEYS[self]


_TEXTURE_KEYS = {
    Direction.NORTH: "NO",
    Direction.SOUTH: "SO",
    Direction.EAST: "EA",
    Direction.WEST: "WE",
}


@dataclass(frozen=True)
class Color:
    """An RGB colour with components from 0 to 255."""

    r: int
    g: int
    b: int


@dataclass(frozen=True)
class Scene:
    """A fully validated scene description."""

    textures: Mapping[Direction, str]
    floor: Color
    ceiling: Color
    layout: MapLayout

    @property
    def player_x(self) -> int:
        return self.layout.player_x

    @property
    def player_y(self) -> int:
        return self.layout.player_y


def check_extension(path: str | os.PathLike[str]) -> str:
    """Check that ``path`` names a ``.cub`` file and not a directory; return it."""
    name = os.fspath(path)
    if os.path.isdir(name):
        raise ParseError("The PATH is a directory")
    dot = name.find(".")
    if dot == -1 or name[dot:] != SCENE_EXTENSION:
        raise ParseError(f"Your filename should end by <{SCENE_EXTENSION}>")
    return name


def _starts_with_digit(line: str) -> bool:
    return bool(line) and line[0] in _DIGITS


def _texture_direction(line: str) -> Direction | None:
    for direction in Direction:
        if line.startswith(direction.key + " "):
            return direction
    return None


def _check_readable(path: str) -> None:
    try:
        fd = os.open(path, os.O_RDONLY)
    except (OSError, ValueError) as exc:
        raise ParseError("Invalid texture path") from exc
    os.close(fd)


def parse_textures(rows: Iterable[str]) -> tuple[dict[Direction, str], list[str]]:
    """Collect the four texture paths that precede the map.

    Returns the paths and a copy of ``rows`` where the consumed lines are
    blanked out. Every texture must appear exactly once and be readable.
    """
    rows = list(rows)
    textures: dict[Direction, str] = {}
    declared = 0
    for index, row in enumerate(rows):
        line = trim(row, " \t\n")
        if _starts_with_digit(line):
            break
        direction = _texture_direction(line)
        if direction is None:
            continue
        declared += 1
        if direction not in textures:
            textures[direction] = trim(line[3:], " \t")
            rows[index] = ""
    if len(textures) != len(Direction) or declared != len(Direction):
        raise ParseError("Wrong number of textures")
    for direction in Direction:
        _check_readable(textures[direction])
    return {direction: textures[direction] for direction in Direction}, rows


def _valid_component(field: str) -> bool:
    return 0 <= c_atoi(field) <= 255 and all(ch in _COLOR_CHARS for ch in field)


def parse_color_value(text: str) -> Color:
    """Parse ``R,G,B`` with each component between 0 and 255."""
    fields = split_fields(trim(text, " \t"), ",")
    if len(fields) != 3 or not all(_valid_component(field) for field in fields):
        raise ParseError("Invalid color format")
    r, g, b = (c_atoi(field) for field in fields)
    return Color(r, g, b)


def parse_colors(rows: Iterable[str]) -> tuple[Color, Color, list[str]]:
    """Collect the floor and ceiling colours that precede the map.

    Returns the floor colour, the ceiling colour and a copy of ``rows``
    where the consumed lines are blanked out. A repeated colour line is
    left in place.
    """
    rows = list(rows)
    floor: Color | None = None
    ceiling: Color | None = None
    for index, row in enumerate(rows):
        line = trim(row, " \t\n")
        if _starts_with_digit(line):
            break
        if line.startswith("F ") and floor is None:
            floor = parse_color_value(line[2:])
            rows[index] = ""
        if line.startswith("C ") and ceiling is None:
            ceiling = parse_color_value(line[2:])
            rows[index] = ""
    if floor is None or ceiling is None:
        raise ParseError("Wrong number of colors")
    return floor, ceiling, rows


def load_scene(path: str | os.PathLike[str]) -> Scene:
    """Read and validate the scene description at ``path``."""
    name = check_extension(path)
    try:
        rows = read_lines(name)
    except OSError as exc:
        raise ParseError("Cannot open the map file") from exc
    if all(is_all_whitespace(row) for row in rows):
        raise ParseError("The file is empty")
    textures, rows = parse_textures(rows)
    floor, ceiling, rows = parse_colors(rows)
    layout = check_map(extract_map(rows))
    return Scene(textures=textures, floor=floor, ceiling=ceiling, layout=layout)