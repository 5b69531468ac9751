"""Command that validates a scene description and prints what it holds."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .grid import ParseError
from .scene import Direction, load_scene

PROGRAM = "cubmap"


def main(argv: Sequence[str] | None = None) -> int:
    """Load the scene named on the command line and print its settings."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(f"USAGE ERROR:\n{PROGRAM} <map>.cub")
        return 1
    try:
        scene = load_scene(args[0])
    except ParseError as exc:
        print(f"Error\n{exc}")
        return 1
    for direction, label in (
        (Direction.NORTH, "no"),
        (Direction.SOUTH, "so"),
        (Direction.EAST, "ea"),
        (Direction.WEST, "we"),
    ):
        print(f"{label} --> {scene.textures[direction]}")
    for name, color in (("floor", scene.floor), ("ceiling", scene.ceiling)):
        print(f"{name} r --> {color.r}")
        print(f"{name} g --> {color.g}")
        print(f"{name} b --> {color.b}")
    print(f"playerx --> {scene.player_x}")
    print(f"playery --> {scene.player_y}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())