# cubmap

`cubmap` reads and checks `.cub` scene files. A scene file is a small
text format that describes a grid-based first-person maze. It gives
four wall textures, a floor colour, a ceiling colour, and a map made of
walls, floor and one player start. The package can also load XPM
pixmaps into in-memory images.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## The file format

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm

F 220,100,0
C 225,30,0

111111
100101
1010N1
111111
```

* The file name must end in `.cub`. The extension starts at the first
  dot in the path, so the path may contain no other dot before it. A
  directory is rejected.
* `NO`, `SO`, `EA` and `WE` each appear exactly once, before the map.
  Each names a texture file that must exist and can be opened. Relative
  paths are resolved from the current working directory.
* `F` (floor) and `C` (ceiling) each appear once, before the map. Each
  gives three numbers from 0 to 255, separated by commas.
* The map comes last. It may use only `1` (wall), `0` (floor), a space
  (outside) and exactly one of `N`, `S`, `E`, `W` (the player's start
  and facing). The first row, the last row and the ends of every row
  may hold only walls or spaces. No floor cell or player start may touch
  an outside cell, and no empty line may split the map.

## Command line

```
cubmap scene.cub
```

This parses the scene and prints the four texture paths, the red, green
and blue parts of the floor and ceiling colours, and the player's
position (`playerx` is the column and `playery` the row, both counted
from 0). If the file is invalid, it prints `Error` and the reason on the
next line, then exits with status 1. A wrong number of arguments prints
a usage message and also exits with status 1.

## Library use

```python
from cubmap.grid import ParseError
from cubmap.scene import Direction, load_scene

try:
    scene = load_scene("scene.cub")
except ParseError as exc:
    print("invalid scene:", exc)
else:
    print(scene.textures[Direction.NORTH], scene.floor, scene.player_x, scene.player_y)
```

`load_scene` returns a `Scene` with these fields:

* `textures`: a mapping from each `Direction` (`NORTH`, `SOUTH`, `EAST`,
  `WEST`) to its path.
* `floor` and `ceiling`: each a `Color` with `r`, `g` and `b`.
* `layout`: a `MapLayout`.

A `MapLayout` holds the map rows with spaces replaced by `a` and short
rows padded with `a`. It also holds `player_x` and `player_y`, and
`player_facing` gives the letter at the player's cell. A file that
breaks any rule raises `cubmap.grid.ParseError`, and the message says
why.

Lower-level pieces:

* `cubmap.lines.read_lines` and `iter_lines` read text line by line and
  keep the line endings.
* `cubmap.scene.parse_textures`, `parse_colors` and `parse_color_value`
  read the header lines. `check_extension` checks the file name.
* `cubmap.grid.check_map` validates map rows on their own. The helpers
  it uses are also public: `join_map`, `check_borders`, `mark_outside`,
  `find_player`, `pad_rows` and `check_enclosed`.
* `cubmap.xpm.read_xpm` and `parse_xpm` load XPM pixmaps into a
  `cubmap.image.Image`, with 32 bits per pixel. Colours named `None`
  become `0xFF000000`. Colour specifications are resolved by
  `cubmap.colornames.lookup_color`, which accepts `#RRGGBB` or a colour
  name in any case. Unknown names give 0.
* `cubmap.image.Image` is a row-padded pixel buffer with `set_pixel` and
  `get_pixel`. `convert_color` turns a `0xRRGGBB` value into a pixel value
  for displays of fewer than 24 bits.

## What it does not do

`cubmap` only reads and checks scenes and textures. It does not draw
the maze, open a window or handle keyboard input. `load_scene` only
checks that each texture file can be opened. It does not load the
textures; call `read_xpm` yourself for that.