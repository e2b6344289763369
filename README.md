# cubed

A small first-person ray-casting explorer. It reads a `.cub` scene file and
validates it. It then opens a pygame window where you can walk around the
maze.

## Installing

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Running

```
cubed maps/default.cub
```

The command takes exactly one argument. The path must be longer than five
characters, and the text after its last dot must begin with `cub`.

Before the window opens, the command prints the parsed textures, colours and
map, followed by a line `map:`. If the arguments or the file are invalid, it
prints `Error: ...` on standard error and exits with status 1.

### Controls

| Key    | Action                      |
|--------|-----------------------------|
| W      | move forward 5 units        |
| S      | move backward 5 units       |
| A      | turn left by 0.05 radians   |
| D      | turn right by 0.05 radians  |
| Escape | close the window            |

A move is refused if it would end inside a wall.

## The `.cub` format

A scene file begins with six identifier lines. They may come in any order,
and blank lines may separate them:

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png
F 220,100,0
C 225,30,0
```

- `NO`, `SO`, `WE` and `EA` give texture paths. Each file must exist and be
  readable.
- `F` and `C` give the floor and ceiling colours. Each is written as exactly
  three comma-separated values, and each value is a whole number from 0 to
  255. Spaces and tabs around a value are allowed.
- A space or tab must follow each identifier.
- Giving an identifier twice is an error, and so is an unknown identifier.

The map follows these lines:

```
111111
100101
101001
1100N1
111111
```

- The only allowed characters are `0` (floor), `1` (wall) and space.
- There must be exactly one start cell, marked `N`, `S`, `E` or `W`. The
  letter sets the direction you face at the start.
- The map must contain at least one `0`.
- The first row, the last row and the first column may hold only `1` and
  space.
- No floor or start cell may have a space next to it, either horizontally or
  vertically.
- Blank lines are not allowed inside the map.

Shorter rows are padded with spaces so that every row has the same width.

## Using it as a library

```python
from cubed.parser import parse_map
from cubed.raycast import player_position, cast_ray, wall_spans

config = parse_map("maps/default.cub")
print(config.describe())

player = player_position(config.grid)
distance = cast_ray(config.grid, player, player.angle)
spans = wall_spans(config.grid, player)  # one (start, end) row range per column
```

The package has these modules:

- `cubed.config`: `MapConfig`, `Rgb`, `MapError`, and the screen constants
  `WIDTH`, `HEIGHT`, `TILE_SIZE`, `FOV` and `NUM_RAYS`.
- `cubed.colors`: `parse_color`, `check_color`, `count_commas` and
  `parse_rgb_colors`.
- `cubed.grid`: `normalize_map`, `check_map`, `check_map_characters`,
  `check_map_walls` and `check_inner_walls`.
- `cubed.parser`: `parse_map`, `check_args` and the line-level parsing
  helpers.
- `cubed.raycast`: `Player`, `player_position`, `is_wall_at`,
  `normalize_angle`, `cast_ray`, `move_player`, `calculate_wall_height` and
  `wall_spans`.
- `cubed.app`: `Game`, whose methods are `handle_input`, `render` and `run`,
  and the `main` entry point.

`parse_map` returns a `MapConfig`. It raises `MapError`, a subclass of
`ValueError`, when the file cannot be opened or is not valid.

## Limitations

- The texture files are checked for existence but are never loaded. Every
  wall is drawn as one flat colour on a black background.
- The floor and ceiling colours are parsed and validated but are not used
  for drawing.
- Collision and ray casting look only at the first 10 rows and columns of
  the grid. Anything beyond them is treated as wall.
- `player_position` takes the start cell's row index as `x` and its column
  index as `y`. `is_wall_at` reads the grid the other way round, with `y`
  selecting the row. In a map that is not symmetric, the starting view may
  therefore not match the cell marked in the file.