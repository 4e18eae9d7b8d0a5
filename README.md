# mazerunner

A small tile-based maze game drawn with pygame. The player walks around a
rectangular map, picks up every collectible and then leaves through the
exit. Each step is counted: the count is drawn in the window and printed on
the console as `Move number: N`.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
mazerunner path/to/level.ber
```

The command takes exactly one argument, the map file. Block images are read
from the directory named by the `MAZERUNNER_TEXTURES` environment variable,
or from `textures` in the current directory when it is not set. That
directory must hold `wall.xpm`, `floor.xpm`, `player.xpm`,
`collectibles.xpm` and `exit.xpm`; the size of the wall image sets the size
of one block.

Controls:

- `W` or Up arrow: move up
- `A` or Left arrow: move left
- `S` or Down arrow: move down
- `D` or Right arrow: move right
- `Esc` or closing the window: quit

Walls cannot be entered. Once all collectibles are picked up, stepping onto
the exit prints `You won` and ends the game.

If the arguments, the map or a texture is wrong, an error message is
printed on standard error and the command exits with status 1.

## Map files

A map is a text file with the `.ber` extension. Every line is one row of
tiles and all rows have the same length.

| Character | Meaning          |
|-----------|------------------|
| `1`       | wall             |
| `0`       | floor            |
| `P`       | player start     |
| `C`       | collectible      |
| `E`       | exit             |

A map is accepted only when:

- it is rectangular and fully surrounded by walls,
- it holds only the characters above,
- it holds exactly one `P`, exactly one `E` and at least one `C`,
- every collectible and the exit can be reached from the start.

Example:

```
1111111
1P0C0E1
1111111
```

## Using it as a library

Maps and game state:

```python
from mazerunner.gamemap import load_map, Position
from mazerunner.game import Game, Outcome

game = Game(load_map("level.ber"))
outcome = game.move(True, 1)      # one step to the right
if outcome is Outcome.COLLECTED:
    print(game.collectibles_left, game.moves)
print(game.tile_at(Position(0, 0)))
```

- `mazerunner.gamemap.load_map` reads and checks a file;
  `validate_map` checks a list of rows. Both raise `MapError` with a
  message naming the broken rule.
- `Game.move(horizontal, length)` returns an `Outcome`: `BLOCKED`, `MOVED`,
  `COLLECTED` or `WON`. Moving after a win raises `RuntimeError`.
- `Game.handle_key(key)` takes X11-style key codes (for example 119 for
  `w`, 65307 for Escape), returns `Outcome.QUIT` for Escape and `None` for
  keys it does not know.

XPM images and colours:

```python
from mazerunner.xpm import read_xpm_file
from mazerunner.colors import lookup_color, color_from_text

image = read_xpm_file("textures/wall.xpm")
print(image.width, image.height, hex(image.pixel(0, 0)))
raw = image.to_bytes(4, big_endian=False)

lookup_color("steelblue")       # 0x4682b4; unknown names raise KeyError
color_from_text("#ff8800")      # 0xff8800; unknown names give 0
```

The XPM reader handles `#rrggbb` values and X11 colour names; the colour
`None` is stored as `mazerunner.xpm.TRANSPARENT`. Malformed data raises
`XpmError`.

## What it does not do

The package ships no texture images: the game does not start until a
directory with the five `.xpm` files is available. There is no level
editor, no saving of progress and no score table.