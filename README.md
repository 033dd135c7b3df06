# solong

A small top-down puzzle game played on a tile map. Walk the player around
the map, pick up every collectible, then step onto the exit. Each move is
counted and printed as you play.

## Installing

```
pip install .
```

The game window uses pygame. For tests:

```
pip install .[test]
pytest
```

## Playing

```
solong path/to/level.ber
```

The same command is available as `python -m solong.display path/to/level.ber`.

The window is drawn from five images that are read from a `textures`
directory in the current working directory: `textures/0.xpm` (floor,
drawn under every tile), `textures/1.xpm` (wall), `textures/C.xpm`
(collectible), `textures/E.xpm` (exit) and `textures/P.xpm` (player).
Each tile is 64 pixels square, so the window is 64 × map width by
64 × map height pixels.

Controls:

| Key    | Action     |
|--------|------------|
| `w`    | move up    |
| `s`    | move down  |
| `a`    | move left  |
| `d`    | move right |
| Escape | quit       |

Closing the window also quits. Every accepted move prints
`move count = N` on standard output. Walking into a wall does nothing and
is not counted. The exit stays closed until every collectible has been
picked up; stepping onto it then counts as a move and ends the game.

The command exits with status 1 when the game ends, whether it was won,
quit or stopped by an error. A wrong number of arguments prints
`Error: Bad arguments`; an invalid map prints a message such as
`Error: Invalid walls`; both go to standard error.

## Map files

A map is a plain-text file whose name ends in `.ber`. It is built from
these characters:

| Char | Meaning     |
|------|-------------|
| `0`  | empty floor |
| `1`  | wall        |
| `C`  | collectible |
| `E`  | exit        |
| `P`  | player      |

Example (every row, the last one too, ends with a newline):

```
1111111111
1P0C00C001
1000110001
10C000E001
1111111111
```

A map is accepted only if:

- the file name ends in `.ber` and has at least one character before it
  (`Invalid file name`);
- it has at least three lines (`Invalid row`) and no blank lines
  (`Over newline`);
- it contains only the characters above (`Invalid component`);
- it has exactly one `P`, exactly one `E` and at least one `C`
  (`Bad component cnt`);
- every row, newline included, has the same length (`Not rectangle map`)
  and rows are at least three tiles wide (`Not enough column`);
- it is closed in by walls on all four sides (`Invalid walls`);
- the player can reach every collectible (`Invalid collectible location`)
  and the exit (`Incorrect exit location`); the exit cannot be walked
  through on the way.

## Using it as a library

```python
from solong.maps import load_map, MapError
from solong.game import Game, Direction, MoveResult

rows = load_map("level.ber")   # raises MapError on a bad map
game = Game.from_rows(rows)
result = game.move(Direction.RIGHT)   # MoveResult.BLOCKED, MOVED or WON
game.handle_key("w")                  # same as game.move(Direction.UP)
game.tile(1, 1)                       # the tile at row 1, column 1
```

Modules:

- `solong.maps` — `load_map` and the steps it runs: `check_filename`,
  `read_rows`, `check_components`, `check_rectangle`, `check_walls`,
  `find_player` and `validate_paths`; also `count_lines`. Problems raise
  `MapError`, a `ValueError`.
- `solong.game` — `Game` (grid, player position, collectibles left, move
  count), `Direction` and `MoveResult`. `Game.handle_key` takes a
  character or a key code; key code 65307 (Escape) gives
  `MoveResult.QUIT`, unknown keys give `None`. Moving after the game has
  finished raises `RuntimeError`. The move report goes to `Game.stream`,
  or standard output when it is `None`.
- `solong.display` — the pygame `Renderer` (`Renderer.load`,
  `Renderer.draw`), `window_size`, `run` and `main`.
- `solong.lines` — `LineReader`, which reads lines from a text or binary
  stream through a fixed-size buffer (32 by default), and `read_lines`.
- `solong.output` — `cformat` and `cprintf` for the conversions
  `%d %i %u %c %s %x %X %p %%` (raising `FormatError` otherwise), and the
  writers `put_char`, `put_str`, `put_endl` and `put_nbr`.
- `solong.chars`, `solong.strings`, `solong.buffers` — small ASCII
  character tests, string helpers (`split`, `strtrim`, `substr`,
  `strnstr`, `strncmp`, `strchr`, `strrchr`, `strmapi`, `striteri`) and
  bytearray helpers (`memset`, `memcpy`, `memmove`, `strlcpy`,
  `strlcat` and others).

## What it does not do

The package ships no texture images: the `textures` directory must be
supplied by you. There are no enemies, animations, sound, on-screen move
counter, saved progress or level selection; one map is played per run.