# berquest

A small tile-based puzzle game. You walk a player around a walled map,
pick up every collectible and then reach the exit.

## Installing

```
pip install .
```

pygame is installed along with the package; it draws the game window.

## Playing

```
berquest path/to/level.ber
```

The command takes exactly one argument, a file whose name ends in `.ber`.
The map is checked before any window opens. A title screen opens first;
press Enter there to start the level.

| Key                 | Action     |
|---------------------|------------|
| W / Up arrow        | move up    |
| S / Down arrow      | move down  |
| A / Left arrow      | move left  |
| D / Right arrow     | move right |
| Esc or close window | quit       |

The window shows `ESC to quit` and a counter `steps : N` in its top-left
corner. Stepping onto the exit ends the game only once every collectible has
been gathered; the game then prints how many moves were made and exits with
status 0. Quitting with Esc or by closing the window prints
`Sortie du jeu ...` and exits with status 1.

### Images

The package ships no images. The game loads them from a `textures` directory
in the current working directory, as `.xpm` files:

- title screen: `presentation_background.xpm`, `start_button.xpm`
- level: `wall.xpm`, `floor.xpm`, `collectible.xpm`, `exit.xpm`,
  `player.xpm`, `player_up.xpm`, `player_down.xpm`, `player_left.xpm`,
  `player_right.xpm`

Tiles are drawn 32 by 32 pixels. If any image cannot be loaded, the game stops
with status 1.

## Map format

A map is a plain text file, one row per line, made of these characters:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | floor        |
| `C`  | collectible  |
| `E`  | exit         |
| `P`  | player start |

Example:

```
1111111
1P0C0E1
1111111
```

A map is rejected with an `Error` report when:

- the file cannot be opened or is empty;
- its rows are not all the same length, or it has blank lines;
- it is smaller than 3 by 3;
- it is not closed by walls on all four sides;
- it holds any character other than the five above;
- it does not have exactly one player and exactly one exit, or has no collectible;
- the player cannot reach every collectible and the exit (`No valid path`).

## Using the pieces from Python

Maps can be loaded, checked and played without opening a window:

```python
from berquest.mapfile import parse_map
from berquest.game import Game, Direction, MoveOutcome

game = Game(parse_map("1111111\n1P0C0E1\n1111111\n"))
outcome = game.move(Direction.RIGHT)   # MoveOutcome.MOVED
print(game.step_label())               # steps : 1
```

- `berquest.mapfile`: `parse_map(text)` and `load_map(path)` return a
  `GameMap`; the checks are also available one by one as `check_shape`,
  `check_walls`, `count_tiles`, `flood_fill` and `validate_path`.
- `berquest.game`: `Game` with `move(direction)`, `find_player()`,
  `facing_texture()` and `step_label()`; `Direction`, `MoveOutcome`, and
  `direction_for_key(key)` for key codes.
- `berquest.errors`: `GameError` and its subclasses `ArgumentError`,
  `MapError` and `PathError` (a `MapError`), plus `format_error(message)`.
- `berquest.app`: `check_arguments(argv)`, `Renderer`, `run(game)` and
  `main(argv=None)`, the command's entry point.

The package also holds small helper modules:

- `berquest.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_lower`, `to_upper`, `atoi`, `itoa`.
- `berquest.strings`: `str_chr`, `str_rchr`, `str_cmp`, `str_ncmp`,
  `str_nstr`, `str_join`, `substr`, `str_trim`, `split`, `str_iteri`,
  `str_mapi`, `strlcpy`, `strlcat`.
- `berquest.membytes`: `mem_set`, `bzero`, `calloc`, `mem_copy`, `mem_move`,
  `mem_chr`, `mem_cmp` on byte buffers.
- `berquest.printing`: `c_format` and `printf` for the `%s %c %p %d %i %u %x
  %X %%` conversions, `format_unsigned`, `format_hex`, `format_pointer`, and
  the writers `put_char`, `put_str`, `put_endl`, `put_nbr`.
- `berquest.linereader`: `LineReader`, which hands out a stream's lines with
  their newlines, and `read_lines(stream)`.