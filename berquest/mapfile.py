"""Reading and validating ``.ber`` map files."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from os import PathLike

from .errors import MapError, PathError
from .strings import split

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"
TILES = frozenset("01CEP")
MIN_SIDE = 3

Position = tuple[int, int]


@dataclass
class GameMap:
    """A validated map: a mutable grid of tile characters and its counts."""

    rows: list[list[str]]
    width: int
    height: int
    player: Position
    collectibles: int

    def tile(self, x: int, y: int) -> str:
        """The tile character at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"position ({x}, {y}) is outside the map")
        return self.rows[y][x]

    @property
    def lines(self) -> list[str]:
        return ["".join(row) for row in self.rows]


@dataclass(frozen=True)
class TileCounts:
    """How many players, exits and collectibles a map holds."""

    players: int
    exits: int
    collectibles: int
    start: Position | None


@dataclass(frozen=True)
class FillResult:
    """What a flood fill from the player reached."""

    collectibles: int
    exits: int


def _file_lines(text: str) -> list[str]:
    """Lines of ``text`` as a line reader returns them, newline kept."""
    pieces = text.split("\n")
    lines = [piece + "\n" for piece in pieces[:-1]]
    if pieces[-1]:
        lines.append(pieces[-1])
    return lines


def check_shape(lines: Sequence[str], width: int, height: int) -> None:
    """Every row must be ``width`` long and there must be ``height`` rows."""
    for line in lines:
        if len(line) != width:
            raise MapError("Invalid map format\n")
    if len(lines) != height:
        raise MapError("Invalid map.\nEmpty line in map\n")


def check_walls(rows: Sequence[str]) -> None:
    """The map must be rectangular and framed by walls on all four sides."""
    message = "Invalid map.\nIt must be surrounded by a wall "
    if not rows or not rows[0]:
        raise MapError(message)
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise MapError("Invalide size map")
    frame = [*rows[0], *rows[-1], *(row[0] for row in rows), *(row[-1] for row in rows)]
    if any(tile != WALL for tile in frame):
        raise MapError(message)


def count_tiles(rows: Sequence[str]) -> TileCounts:
    """Count players, exits and collectibles; reject unknown tiles.

    The start is the last player tile found reading row by row.
    """
    players = exits = collectibles = 0
    start: Position | None = None
    for y, row in enumerate(rows):
        for x, tile in enumerate(row):
            if tile not in TILES:
                raise MapError("Not expected character in map")
            if tile == PLAYER:
                players += 1
                start = (x, y)
            elif tile == COLLECTIBLE:
                collectibles += 1
            elif tile == EXIT:
                exits += 1
    return TileCounts(players, exits, collectibles, start)


def flood_fill(rows: Sequence[Sequence[str]], start: Position) -> FillResult:
    """Count collectibles and exits reachable from ``start``.

    Walking goes through floor, player and collectible tiles. An exit is
    reached but not walked through. ``rows`` is left untouched.
    """
    grid = [list(row) for row in rows]
    collectibles = exits = 0
    pending = [start]
    while pending:
        x, y = pending.pop()
        if not (0 <= y < len(grid) and 0 <= x < len(grid[y])):
            continue
        tile = grid[y][x]
        if tile == EXIT:
            exits += 1
            grid[y][x] = WALL
            continue
        if tile == COLLECTIBLE:
            collectibles += 1
        elif tile not in (PLAYER, FLOOR):
            continue
        grid[y][x] = WALL
        pending.extend([(x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)])
    return FillResult(collectibles, exits)


def validate_path(rows: Sequence[Sequence[str]], start: Position, collectibles: int) -> None:
    """Raise :class:`PathError` unless every collectible and the exit are reachable."""
    reached = flood_fill(rows, start)
    if reached.collectibles != collectibles or reached.exits != 1:
        raise PathError("No valid path")


def _check_counts(counts: TileCounts) -> None:
    if counts.players != 1:
        raise MapError("Invalid Map. There must be one player")
    if counts.exits != 1:
        raise MapError("Invalid Map. There must be one exit")
    if counts.collectibles == 0:
        raise MapError("There must be at least one collectible")


def parse_map(text: str) -> GameMap:
    """Validate the contents of a map file and build the map."""
    file_lines = _file_lines(text)
    if not file_lines:
        raise MapError("Empty file")
    width = len(file_lines[0].removesuffix("\n"))
    height = len(file_lines)
    rows = split(text, "\n")
    check_shape(rows, width, height)
    if height < MIN_SIDE or width < MIN_SIDE:
        raise MapError("Invalid size")
    check_walls(rows)
    counts = count_tiles(rows)
    _check_counts(counts)
    assert counts.start is not None
    validate_path(rows, counts.start, counts.collectibles)
    return GameMap(
        rows=[list(row) for row in rows],
        width=width,
        height=height,
        player=counts.start,
        collectibles=counts.collectibles,
    )


def load_map(path: str | PathLike[str]) -> GameMap:
    """Read and validate the map file at ``path``."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise MapError("Cannot open file") from exc
    return parse_map(data.decode("latin-1"))