"""Game state: the player walking over the map, collecting and reaching the exit."""

from __future__ import annotations

from enum import Enum

from .mapfile import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, GameMap, Position

KEY_UP = 65362
KEY_DOWN = 65364
KEY_LEFT = 65361
KEY_RIGHT = 65363
KEY_W = 119
KEY_A = 97
KEY_S = 115
KEY_D = 100
KEY_ESC = 65307
KEY_SPACE = 32
KEY_ENTER = 65293

TEXTURE_DIR = "textures"


class Direction(Enum):
    """A step on the grid and the sprite that shows the player facing that way."""

    UP = (0, -1, "player_up")
    DOWN = (0, 1, "player_down")
    LEFT = (-1, 0, "player_left")
    RIGHT = (1, 0, "player_right")

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def sprite(self) -> str:
        return self.value[2]


class MoveOutcome(Enum):
    """What a move did."""

    BLOCKED = "blocked"
    MOVED = "moved"
    WON = "won"


_DIRECTION_KEYS = {
    KEY_UP: Direction.UP,
    KEY_W: Direction.UP,
    KEY_DOWN: Direction.DOWN,
    KEY_S: Direction.DOWN,
    KEY_LEFT: Direction.LEFT,
    KEY_A: Direction.LEFT,
    KEY_RIGHT: Direction.RIGHT,
    KEY_D: Direction.RIGHT,
}


def direction_for_key(key: int) -> Direction | None:
    """The direction bound to a key code (arrows and WASD), or None."""
    return _DIRECTION_KEYS.get(key)


class Game:
    """A game in progress on a validated map."""

    def __init__(self, game_map: GameMap) -> None:
        self.map = game_map
        self.moves = 0
        self.collectibles = game_map.collectibles
        self.position: Position = game_map.player
        self.facing: Direction | None = None
        self.won = False

    def find_player(self) -> Position:
        """Locate the last player tile on the map, reading row by row.

        When no player tile is left, the previously known position is kept.
        """
        found: Position | None = None
        for y, row in enumerate(self.map.rows):
            for x, tile in enumerate(row):
                if tile == PLAYER:
                    found = (x, y)
        if found is not None:
            self.position = found
        return self.position

    def move(self, direction: Direction) -> MoveOutcome:
        """Try one step in ``direction``.

        Walls and the map edge block the step. A collectible is picked up. The
        exit wins the game once every collectible is taken; the winning step
        is not counted. Stepping on the exit earlier counts as a move but
        leaves the exit in place.
        """
        if self.won:
            raise RuntimeError("the game is already won")
        self.facing = direction
        x, y = self.find_player()
        tx, ty = x + direction.dx, y + direction.dy
        rows = self.map.rows
        if not (0 <= tx < self.map.width and 0 <= ty < self.map.height):
            return MoveOutcome.BLOCKED
        if rows[ty][tx] == WALL:
            return MoveOutcome.BLOCKED
        if rows[ty][tx] == COLLECTIBLE:
            rows[ty][tx] = PLAYER
            self.collectibles -= 1
        if rows[ty][tx] == EXIT and self.collectibles == 0:
            self.won = True
            return MoveOutcome.WON
        if rows[ty][tx] == FLOOR:
            rows[ty][tx] = PLAYER
        rows[y][x] = FLOOR
        self.moves += 1
        self.find_player()
        return MoveOutcome.MOVED

    def facing_texture(self) -> str | None:
        """Texture path of the player sprite for the current facing, if any."""
        if self.facing is None:
            return None
        return f"{TEXTURE_DIR}/{self.facing.sprite}.xpm"

    def step_label(self) -> str:
        """The move counter as shown on screen."""
        return f"steps : {self.moves}"