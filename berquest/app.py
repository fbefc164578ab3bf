"""The windowed game: title screen, map drawing, keyboard loop and command line."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .errors import ArgumentError, GameError, PathError  # noqa: E402
from .game import (  # noqa: E402
    KEY_A,
    KEY_D,
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESC,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_S,
    KEY_UP,
    KEY_W,
    TEXTURE_DIR,
    Game,
    MoveOutcome,
    direction_for_key,
)
from .mapfile import COLLECTIBLE, EXIT, FLOOR, WALL, load_map  # noqa: E402

CYAN = "\033[1;96m"
RESET = "\033[0m"

TILE_SIZE = 32
PRESENTATION_SIZE = (800, 600)
PRESENTATION_TITLE = "GAME 01"
GAME_TITLE = "berquest"
START_PROMPT = "---------- PRESS ENTER TO START THE GAME ----------"
QUIT_HINT = "ESC to quit"
HINT_COLOUR = (0xFF, 0xFF, 0xFF)
STEPS_COLOUR = (0xFF, 0x00, 0x99)
FONT_SIZE = 20

TILE_TEXTURES = {
    WALL: "wall",
    FLOOR: "floor",
    COLLECTIBLE: "collectible",
    EXIT: "exit",
}
PLAYER_TEXTURES = ("player", "player_up", "player_down", "player_left", "player_right")
GAME_TEXTURES = (*TILE_TEXTURES.values(), *PLAYER_TEXTURES)
PRESENTATION_TEXTURES = ("presentation_background", "start_button")

_PRESENTATION_LAYOUT = (
    ("presentation_background", (0, 0)),
    ("start_button", (50, 50)),
    ("presentation_background", (100, 100)),
    ("start_button", (150, 150)),
    ("presentation_background", (200, 200)),
    ("start_button", (760, 0)),
    ("presentation_background", (710, 50)),
    ("start_button", (660, 100)),
    ("presentation_background", (610, 150)),
    ("start_button", (560, 200)),
)

_KEYSYMS = {
    pygame.K_UP: KEY_UP,
    pygame.K_DOWN: KEY_DOWN,
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_RIGHT: KEY_RIGHT,
    pygame.K_w: KEY_W,
    pygame.K_a: KEY_A,
    pygame.K_s: KEY_S,
    pygame.K_d: KEY_D,
    pygame.K_ESCAPE: KEY_ESC,
    pygame.K_RETURN: KEY_ENTER,
}

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def _font() -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, FONT_SIZE)


def _load_textures(directory: Path, names: Sequence[str]) -> dict[str, pygame.Surface]:
    textures = {}
    for name in names:
        path = directory / f"{name}.xpm"
        try:
            textures[name] = pygame.image.load(str(path))
        except (pygame.error, OSError) as exc:
            raise GameError(f"cannot load {path}") from exc
    return textures


class Renderer:
    """Draws the map, the player and the on-screen text of a game."""

    def __init__(self, game: Game, textures: Mapping[str, pygame.Surface]) -> None:
        missing = [name for name in GAME_TEXTURES if name not in textures]
        if missing:
            raise ValueError(f"missing textures: {', '.join(missing)}")
        self.game = game
        self.textures = dict(textures)
        self._font: pygame.font.Font | None = None

    @property
    def size(self) -> tuple[int, int]:
        return self.game.map.width * TILE_SIZE, self.game.map.height * TILE_SIZE

    def _player_texture(self) -> pygame.Surface:
        facing = self.game.facing
        return self.textures[facing.sprite if facing is not None else "player"]

    def draw(self, surface: pygame.Surface) -> None:
        """Clear ``surface`` and draw the whole game onto it."""
        surface.fill((0, 0, 0))
        for y, row in enumerate(self.game.map.rows):
            for x, tile in enumerate(row):
                name = TILE_TEXTURES.get(tile)
                if name is not None:
                    surface.blit(self.textures[name], (x * TILE_SIZE, y * TILE_SIZE))
        px, py = self.game.position
        surface.blit(self._player_texture(), (px * TILE_SIZE, py * TILE_SIZE))
        if self._font is None:
            self._font = _font()
        surface.blit(self._font.render(QUIT_HINT, True, HINT_COLOUR), (10, 10))
        surface.blit(
            self._font.render(self.game.step_label(), True, STEPS_COLOUR), (10, 30)
        )


def check_arguments(argv: Sequence[str]) -> str:
    """Return the map path named by the command-line arguments."""
    if len(argv) > 1:
        raise ArgumentError("Arguments : Too many arguments")
    if len(argv) < 1:
        raise ArgumentError("Arguments : Map file is missing")
    path = argv[0]
    if not path.endswith(".ber"):
        raise ArgumentError("Arguments : Map file is not a .ber file")
    return path


def _farewell() -> int:
    sys.stdout.write(f"{CYAN}Sortie du jeu ...\n{RESET}")
    return EXIT_FAILURE


def _draw_presentation(surface: pygame.Surface, textures: Mapping[str, pygame.Surface]) -> None:
    for name, position in _PRESENTATION_LAYOUT:
        surface.blit(textures[name], position)
    surface.blit(_font().render(START_PROMPT, True, HINT_COLOUR), (250, 300))


def _wait_for_enter() -> bool:
    while True:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN and _KEYSYMS.get(event.key) == KEY_ENTER:
            return True


def _play(game: Game, screen: pygame.Surface, renderer: Renderer) -> int:
    renderer.draw(screen)
    pygame.display.flip()
    while True:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            return _farewell()
        if event.type != pygame.KEYDOWN:
            continue
        key = _KEYSYMS.get(event.key)
        if key == KEY_ESC:
            return _farewell()
        direction = direction_for_key(key) if key is not None else None
        if direction is None:
            continue
        outcome = game.move(direction)
        if outcome is MoveOutcome.WON:
            sys.stdout.write(
                f"{CYAN}you won the game after {game.moves} moves, "
                f"congratulations!\n{RESET}"
            )
            return EXIT_SUCCESS
        if outcome is MoveOutcome.MOVED:
            renderer.draw(screen)
            pygame.display.flip()


def run(game: Game) -> int:
    """Show the title screen, then play ``game``; return the exit status."""
    texture_dir = Path(TEXTURE_DIR)
    pygame.init()
    try:
        screen = pygame.display.set_mode(PRESENTATION_SIZE)
        pygame.display.set_caption(PRESENTATION_TITLE)
        try:
            presentation = _load_textures(texture_dir, PRESENTATION_TEXTURES)
        except GameError:
            sys.stderr.write("Error : Failed to load presentation\n")
            return EXIT_FAILURE
        _draw_presentation(screen, presentation)
        pygame.display.flip()
        if not _wait_for_enter():
            return _farewell()
        try:
            textures = _load_textures(texture_dir, GAME_TEXTURES)
        except GameError:
            return EXIT_FAILURE
        renderer = Renderer(game, textures)
        screen = pygame.display.set_mode(renderer.size)
        pygame.display.set_caption(GAME_TITLE)
        return _play(game, screen, renderer)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: check the arguments, load the map, play."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        path = check_arguments(args)
        try:
            with open(path, "rb"):
                pass
        except OSError as exc:
            raise ArgumentError("Error : Map file is missing") from exc
        game = Game(load_map(path))
    except PathError as exc:
        sys.stderr.write(f"Error : {exc.message}\n")
        return EXIT_FAILURE
    except GameError as exc:
        sys.stdout.write(exc.report())
        return EXIT_FAILURE
    return run(game)


if __name__ == "__main__":
    sys.exit(main())