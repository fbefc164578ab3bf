import pygame
import pytest

from berquest.app import GAME_TEXTURES, Renderer, check_arguments, main
from berquest.errors import ArgumentError
from berquest.game import Direction, Game
from berquest.mapfile import parse_map

MAP_TEXT = "11111\n1P0C1\n100E1\n11111\n"

COLOURS = {
    "wall": (10, 20, 30),
    "floor": (40, 50, 60),
    "collectible": (70, 80, 90),
    "exit": (100, 110, 120),
    "player": (130, 140, 150),
    "player_up": (160, 170, 180),
    "player_down": (190, 200, 210),
    "player_left": (220, 230, 240),
    "player_right": (250, 5, 15),
}


def _textures():
    textures = {}
    for name, colour in COLOURS.items():
        surface = pygame.Surface((32, 32))
        surface.fill(colour)
        textures[name] = surface
    return textures


def _pixel(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


@pytest.fixture
def renderer():
    game = Game(parse_map(MAP_TEXT))
    return Renderer(game, _textures())


def test_check_arguments_accepts_ber():
    assert check_arguments(["maps/level.ber"]) == "maps/level.ber"


@pytest.mark.parametrize(
    "argv, message",
    [
        ([], "Arguments : Map file is missing"),
        (["a.ber", "b.ber"], "Arguments : Too many arguments"),
        (["level.txt"], "Arguments : Map file is not a .ber file"),
    ],
)
def test_check_arguments_errors(argv, message):
    with pytest.raises(ArgumentError) as info:
        check_arguments(argv)
    assert info.value.message == message


def test_main_too_many_arguments(capsys):
    assert main(["a.ber", "b.ber"]) == 1
    assert "Too many arguments" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.ber")]) == 1
    assert "Map file is missing" in capsys.readouterr().out


def test_main_invalid_map(tmp_path, capsys):
    path = tmp_path / "plain.ber"
    path.write_text("11111\n1P0E1\n11111\n")
    assert main([str(path)]) == 1
    out = capsys.readouterr().out
    assert "Error" in out
    assert "There must be at least one collectible" in out


def test_main_unreachable_map(tmp_path, capsys):
    path = tmp_path / "closed.ber"
    path.write_text("1111111\n1P01CE1\n1111111\n")
    assert main([str(path)]) == 1
    assert "Error : No valid path" in capsys.readouterr().err


def test_renderer_requires_all_textures():
    game = Game(parse_map(MAP_TEXT))
    textures = _textures()
    del textures["exit"]
    with pytest.raises(ValueError):
        Renderer(game, textures)


def test_renderer_size(renderer):
    width, height = renderer.size
    assert width == renderer.game.map.width * 32
    assert height == renderer.game.map.height * 32
    assert set(GAME_TEXTURES) == set(COLOURS)


def test_draw_tiles_and_player(renderer):
    surface = pygame.Surface(renderer.size)
    renderer.draw(surface)
    game_map = renderer.game.map
    right, bottom = game_map.width - 1, game_map.height - 1
    assert _pixel(surface, right * 32 + 31, bottom * 32 + 31) == COLOURS["wall"]
    assert _pixel(surface, 2 * 32 + 31, 2 * 32 + 31) == COLOURS["floor"]
    assert _pixel(surface, 3 * 32 + 31, 2 * 32 + 31) == COLOURS["exit"]
    assert _pixel(surface, 3 * 32 + 31, 1 * 32 + 31) == COLOURS["collectible"]
    px, py = renderer.game.position
    assert _pixel(surface, px * 32 + 28, py * 32 + 28) == COLOURS["player"]


def test_draw_after_move_uses_facing_sprite(renderer):
    start = renderer.game.position
    renderer.game.move(Direction.RIGHT)
    surface = pygame.Surface(renderer.size)
    renderer.draw(surface)
    px, py = renderer.game.position
    assert _pixel(surface, px * 32 + 30, py * 32 + 30) == COLOURS["player_right"]
    assert _pixel(surface, start[0] * 32 + 28, start[1] * 32 + 28) == COLOURS["floor"]