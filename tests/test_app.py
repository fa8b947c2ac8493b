import pygame
import pytest

from minesweeper.app import BAR_HEIGHT, draw, read_config, read_test_board
from minesweeper.board import DEFAULT_HEIGHT, DEFAULT_WIDTH, TILE_SIZE
from minesweeper.game import Game
from minesweeper.textures import TEXTURE_NAMES, TextureCache

_LARGE = {"debug", "test_1", "test_2", "test_3", "face_happy", "face_lose", "face_win"}


def _color(position):
    return (position * 10 % 256, 100, 200)


@pytest.fixture
def textures(tmp_path):
    for position, name in enumerate(TEXTURE_NAMES):
        if name == "digits":
            size = (11 * 21, 32)
        elif name in _LARGE:
            size = (64, 64)
        else:
            size = (32, 32)
        surface = pygame.Surface(size)
        surface.fill(_color(position))
        pygame.image.save(surface, str(tmp_path / f"{name}.png"))
    return TextureCache(tmp_path)


def _pixel(surface, xy):
    return tuple(surface.get_at(xy))[:3]


def test_read_config(tmp_path):
    path = tmp_path / "config.cfg"
    path.write_text("25\n16\n50\n", encoding="utf-8")
    assert read_config(path) == (25, 16, 50)


def test_read_config_too_short(tmp_path):
    path = tmp_path / "config.cfg"
    path.write_text("25\n16\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_config(path)


def test_read_config_not_a_number(tmp_path):
    path = tmp_path / "config.cfg"
    path.write_text("wide\n16\n50\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_config(path)


def test_read_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_config(tmp_path / "absent.cfg")


def test_read_test_board_skips_line_breaks(tmp_path):
    path = tmp_path / "board.brd"
    path.write_text("1010\n0101\n", encoding="utf-8")
    assert read_test_board(path) == ["1", "0", "1", "0", "0", "1", "0", "1"]


def test_read_test_board_round_trips_into_game(tmp_path):
    rows = ["0" * DEFAULT_WIDTH for _ in range(DEFAULT_HEIGHT)]
    rows[0] = "1" + rows[0][1:]
    path = tmp_path / "board.brd"
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")
    cells = read_test_board(path)
    assert len(cells) == DEFAULT_WIDTH * DEFAULT_HEIGHT
    game = Game.from_layout(cells)
    assert game.mines == 1
    assert game.board.tiles[0].is_mine


def test_read_test_board_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_test_board(tmp_path / "absent.brd")


def test_draw_paints_tiles_and_face(textures):
    cells = ["0"] * (DEFAULT_WIDTH * DEFAULT_HEIGHT)
    cells[0] = "1"
    game = Game.from_layout(cells)
    game.left_click(TILE_SIZE + 5, 5)

    screen = pygame.Surface((DEFAULT_WIDTH * TILE_SIZE, DEFAULT_HEIGHT * TILE_SIZE + BAR_HEIGHT))
    draw(screen, game, textures)

    hidden = _color(TEXTURE_NAMES.index("tile_hidden"))
    number = _color(TEXTURE_NAMES.index("number_1"))
    face = _color(TEXTURE_NAMES.index("face_happy"))
    assert _pixel(screen, (5, 5)) == hidden
    assert _pixel(screen, (TILE_SIZE + 5, 5)) == number
    fx, fy = game.button_positions()["face"]
    assert _pixel(screen, (fx + 5, fy + 5)) == face


def test_draw_shows_losing_face(textures):
    cells = ["0"] * (DEFAULT_WIDTH * DEFAULT_HEIGHT)
    cells[0] = "1"
    game = Game.from_layout(cells)
    game.left_click(5, 5)

    screen = pygame.Surface((DEFAULT_WIDTH * TILE_SIZE, DEFAULT_HEIGHT * TILE_SIZE + BAR_HEIGHT))
    draw(screen, game, textures)

    fx, fy = game.button_positions()["face"]
    assert _pixel(screen, (fx + 5, fy + 5)) == _color(TEXTURE_NAMES.index("face_lose"))
    assert _pixel(screen, (5, 5)) == _color(TEXTURE_NAMES.index("mine"))