"""Window, drawing and the event loop of the game."""

from __future__ import annotations

import argparse
import os
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from minesweeper.board import TILE_SIZE  # noqa: E402
from minesweeper.game import ClickAction, Game  # noqa: E402
from minesweeper.textures import (  # noqa: E402
    DIGIT_WIDTH,
    MINUS_SIGN,
    TEXTURE_NAMES,
    TextureCache,
    digit_rect,
)

BAR_HEIGHT = 88
BACKGROUND = (255, 255, 255)

_TEST_BOARDS = {
    ClickAction.TEST_1: "testboard1.brd",
    ClickAction.TEST_2: "testboard2.brd",
    ClickAction.TEST_3: "testboard3.brd",
}


def read_config(path: str | os.PathLike[str]) -> tuple[int, int, int]:
    """Read width, height and mine count from the first three lines of a config file."""
    with open(path, encoding="utf-8") as handle:
        lines = [line.strip() for line in handle]
    if len(lines) < 3:
        raise ValueError(f"{path}: expected width, height and mine count lines")
    width, height, mines = (int(value) for value in lines[:3])
    return width, height, mines


def read_test_board(path: str | os.PathLike[str]) -> list[str]:
    """Read a board layout file as its digit characters, row after row."""
    with open(path, encoding="utf-8") as handle:
        return [char for char in handle.read() if char.isdigit()]


def draw(screen: pygame.Surface, game: Game, textures: TextureCache) -> None:
    """Paint tiles, buttons and the mine counter of game onto screen."""
    for index in range(len(game.board.tiles)):
        row, column = divmod(index, game.width)
        position = (column * TILE_SIZE, row * TILE_SIZE)
        for name in game.tile_layers(index):
            screen.blit(textures.get(name), position)

    for name, position in game.button_positions().items():
        texture = game.face if name == "face" else name
        screen.blit(textures.get(texture), position)

    top = game.height * TILE_SIZE
    digits = textures.get("digits")
    negative, values = game.counter()
    for place, value in enumerate(values, start=1):
        screen.blit(digits, (place * DIGIT_WIDTH, top), digit_rect(value))
    if negative:
        screen.blit(digits, (0, top), digit_rect(MINUS_SIGN))


def _load_test_game(path: Path) -> Game:
    try:
        cells = read_test_board(path)
    except FileNotFoundError:
        cells = []
    return Game.from_layout(cells)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="minesweeper", description="Play Minesweeper.")
    parser.add_argument(
        "--root",
        type=Path,
        default=Path("."),
        help="directory holding the images/ and boards/ folders",
    )
    args = parser.parse_args(argv)

    boards = args.root / "boards"
    width, height, mines = read_config(boards / "config.cfg")

    pygame.init()
    try:
        screen = pygame.display.set_mode((width * TILE_SIZE, height * TILE_SIZE + BAR_HEIGHT))
        pygame.display.set_caption("Minesweeper")
        textures = TextureCache(args.root / "images")
        for name in TEXTURE_NAMES:
            textures.load(name)

        game = Game(width, height, mines)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    x, y = event.pos
                    if event.button == 1:
                        action = game.left_click(x, y)
                        if action in _TEST_BOARDS:
                            game = _load_test_game(boards / _TEST_BOARDS[action])
                        elif action is ClickAction.RESET:
                            game = Game(width, height, mines)
                    elif event.button == 3:
                        game.right_click(x, y)

            screen.fill(BACKGROUND)
            draw(screen, game, textures)
            pygame.display.flip()
            clock.tick(60)
        textures.clear()
    finally:
        pygame.quit()
    return 0