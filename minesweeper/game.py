"""Game rules on top of a board: clicks, flags, win/loss and the mine counter."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable

from minesweeper.board import (
    DEFAULT_HEIGHT,
    DEFAULT_MINES,
    DEFAULT_WIDTH,
    TILE_SIZE,
    Board,
)

BUTTON_SIZE = 64

# Horizontal offsets (in tiles) of the buttons from the middle of the bottom bar.
_BUTTON_OFFSETS = {
    "face": 0,
    "debug": 4,
    "test_1": 6,
    "test_2": 8,
    "test_3": 10,
}


class ClickAction(IntEnum):
    """What the caller must do after a left click."""

    NONE = 0
    TEST_1 = 1
    TEST_2 = 2
    TEST_3 = 3
    RESET = 4
    DEBUG = 5


_BUTTON_ACTIONS = {
    "face": ClickAction.RESET,
    "test_1": ClickAction.TEST_1,
    "test_2": ClickAction.TEST_2,
    "test_3": ClickAction.TEST_3,
}


def counter_digits(value: int) -> tuple[bool, tuple[int, int, int]]:
    """Split a mine count into a sign flag and the three digits the counter shows."""
    text = str(abs(value)).zfill(3)[:3]
    return value < 0, (int(text[0]), int(text[1]), int(text[2]))


class Game:
    """One round of play: a board plus flags, debug view and the outcome."""

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        mines: int = DEFAULT_MINES,
    ) -> None:
        self._start(Board(width, height, mines))

    @classmethod
    def from_layout(cls, layout: Iterable[str]) -> "Game":
        """Start a round on a default-sized board whose mines are the '1' cells of layout."""
        game = cls.__new__(cls)
        game._start(Board.from_layout(layout))
        return game

    def _start(self, board: Board) -> None:
        self.board = board
        self.width = board.width
        self.height = board.height
        self.mines = board.mines
        self.mines_to_flag = board.mines
        self.debug_mode = False
        self.game_over = False
        self.lost = False
        self.won = False
        self.face = "face_happy"

    def button_positions(self) -> dict[str, tuple[int, int]]:
        """Top-left pixel of each button in the bar below the grid."""
        top = self.height * TILE_SIZE
        middle = (self.width // 2) * TILE_SIZE
        return {
            name: (middle + offset * TILE_SIZE, top)
            for name, offset in _BUTTON_OFFSETS.items()
        }

    def _button_at(self, x: float, y: float) -> str | None:
        for name, (bx, by) in self.button_positions().items():
            if bx <= x < bx + BUTTON_SIZE and by <= y < by + BUTTON_SIZE:
                return name
        return None

    def left_click(self, x: float, y: float) -> ClickAction:
        """Open the tile under (x, y) or press a button; return the requested action."""
        if not self.game_over:
            index = self.board.index_at(x, y)
            if index is not None:
                tile = self.board.tiles[index]
                if tile.is_flag:
                    return ClickAction.NONE
                if tile.is_hidden:
                    if tile.is_mine:
                        self._lose()
                    else:
                        self.board.reveal(index)
                        if self.board.tiles_to_uncover == 0:
                            self._win()
                    return ClickAction.NONE

        button = self._button_at(x, y)
        if button == "debug":
            if self.game_over:
                return ClickAction.NONE
            self.debug_mode = not self.debug_mode
            return ClickAction.DEBUG
        return _BUTTON_ACTIONS.get(button, ClickAction.NONE)

    def right_click(self, x: float, y: float) -> None:
        """Toggle the flag on the hidden tile under (x, y)."""
        if self.game_over:
            return
        index = self.board.index_at(x, y)
        if index is None:
            return
        tile = self.board.tiles[index]
        if tile.is_flag:
            tile.is_flag = False
            self.mines_to_flag += 1
        elif tile.is_hidden:
            tile.is_flag = True
            self.mines_to_flag -= 1

    def _lose(self) -> None:
        self.lost = True
        self.game_over = True
        self.face = "face_lose"
        for index, tile in enumerate(self.board.tiles):
            if tile.is_mine:
                self.board.reveal_tile(index)

    def _win(self) -> None:
        self.won = True
        self.game_over = True
        self.face = "face_win"
        self.mines_to_flag = 0

    def tile_layers(self, index: int) -> tuple[str, ...]:
        """Texture names to draw for a tile, bottom layer first."""
        tile = self.board.tiles[index]
        if tile.is_hidden:
            layers = ["tile_hidden"]
            if tile.is_flag or (self.won and tile.is_mine):
                layers.append("flag")
            if self.debug_mode and tile.is_mine:
                layers.append("mine")
            return tuple(layers)

        if tile.is_mine:
            if tile.is_flag:
                return ("tile_revealed", "flag", "mine")
            return ("tile_revealed", "mine")
        if tile.neighbor_mines:
            return ("tile_revealed", f"number_{tile.neighbor_mines}")
        return ("tile_revealed",)

    def counter(self) -> tuple[bool, tuple[int, int, int]]:
        """Sign and digits of the remaining-mines counter."""
        return counter_digits(self.mines_to_flag)