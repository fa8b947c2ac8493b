"""The minefield: tile grid, mine placement, neighbour counts and flood reveal."""

from __future__ import annotations

from typing import Iterable

from minesweeper import rng
from minesweeper.tile import Tile

TILE_SIZE = 32
DEFAULT_WIDTH = 25
DEFAULT_HEIGHT = 16
DEFAULT_MINES = 50

# Neighbour offsets (row, column) in the order they are visited.
_OFFSETS = (
    (-1, 0),   # top
    (-1, -1),  # top left
    (-1, 1),   # top right
    (1, 0),    # bottom
    (1, -1),   # bottom left
    (1, 1),    # bottom right
    (0, -1),   # left
    (0, 1),    # right
)


class Board:
    """A width x height grid of tiles stored row by row."""

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        mines: int = DEFAULT_MINES,
    ) -> None:
        self._setup(width, height, mines)
        self.place_random_mines()
        self.count_neighbor_mines()

    def _setup(self, width: int, height: int, mines: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"board size must be positive, got {width}x{height}")
        if mines < 0 or mines > width * height:
            raise ValueError(f"cannot place {mines} mines on {width * height} tiles")
        self.width = width
        self.height = height
        self.mines = mines
        self.tiles_to_uncover = width * height - mines
        self.tiles = [Tile() for _ in range(width * height)]

    @classmethod
    def from_layout(cls, layout: Iterable[str]) -> "Board":
        """Build a default-sized board whose mines are the '1' characters of layout."""
        cells = list(layout)
        size = DEFAULT_WIDTH * DEFAULT_HEIGHT
        if len(cells) > size:
            raise ValueError(f"layout has {len(cells)} cells, board holds {size}")
        board = cls.__new__(cls)
        board._setup(DEFAULT_WIDTH, DEFAULT_HEIGHT, sum(1 for c in cells if c == "1"))
        for tile, cell in zip(board.tiles, cells):
            tile.is_mine = cell == "1"
        board.count_neighbor_mines()
        return board

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.tiles):
            raise IndexError(f"tile index {index} out of range")

    def neighbors(self, index: int) -> list[int]:
        """Indices of the tiles surrounding index, clipped at the edges."""
        self._check_index(index)
        row, column = divmod(index, self.width)
        result = []
        for d_row, d_col in _OFFSETS:
            r, c = row + d_row, column + d_col
            if 0 <= r < self.height and 0 <= c < self.width:
                result.append(r * self.width + c)
        return result

    def place_random_mines(self) -> None:
        """Scatter mines, sweeping the grid with a 1-in-26 chance per free tile."""
        placed = sum(tile.is_mine for tile in self.tiles)
        while placed < self.mines:
            for tile in self.tiles:
                if not tile.is_mine and rng.random_int(0, 25) == 1:
                    tile.is_mine = True
                    placed += 1
                if placed == self.mines:
                    break

    def count_neighbor_mines(self) -> None:
        """Store for every tile the number of mines around it."""
        for index, tile in enumerate(self.tiles):
            tile.neighbor_mines = sum(self.tiles[n].is_mine for n in self.neighbors(index))

    def reveal_tile(self, index: int) -> bool:
        """Uncover a single hidden tile; return True if it was hidden."""
        self._check_index(index)
        tile = self.tiles[index]
        if not tile.is_hidden:
            return False
        tile.is_hidden = False
        if not tile.is_mine:
            self.tiles_to_uncover -= 1
        return True

    def _can_open(self, index: int) -> bool:
        tile = self.tiles[index]
        return tile.is_hidden and not tile.is_mine and not tile.is_flag

    def reveal(self, index: int) -> list[int]:
        """Uncover a safe tile, spreading through empty regions; return uncovered indices."""
        self._check_index(index)
        revealed: list[int] = []
        if not self._can_open(index):
            return revealed
        stack = [index]
        while stack:
            current = stack.pop()
            if not self._can_open(current):
                continue
            self.reveal_tile(current)
            revealed.append(current)
            if self.tiles[current].neighbor_mines == 0:
                stack.extend(n for n in self.neighbors(current) if self._can_open(n))
        return revealed

    def index_at(self, x: float, y: float) -> int | None:
        """Index of the tile under pixel (x, y), or None outside the grid."""
        if x < 0 or y < 0:
            return None
        column, row = int(x // TILE_SIZE), int(y // TILE_SIZE)
        if column >= self.width or row >= self.height:
            return None
        return row * self.width + column