"""A single cell of the minefield."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Tile:
    """State of one field cell: mine, flag, visibility and neighbouring mine count."""

    is_mine: bool = False
    is_flag: bool = False
    is_hidden: bool = True
    neighbor_mines: int = 0

    def reset(self) -> None:
        """Return the tile to a fresh, hidden, empty state."""
        self.is_mine = False
        self.is_flag = False
        self.is_hidden = True
        self.neighbor_mines = 0