"""A Minesweeper game: tiles, board logic, game rules and a pygame front end."""

__version__ = "1.0.0"
__all__ = ["tile", "rng", "board", "textures", "game", "app"]