# minesweeper

A classic Minesweeper game in a pygame window. Uncover every tile that does
not hide a mine; a number on an uncovered tile tells how many of its eight
neighbours hold one.

## Installing

```
pip install .
```

## Playing

```
minesweeper
```

By default the game looks for its `images/` and `boards/` folders in the
current directory. Point it elsewhere with `--root`:

```
minesweeper --root path/to/game/files
```

The board size and mine count come from `boards/config.cfg`, whose first
three lines are the width in tiles, the height in tiles and the number of
mines. A file with fewer than three lines is rejected with a `ValueError`.

The window is `width × 32` pixels wide and `height × 32 + 88` pixels tall;
the strip below the grid holds the mine counter and the buttons.

### Controls

- **Left click** a hidden tile to uncover it. A tile with no neighbouring
  mines opens its surroundings, spreading through the whole empty region.
  Flagged tiles are not opened. Clicking a mine ends the game and reveals
  every mine; uncovering every safe tile wins.
- **Right click** a hidden tile to place a flag, or a flagged tile to remove
  it. Flags cannot be changed once the game is over.
- **Face button** starts a new random game with the configured size.
- **Debug button** shows or hides every mine. It does nothing once the game
  is over.
- **Test buttons 1–3** load the fixed layouts `boards/testboard1.brd`,
  `boards/testboard2.brd` and `boards/testboard3.brd` on a 25×16 board. Every
  digit character in the file is one cell, row after row, and `1` marks a
  mine; other characters (such as line breaks) are skipped. A missing file
  gives a board with no mines.

The counter in the lower left shows mines left to flag: the mine count less
the number of flags placed. It shows three digits and a minus sign when more
flags are placed than there are mines. On a win it drops to zero.

### Images

Every texture is loaded from `images/<name>.png` at start-up, and a missing
one stops the game with `FileNotFoundError`: `tile_hidden`, `tile_revealed`,
`mine`, `flag`, `debug`, `test_1`, `test_2`, `test_3`, `face_happy`,
`face_lose`, `face_win`, `digits` and `number_1` to `number_8`. The `digits`
image is a strip of 21×32 glyphs: `0` to `9` followed by a minus sign.

## Using the library

The game logic does not need a window:

```python
from minesweeper.game import Game

game = Game(9, 9, 10)
action = game.left_click(16, 16)   # a ClickAction
print(game.counter())              # (False, (0, 1, 0))
```

- `minesweeper.game.Game` keeps a round of play: `left_click(x, y)` and
  `right_click(x, y)` take pixel positions, `tile_layers(index)` gives the
  texture names to draw for a tile, `button_positions()` the top-left pixel
  of each button, and `counter()` the sign and digits of the mine counter.
  `Game.from_layout(layout)` starts a 25×16 round from a sequence of
  `'0'`/`'1'` characters. `left_click` returns a `ClickAction` telling the
  caller whether a button asked for a reset, a test board or the debug view.
- `minesweeper.board.Board` holds the tiles: `neighbors(index)`,
  `reveal(index)` (flood-fill uncovering, returning the indices opened),
  `reveal_tile(index)`, `index_at(x, y)` and `tiles_to_uncover`.
  `Board.from_layout(layout)` builds a fixed 25×16 board.
- `minesweeper.tile.Tile` is one cell: `is_mine`, `is_flag`, `is_hidden`
  and `neighbor_mines`.
- `minesweeper.rng` is the shared random source for mine placement;
  `rng.seed(value)` makes boards reproducible.
- `minesweeper.textures.TextureCache` loads and caches images by name, and
  `digit_rect(num)` gives the area of a glyph in the `digits` strip.
- `minesweeper.app` has `read_config(path)`, `read_test_board(path)`,
  `draw(screen, game, textures)` and `main(argv)`.

## Running the tests

```
pip install .[test]
pytest
```