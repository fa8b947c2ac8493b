from minesweeper.tile import Tile


def test_new_tile_is_hidden_and_empty():
    tile = Tile()
    assert tile.is_hidden is True
    assert tile.is_mine is False
    assert tile.is_flag is False
    assert tile.neighbor_mines == 0


def test_reset_restores_defaults():
    tile = Tile(is_mine=True, is_flag=True, is_hidden=False, neighbor_mines=3)
    tile.reset()
    assert tile == Tile()


def test_fields_are_independent_between_tiles():
    first = Tile()
    second = Tile()
    first.is_flag = True
    assert second.is_flag is False