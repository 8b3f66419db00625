import random

import pytest

from bomberman.board import (
    BOMB_FUSE,
    EXPLOSION_DURATION,
    Board,
    Tile,
)


class _FixedRng:
    """Deterministic stand-in: constant random(), first element for choice()."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value

    def choice(self, seq):
        return seq[0]


def _open_board(width=5, height=5):
    return Board(width, height, rng=_FixedRng(0.99))


def test_border_and_pillars_are_walls():
    board = Board(13, 11, rng=random.Random(7))
    for y in range(board.height):
        for x in range(board.width):
            tile = board.grid[y][x]
            on_border = x in (0, 12) or y in (0, 10)
            pillar = x % 2 == 0 and y % 2 == 0
            if on_border or pillar:
                assert tile is Tile.WALL
            else:
                assert tile in (Tile.EMPTY, Tile.BREAKABLE)


def test_low_roll_makes_inner_tiles_breakable():
    board = Board(5, 5, rng=_FixedRng(0.0))
    assert board.grid[1][1] is Tile.BREAKABLE
    assert board.grid[2][2] is Tile.WALL
    assert board.add_player("a") is None
    assert board.players == {}


def test_str_renders_rows():
    board = _open_board()
    text = str(board)
    assert text.splitlines()[0] == "#####"
    assert text.splitlines()[2] == "# # #"
    assert text.endswith("\n")
    assert len(text.splitlines()) == board.height


def test_first_player_uses_random_choice():
    board = _open_board()
    player = board.add_player("a")
    assert (player.x, player.y) == (1, 1)
    assert board.grid[1][1] is Tile.PLAYER
    assert board.players["a"] is player


def test_second_player_maximises_distance():
    board = _open_board()
    board.add_player("a")
    second = board.add_player("b")
    assert (second.x, second.y) == (3, 3)
    assert board.grid[3][3] is Tile.PLAYER


def test_spawn_distance_is_maximal():
    board = Board(13, 11, rng=random.Random(3))
    board.add_player("a")
    free = [
        (x, y)
        for y in range(board.height)
        for x in range(board.width)
        if board.grid[y][x] is Tile.EMPTY
    ]
    first = board.players["a"]
    best = max(abs(x - first.x) + abs(y - first.y) for x, y in free)
    second = board.add_player("b")
    assert abs(second.x - first.x) + abs(second.y - first.y) == best


def test_move_into_empty_and_wall():
    board = _open_board()
    board.add_player("a")
    assert board.move_player("a", 1, 0) is True
    assert board.grid[1][1] is Tile.EMPTY
    assert board.grid[1][2] is Tile.PLAYER
    assert board.move_player("a", 0, -1) is False
    assert board.move_player("a", 0, 1) is False  # pillar at (2, 2)
    assert (board.players["a"].x, board.players["a"].y) == (2, 1)


def test_move_unknown_player():
    board = _open_board()
    assert board.move_player("ghost", 1, 0) is False


def test_move_out_of_bounds():
    board = Board(3, 3, rng=_FixedRng(0.99))
    board.add_player("a")
    assert board.move_player("a", 5, 0) is False


def test_remove_player_frees_tile():
    board = _open_board()
    board.add_player("a")
    board.remove_player("a")
    assert board.grid[1][1] is Tile.EMPTY
    assert "a" not in board.players
    board.remove_player("a")
    assert board.grid[1][1] is Tile.EMPTY


def test_plant_bomb_once_per_tile():
    board = _open_board()
    board.add_player("a")
    board.plant_bomb("a", now=0.0)
    board.plant_bomb("a", now=0.5)
    assert len(board.bombs) == 1
    assert board.grid[1][1] is Tile.BOMB
    assert board.bombs[0].owner_id == "a"
    board.plant_bomb("ghost", now=0.0)
    assert len(board.bombs) == 1


def test_bomb_stays_when_owner_walks_away():
    board = _open_board()
    board.add_player("a")
    board.plant_bomb("a", now=0.0)
    assert board.move_player("a", 1, 0) is True
    assert board.grid[1][1] is Tile.BOMB
    assert board.move_player("a", -1, 0) is False


def test_bomb_explodes_after_fuse_and_clears():
    board = _open_board()
    board.add_player("a")
    board.plant_bomb("a", now=0.0)

    destroyed, changed = board.tick(now=BOMB_FUSE - 0.1)
    assert destroyed == []
    assert changed is False

    destroyed, changed = board.tick(now=BOMB_FUSE)
    assert destroyed == ["a"]
    assert changed is True
    assert board.bombs == []
    assert board.players == {}
    assert board.grid[1][1] is Tile.EXPLOSION
    assert board.grid[1][2] is Tile.EXPLOSION
    assert board.grid[2][1] is Tile.EXPLOSION
    assert board.grid[0][1] is Tile.WALL
    assert board.grid[1][0] is Tile.WALL
    assert len(board.explosions) == 3

    destroyed, changed = board.tick(now=BOMB_FUSE + EXPLOSION_DURATION)
    assert destroyed == []
    assert changed is True
    assert board.explosions == []
    assert board.grid[1][1] is Tile.EMPTY
    assert board.grid[1][2] is Tile.EMPTY


def test_blast_spares_player_out_of_range():
    board = _open_board()
    board.add_player("a")
    board.add_player("b")
    board.plant_bomb("a", now=0.0)
    destroyed, _ = board.tick(now=BOMB_FUSE)
    assert destroyed == ["a"]
    assert list(board.players) == ["b"]


def test_blast_destroys_breakable_block():
    board = Board(5, 5, rng=_FixedRng(0.0))
    for x, y in [(1, 1)]:
        board.grid[y][x] = Tile.EMPTY
    board.add_player("a")
    board.plant_bomb("a", now=0.0)
    board.tick(now=BOMB_FUSE)
    assert board.grid[1][2] is Tile.EXPLOSION
    board.tick(now=BOMB_FUSE + EXPLOSION_DURATION)
    assert board.grid[1][2] is Tile.EMPTY
    assert board.grid[1][3] is Tile.BREAKABLE


@pytest.mark.parametrize("width,height", [(5, 5), (13, 11), (7, 9)])
def test_dimensions(width, height):
    board = Board(width, height, rng=random.Random(1))
    assert len(board.grid) == height
    assert all(len(row) == width for row in board.grid)