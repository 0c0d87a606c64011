import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from tetris_board import GameBoard
from tetris_piece import Piece


class RecordingSurface:
    """Stands in for a drawing surface; keeps what is currently drawn."""

    def __init__(self):
        self.clears = 0
        self.tiles = []

    def clear(self):
        self.clears += 1
        self.tiles = []

    def render_tile(self, tile):
        self.tiles.append(tile)


class KindFactory:
    """Spawns pieces of the given kinds in turn, repeating the last one."""

    def __init__(self, *kinds, tile_size=40):
        self.kinds = list(kinds) or ["O"]
        self.tile_size = tile_size
        self.made = []

    def __call__(self):
        kind = self.kinds.pop(0) if len(self.kinds) > 1 else self.kinds[0]
        piece = Piece.spawn(kind, tile_size=self.tile_size, position=5, depth=-1)
        self.made.append(piece)
        return piece


@pytest.fixture
def surfaces():
    return RecordingSurface(), RecordingSurface()


@pytest.fixture
def make_board(surfaces):
    def make(*kinds):
        board_surface, piece_surface = surfaces
        return GameBoard(board_surface, piece_surface, width=480, height=600, tile_size=40,
                         normal_speed=700, soft_drop_speed=70,
                         piece_factory=KindFactory(*kinds))
    return make


@pytest.fixture
def board(make_board):
    """A started 12x15 board spawning O pieces at position 5, depth -1."""
    b = make_board("O")
    b.start_game()
    return b
