
"""Piece factory and the default kind randomizer"""
import random
from typing import Optional, Sequence
from tetris_piece import Piece, KINDS

class KindRandomizer:
    """Uniform kind draws with one reroll on a repeat.

    The opening kind is never S, Z or O when avoid_szo_first is set, since
    those leave an overhang on an empty floor.
    """
    AWKWARD_OPENERS = ("S", "Z", "O")

    def __init__(self, seed: Optional[int] = None, avoid_szo_first: bool = True,
                 kinds: Sequence[str] = tuple(KINDS)):
        self.rng = random.Random(seed)
        self.kinds = list(kinds)
        self.openers = [k for k in self.kinds if k not in self.AWKWARD_OPENERS] if avoid_szo_first else []
        self.last: Optional[str] = None

    def next_piece(self) -> str:
        if self.last is None and self.openers:
            kind = self.rng.choice(self.openers)
        else:
            kind = self.rng.choice(self.kinds)
            if kind == self.last:
                kind = self.rng.choice(self.kinds)
        self.last = kind
        return kind


class PieceFactory:
    """Zero-argument callable producing freshly spawned pieces.

    Any object with a ``next_piece() -> kind`` method can be the source, so the
    selection policy can be swapped without touching the board.
    """
    def __init__(self, source=None, tile_size: Optional[int]=None,
                 position: Optional[int]=None, depth: Optional[int]=None):
        self.source = source if source is not None else KindRandomizer()
        self.tile_size = tile_size
        self.position = position
        self.depth = depth

    def __call__(self) -> Piece:
        return Piece.spawn(self.source.next_piece(), tile_size=self.tile_size,
                           position=self.position, depth=self.depth)
