
"""Piece model, rotation tables, directions"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple
from tetris_config import CONFIG

Cell = Tuple[int, int]

# (x, y) offsets from the reference point, one list per rotation state
SHAPES: Dict[str, List[List[Cell]]] = {
    "I": [[(-1,0),(0,0),(1,0),(2,0)],
          [(0,-1),(0,0),(0,1),(0,2)]],
    "J": [[(-1,0),(0,0),(1,0),(1,1)],
          [(0,-1),(0,0),(0,1),(-1,1)],
          [(-1,-1),(-1,0),(0,0),(1,0)],
          [(1,-1),(0,-1),(0,0),(0,1)]],
    "L": [[(-1,0),(0,0),(1,0),(-1,1)],
          [(-1,-1),(0,-1),(0,0),(0,1)],
          [(1,-1),(-1,0),(0,0),(1,0)],
          [(0,-1),(0,0),(0,1),(1,1)]],
    "O": [[(0,0),(1,0),(0,1),(1,1)]],
    "S": [[(0,0),(1,0),(-1,1),(0,1)],
          [(0,-1),(0,0),(1,0),(1,1)]],
    "T": [[(-1,0),(0,0),(1,0),(0,1)],
          [(0,-1),(0,0),(0,1),(-1,0)],
          [(-1,0),(0,0),(1,0),(0,-1)],
          [(0,-1),(0,0),(0,1),(1,0)]],
    "Z": [[(-1,0),(0,0),(0,1),(1,1)],
          [(1,-1),(0,0),(1,0),(0,1)]],
}

KINDS = list(SHAPES)

COLORS: Dict[str, Tuple[int,int,int]] = {
    "I": (102,224,255),
    "J": (106,119,255),
    "L": (255,158,94),
    "O": (255,224,102),
    "S": (94,224,142),
    "T": (200,119,255),
    "Z": (255,102,119),
}


class Direction(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"
    CLOCKWISE = "clockwise"
    COUNTERCLOCKWISE = "counterclockwise"

    @classmethod
    def parse(cls, value) -> "Direction":
        """Accept a Direction or its name; anything else is a ValueError."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"unknown direction: {value!r}") from None


# (position, depth, orientation) deltas for one unit step
STEPS: Dict[Direction, Tuple[int,int,int]] = {
    Direction.LEFT: (-1, 0, 0),
    Direction.RIGHT: (1, 0, 0),
    Direction.DOWN: (0, 1, 0),
    Direction.CLOCKWISE: (0, 0, 1),
    Direction.COUNTERCLOCKWISE: (0, 0, -1),
}


@dataclass
class Piece:
    kind: str
    orientation: int = 0
    position: int = CONFIG["SPAWN_POSITION"]
    depth: int = CONFIG["SPAWN_DEPTH"]
    tile_size: int = CONFIG["TILE_SIZE"]

    def __post_init__(self):
        if self.kind not in SHAPES:
            raise ValueError(f"unknown piece kind: {self.kind!r}")
        self.orientation %= self.rotation_count

    @staticmethod
    def spawn(kind: str, tile_size: Optional[int] = None,
              position: Optional[int] = None, depth: Optional[int] = None) -> "Piece":
        return Piece(
            kind, 0,
            CONFIG["SPAWN_POSITION"] if position is None else position,
            CONFIG["SPAWN_DEPTH"] if depth is None else depth,
            CONFIG["TILE_SIZE"] if tile_size is None else tile_size,
        )

    @property
    def shape(self) -> List[List[Cell]]:
        return SHAPES[self.kind]

    @property
    def rotation_count(self) -> int:
        return len(SHAPES[self.kind])

    @property
    def color(self) -> Tuple[int,int,int]:
        return COLORS[self.kind]

    def cells(self, orientation: Optional[int] = None, position: Optional[int] = None,
              depth: Optional[int] = None) -> Tuple[Cell, ...]:
        """Absolute grid cells of the piece, by default in its current state.

        Used for both drawing and collision so the two can never disagree.
        """
        o = self.orientation if orientation is None else orientation
        px = self.position if position is None else position
        py = self.depth if depth is None else depth
        return tuple((px + x, py + y) for x, y in self.shape[o])

    def step(self, direction) -> Tuple[int,int,int]:
        """Candidate (position, depth, orientation) one step in direction."""
        dx, dy, dr = STEPS[Direction.parse(direction)]
        return (self.position + dx, self.depth + dy,
                (self.orientation + dr) % self.rotation_count)
