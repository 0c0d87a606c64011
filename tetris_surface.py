
"""Drawing contract between the board and whatever renders it"""
from dataclasses import dataclass
from typing import Protocol, Tuple

Color = Tuple[int,int,int]

@dataclass(frozen=True)
class Tile:
    x: int
    y: int
    size: int
    color: Color

class Surface(Protocol):
    """Anything the board can draw on. Grid x/y times size gives pixels."""
    def clear(self) -> None: ...
    def render_tile(self, tile: Tile) -> None: ...
