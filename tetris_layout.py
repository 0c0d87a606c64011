# tetris_layout.py
from dataclasses import dataclass
from typing import Optional
from tetris_config import CONFIG

@dataclass
class Dims:
    cell: int
    columns: int
    rows: int
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int

def grid_extent(width: int, height: int, cell: int):
    """Columns and rows a width x height pixel board holds."""
    if cell <= 0:
        raise ValueError(f"tile size must be positive, got {cell}")
    return width // cell, height // cell

def compute_dims(width: Optional[int] = None, height: Optional[int] = None,
                 cell: Optional[int] = None) -> Dims:
    width = int(CONFIG["BOARD_WIDTH"]) if width is None else width
    height = int(CONFIG["BOARD_HEIGHT"]) if height is None else height
    cell = int(CONFIG["TILE_SIZE"]) if cell is None else cell
    margin = int(CONFIG["MARGIN"])
    panel_w = int(CONFIG["PANEL_W"])

    columns, rows = grid_extent(width, height, cell)
    board_w = columns * cell
    board_h = rows * cell

    total_w = margin + board_w + margin + panel_w + margin
    total_h = margin + board_h + margin

    board_x = margin
    board_y = margin
    panel_x = board_x + board_w + margin
    panel_y = margin

    return Dims(
        cell=cell, columns=columns, rows=rows, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=board_x, board_y=board_y,
        panel_x=panel_x, panel_y=panel_y
    )
