
"""
Rendering helpers for the Tetris project.

- Canvas: a pygame-backed tetris_surface.Surface. Tile sprites are
  pre-rendered per size and color and blitted.
- RenderAssets: static background (grid + panel frame) and cached HUD text.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Tuple, List, Optional
from tetris_layout import Dims
from tetris_surface import Color, Tile


def _shade(col: Color, f: float) -> Color:
    return tuple(max(0, min(255, int(c * f))) for c in col)


class Canvas:
    """Draws tiles onto a pygame Surface; grid coordinates times size are pixels."""
    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self._sprites: Dict[Tuple[int, Color], pygame.Surface] = {}

    def clear(self):
        self.surface.fill((0,0,0,0))

    def render_tile(self, tile: Tile):
        sprite = self._sprite(tile.size, tuple(tile.color))
        self.surface.blit(sprite, (tile.x * tile.size, tile.y * tile.size))

    def _sprite(self, size: int, col: Color) -> pygame.Surface:
        key = (size, col)
        s = self._sprites.get(key)
        if s is None:
            s = pygame.Surface((size, size))
            s.fill(col)
            # bevel: light top/left, dark bottom/right
            edge = max(1, size // 10)
            pygame.draw.rect(s, _shade(col, 1.35), (0, 0, size, edge))
            pygame.draw.rect(s, _shade(col, 1.35), (0, 0, edge, size))
            pygame.draw.rect(s, _shade(col, 0.6), (0, size-edge, size, edge))
            pygame.draw.rect(s, _shade(col, 0.6), (size-edge, 0, edge, size))
            self._sprites[key] = s
        return s


@dataclass
class HudCache:
    status: str = ""
    speed: int = -1
    blocks: int = -1
    title: Optional[pygame.Surface] = None
    status_s: Optional[pygame.Surface] = None
    speed_s: Optional[pygame.Surface] = None
    blocks_s: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets:
    """Holds the pre-rendered background and HUD text."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self._make_static()
        self.hud = HudCache()

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for x in range(d.columns+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(d.rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)

    def redraw_static(self, screen: pygame.Surface):
        screen.blit(self.bg, (0,0))

    def blit_layers(self, screen: pygame.Surface, layers: List[pygame.Surface]):
        """Blit board-sized layers (stack, then active piece) at the board origin."""
        for layer in layers:
            screen.blit(layer, (self.dims.board_x, self.dims.board_y))

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, status: str, speed: int, blocks: int):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Tetris", True, (197,202,233))
        if status != self.hud.status:
            self.hud.status = status
            self.hud.status_s = f.render(status, True, (200,210,240))
        if speed != self.hud.speed:
            self.hud.speed = speed
            self.hud.speed_s = f.render(f"Tick: {speed} ms", True, (200,210,240))
        if blocks != self.hud.blocks:
            self.hud.blocks = blocks
            self.hud.blocks_s = f.render(f"Blocks: {blocks}", True, (200,210,240))
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        if self.hud.status_s: screen.blit(self.hud.status_s, (d.panel_x + 12, d.panel_y + 44))
        if self.hud.speed_s: screen.blit(self.hud.speed_s, (d.panel_x + 12, d.panel_y + 68))
        if self.hud.blocks_s: screen.blit(self.hud.blocks_s, (d.panel_x + 12, d.panel_y + 92))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, (200,210,240)),
                f.render("Enter Start", True, (165,175,215)),
                f.render("←/→ Move", True, (165,175,215)),
                f.render("↓ Soft drop (hold)", True, (165,175,215)),
                f.render("Space Step down", True, (165,175,215)),
                f.render("↑/X Rot CW", True, (165,175,215)),
                f.render("Z Rot CCW", True, (165,175,215)),
                f.render("P Pause • Esc Quit", True, (165,175,215)),
            ]
        y = d.panel_y + 140
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20
