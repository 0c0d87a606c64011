
"""Keyboard to board command mapping"""
from enum import Enum
from typing import Optional, Union
import pygame
from tetris_piece import Direction

class Command(str, Enum):
    START = "start"
    SOFT_DROP_ON = "soft-drop-on"
    SOFT_DROP_OFF = "soft-drop-off"
    PAUSE = "pause"
    QUIT = "quit"

Action = Union[Direction, Command]

KEYDOWN_BINDINGS = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_SPACE: Direction.DOWN,
    pygame.K_UP: Direction.CLOCKWISE,
    pygame.K_x: Direction.CLOCKWISE,
    pygame.K_z: Direction.COUNTERCLOCKWISE,
    pygame.K_DOWN: Command.SOFT_DROP_ON,
    pygame.K_RETURN: Command.START,
    pygame.K_KP_ENTER: Command.START,
    pygame.K_p: Command.PAUSE,
    pygame.K_ESCAPE: Command.QUIT,
}

KEYUP_BINDINGS = {
    pygame.K_DOWN: Command.SOFT_DROP_OFF,
}

def translate(event) -> Optional[Action]:
    if event.type == pygame.QUIT:
        return Command.QUIT
    if event.type == pygame.KEYDOWN:
        return KEYDOWN_BINDINGS.get(event.key)
    if event.type == pygame.KEYUP:
        return KEYUP_BINDINGS.get(event.key)
    return None
