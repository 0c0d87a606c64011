
"""Game loop driver: a self-rescheduling descent tick"""
import logging
from typing import Callable, Optional
from tetris_board import GameBoard, BoardOverflow
from tetris_piece import Direction

logger = logging.getLogger(__name__)

class GameLoop:
    """Ticks the board every ``board.speed`` ms of driver time.

    The delay is read when a tick is scheduled, so a speed change applies
    from the tick after the one already pending.
    """
    def __init__(self, board: GameBoard,
                 on_overflow: Optional[Callable[[BoardOverflow], None]] = None):
        self.board = board
        self.on_overflow = on_overflow
        self.now_ms = 0.0
        self.interval = board.speed
        self.next_tick_ms = self.now_ms + self.interval
        self.ticks = 0

    def update(self, dt_ms: float):
        """Advance driver time by dt_ms and run the tick if it came due."""
        self.now_ms += dt_ms
        if self.now_ms >= self.next_tick_ms:
            self.tick()

    def tick(self):
        board = self.board
        try:
            if not board.paused:
                if board.current_piece is None:
                    board.create_piece()
                board.move_piece(Direction.DOWN)
        except BoardOverflow as exc:
            board.pause()
            logger.warning(f"Game over: {exc}")
            if self.on_overflow:
                self.on_overflow(exc)
        finally:
            self.ticks += 1
            self.interval = board.speed
            self.next_tick_ms = self.now_ms + self.interval
