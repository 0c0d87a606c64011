
"""Board: block stack, active piece, move / collide / lock"""
import logging
from enum import Enum
from typing import Callable, List, Optional, Sequence
from tetris_config import CONFIG
from tetris_layout import grid_extent
from tetris_piece import Piece, Direction
from tetris_surface import Tile, Surface

logger = logging.getLogger(__name__)


class Block(Tile):
    """A locked cell of the stack."""


class BoardOverflow(Exception):
    """A piece locked with cells above the top row; the game is over."""
    def __init__(self, blocks: Sequence[Block]):
        self.blocks = list(blocks)
        rows = sorted({b.y for b in self.blocks})
        super().__init__(f"Board overflow: {len(self.blocks)} block(s) above the top (rows {rows})")


class BoardState(str, Enum):
    PAUSED = "paused"
    RUNNING_NO_PIECE = "running-no-piece"
    RUNNING_ACTIVE = "running-active"
    OVERFLOW = "overflow"


class GameBoard:
    def __init__(self, board_surface: Surface, piece_surface: Surface,
                 width: Optional[int] = None, height: Optional[int] = None,
                 tile_size: Optional[int] = None,
                 normal_speed: Optional[int] = None, soft_drop_speed: Optional[int] = None,
                 piece_factory: Optional[Callable[[], Piece]] = None):
        self.width = CONFIG["BOARD_WIDTH"] if width is None else width
        self.height = CONFIG["BOARD_HEIGHT"] if height is None else height
        self.tile_size = CONFIG["TILE_SIZE"] if tile_size is None else tile_size
        self.columns, self.rows = grid_extent(self.width, self.height, self.tile_size)
        self.normal_speed = CONFIG["NORMAL_SPEED_MS"] if normal_speed is None else normal_speed
        self.soft_drop_speed = CONFIG["SOFT_DROP_SPEED_MS"] if soft_drop_speed is None else soft_drop_speed
        if piece_factory is None:
            from tetris_rng import KindRandomizer, PieceFactory
            kinds = KindRandomizer(CONFIG["PIECE_SEED"], CONFIG["AVOID_SZO_FIRST"])
            piece_factory = PieceFactory(kinds, tile_size=self.tile_size)
        self.piece_factory = piece_factory
        self.board_surface = board_surface
        self.piece_surface = piece_surface

        self.speed = self.normal_speed
        self.paused = True
        self.overflowed = False
        self.block_stack: List[Block] = []
        self.current_piece: Optional[Piece] = None

    @property
    def state(self) -> BoardState:
        if self.overflowed:
            return BoardState.OVERFLOW
        if self.paused:
            return BoardState.PAUSED
        if self.current_piece is None:
            return BoardState.RUNNING_NO_PIECE
        return BoardState.RUNNING_ACTIVE

    # ---------- lifecycle ----------
    def start_game(self):
        """Clear both surfaces and unpause.

        After an overflow this is a new game: the stack and active piece go.
        Otherwise the stack survives and is drawn back onto the cleared surface.
        """
        self.board_surface.clear()
        self.piece_surface.clear()
        if self.overflowed:
            self.block_stack = []
            self.current_piece = None
            self.overflowed = False
        for block in self.block_stack:
            self.board_surface.render_tile(block)
        self._render_piece()
        self.speed = self.normal_speed
        self.paused = False
        logger.info(f"Game started on a {self.columns}x{self.rows} board with {len(self.block_stack)} blocks.")

    def pause(self):
        if not self.paused:
            logger.info("Game paused.")
        self.paused = True

    def resume(self):
        if self.overflowed:
            logger.info("Board overflowed; start a new game to continue.")
            return
        if self.paused:
            logger.info("Game resumed.")
        self.paused = False

    def drop_piece(self, action=True):
        """Soft drop on (True / "start") or off (anything else)."""
        active = action == "start" if isinstance(action, str) else bool(action)
        self.speed = self.soft_drop_speed if active else self.normal_speed
        logger.debug(f"Tick interval set to {self.speed} ms.")

    # ---------- active piece ----------
    def create_piece(self):
        self.current_piece = self.piece_factory()
        self.draw_current_piece()

    def draw_current_piece(self):
        self.piece_surface.clear()
        self._render_piece()

    def _render_piece(self):
        piece = self.current_piece
        if piece is None:
            return
        for x, y in piece.cells():
            self.piece_surface.render_tile(Tile(x, y, piece.tile_size, piece.color))

    def move_piece(self, direction) -> bool:
        """Try one step; True if the piece moved.

        A blocked move does nothing, except down, which locks the piece and
        spawns the next one. Raises BoardOverflow if that lock overflows.
        """
        direction = Direction.parse(direction)
        piece = self.current_piece
        if piece is None:
            return False
        position, depth, orientation = piece.step(direction)
        if self.check_move(position, depth, orientation):
            piece.position, piece.depth, piece.orientation = position, depth, orientation
            self.draw_current_piece()
            return True
        if direction is Direction.DOWN:
            try:
                self.add_piece(piece)
            finally:
                self.current_piece = None
            self.create_piece()
        return False

    def check_move(self, position: int, depth: int, orientation: int) -> bool:
        """True if the active piece fits at the given configuration.

        No ceiling test: rows above the top are always open. False when
        there is no active piece to test.
        """
        if self.current_piece is None:
            return False
        hits = 0
        for x, y in self.current_piece.cells(orientation, position, depth):
            if x < 0 or x >= self.columns:
                hits += 1
            if y >= self.rows:
                hits += 1
            if self.block_at(x, y):
                hits += 1
        return hits == 0

    def block_at(self, x: int, y: int) -> bool:
        return any(b.x == x and b.y == y for b in self.block_stack)

    # ---------- lock-in ----------
    def add_piece(self, piece: Piece):
        for x, y in piece.cells():
            self.block_stack.append(Block(x, y, piece.tile_size, piece.color))
        logger.debug(f"Locked {piece.kind} at {piece.cells()}; stack holds {len(self.block_stack)} blocks.")

        self.board_surface.clear()
        overflow = []
        for block in self.block_stack:
            self.board_surface.render_tile(block)
            if block.y < 0:
                overflow.append(block)

        if overflow:
            self.overflowed = True
            self.paused = True
            logger.warning(f"Board overflow with {len(overflow)} block(s) above the top row.")
            raise BoardOverflow(overflow)
