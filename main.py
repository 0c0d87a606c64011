
import logging
import sys
import pygame
from tetris_config import CONFIG
from tetris_board import GameBoard, BoardOverflow, BoardState
from tetris_input import Command, translate
from tetris_layout import compute_dims
from tetris_loop import GameLoop
from tetris_overlay import Overlay
from tetris_piece import Direction
from tetris_render import Canvas, RenderAssets

logging.basicConfig(level=logging.INFO, format='[TETRIS] %(asctime)s - %(levelname)s: %(message)s')


STATUS_TEXT = {
    BoardState.PAUSED: "Paused (P)",
    BoardState.RUNNING_NO_PIECE: "Running",
    BoardState.RUNNING_ACTIVE: "Running",
    BoardState.OVERFLOW: "Game over (Enter)",
}


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def dispatch(board: GameBoard, action, on_overflow):
    """Apply one input action to the board."""
    if action is Command.START:
        board.start_game()
    elif action is Command.PAUSE:
        if board.paused: board.resume()
        else: board.pause()
    elif action is Command.SOFT_DROP_ON:
        board.drop_piece(True)
    elif action is Command.SOFT_DROP_OFF:
        board.drop_piece(False)
    elif isinstance(action, Direction):
        if board.paused or board.current_piece is None:
            return
        try:
            board.move_piece(action)
        except BoardOverflow as exc:
            board.pause()
            on_overflow(exc)


def main():
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])

    dims = compute_dims(CONFIG["BOARD_WIDTH"], CONFIG["BOARD_HEIGHT"], CONFIG["TILE_SIZE"])
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)

    render = RenderAssets(dims, font)
    clock = pygame.time.Clock()

    # Locked stack and active piece live on separate layers
    board_layer = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
    piece_layer = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
    board = GameBoard(
        Canvas(board_layer), Canvas(piece_layer),
        width=CONFIG["BOARD_WIDTH"], height=CONFIG["BOARD_HEIGHT"], tile_size=CONFIG["TILE_SIZE"],
        normal_speed=CONFIG["NORMAL_SPEED_MS"], soft_drop_speed=CONFIG["SOFT_DROP_SPEED_MS"],
    )
    overlay = Overlay()

    def game_over(exc: BoardOverflow):
        overlay.show("GAME OVER", str(exc))

    loop = GameLoop(board, on_overflow=game_over)

    while True:
        dt = clock.tick(CONFIG["FPS"])

        for e in pygame.event.get():
            if overlay.active:
                if e.type == pygame.QUIT:
                    pygame.quit(); sys.exit()
                # key releases still reach the board so soft drop cannot stick
                if translate(e) is Command.SOFT_DROP_OFF:
                    dispatch(board, Command.SOFT_DROP_OFF, game_over)
                overlay.handle(e)
                continue
            action = translate(e)
            if action is None:
                continue
            if action is Command.QUIT:
                pygame.quit(); sys.exit()
            dispatch(board, action, game_over)

        # The notice blocks the game until acknowledged
        if not overlay.active:
            loop.update(dt)

        render.redraw_static(screen)
        render.blit_layers(screen, [board_layer, piece_layer])
        render.draw_panel_hud(screen, STATUS_TEXT[board.state], board.speed, len(board.block_stack))
        overlay.draw(screen, font, big_font, dims.total_w, dims.total_h)
        pygame.display.flip()


if __name__ == '__main__':
    main()
