
CONFIG = {
    "BOARD_WIDTH": 480,
    "BOARD_HEIGHT": 600,
    "TILE_SIZE": 40,
    "NORMAL_SPEED_MS": 700,
    "SOFT_DROP_SPEED_MS": 70,
    "SPAWN_POSITION": 5,
    "SPAWN_DEPTH": -1,
    "MARGIN": 16,
    "PANEL_W": 220,
    "FPS": 60,
    "AVOID_SZO_FIRST": True,
    "PIECE_SEED": None,
}
