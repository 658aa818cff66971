
CONFIG = {
    "CELL_SIZE": 30,
    "FPS": 60,
    "GRAVITY_BASE_MS": 1000,
    "GRAVITY_STEP_MS": 50,
    "GRAVITY_FLOOR_MS": 100,
    "LINES_PER_LEVEL": 10,
    "LINE_CLEAR_POINTS": 100,
    "SOFT_DROP_POINTS": 1,
    "HARD_DROP_POINTS": 2,
    "SEED": None,
    "LOG_LEVEL": "INFO",
}
