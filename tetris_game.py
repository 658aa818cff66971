
"""Game controller: lifecycle, gravity, input resolution, locking and scoring"""
import logging
from enum import Enum
from typing import Optional

from tetris_board import Board
from tetris_config import CONFIG
from tetris_input import Action, EdgeInput
from tetris_piece import ActivePiece, can_move, lock, rotate, spawn

logger = logging.getLogger(__name__)


class GameState(Enum):
    READY = "ready"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "gameOver"


def gravity_interval(level: int) -> int:
    base, step = CONFIG["GRAVITY_BASE_MS"], CONFIG["GRAVITY_STEP_MS"]
    return max(CONFIG["GRAVITY_FLOOR_MS"], base - (level - 1) * step)


class Game:
    """One play session. The scheduler calls frame() or tick(); the input source calls key_down/key_up."""

    def __init__(self, rng=None):
        self.rng = rng
        self.board = Board()
        self.input = EdgeInput()
        self.last_time: Optional[float] = None
        self.board_version = 0
        self.reset()

    # ---------- Lifecycle ----------
    def reset(self):
        self.board.reset()
        self.board_version += 1
        self.state = GameState.READY
        self.score = 0
        self.lines = 0
        self.level = 1
        self.gravity_ms = gravity_interval(1)
        self.gravity_acc = 0.0
        self.current: Optional[ActivePiece] = None

    def start(self) -> bool:
        if self.state is not GameState.READY:
            return False
        self.current = spawn(self.rng)
        if not can_move(self.current, self.board, 0, 0):
            self._game_over()
        else:
            self.state = GameState.PLAYING
            logger.info("game started with %s", self.current.t)
        return True

    def restart(self):
        self.reset()
        self.start()

    def toggle_pause(self):
        if self.state is GameState.PLAYING:
            self.state = GameState.PAUSED
        elif self.state is GameState.PAUSED:
            self.state = GameState.PLAYING
        else:
            return
        logger.info("state -> %s", self.state.value)

    def _game_over(self):
        self.state = GameState.GAME_OVER
        self.current = None
        logger.info("game over: score=%d lines=%d level=%d", self.score, self.lines, self.level)

    # ---------- Raw key events ----------
    def key_down(self, action: Action):
        self.input.press(action)
        if action is Action.PAUSE:
            self.toggle_pause()
        if action is Action.RESTART and self.state is GameState.GAME_OVER:
            self.restart()
        # any key starts a fresh session
        if self.state is GameState.READY:
            self.start()

    def key_up(self, action: Action):
        self.input.release(action)

    # ---------- Update ----------
    def frame(self, timestamp_ms: float):
        dt = 0.0 if self.last_time is None else timestamp_ms - self.last_time
        self.last_time = timestamp_ms
        self.tick(dt)

    def tick(self, elapsed_ms: float):
        if self.state is not GameState.PLAYING:
            return
        self.handle_input()
        if self.state is not GameState.PLAYING:
            return

        self.gravity_acc += elapsed_ms
        if self.gravity_acc >= self.gravity_ms:
            self.gravity_acc = 0.0
            if can_move(self.current, self.board, 0, 1):
                self.current.y += 1
            else:
                self.lock_piece()

    def handle_input(self):
        if self.current is None:
            return
        inp, p, b = self.input, self.current, self.board
        if inp.consume(Action.LEFT) and can_move(p, b, -1, 0):
            p.x -= 1
        if inp.consume(Action.RIGHT) and can_move(p, b, 1, 0):
            p.x += 1
        if inp.consume(Action.SOFT_DROP) and can_move(p, b, 0, 1):
            p.y += 1
            self.score += CONFIG["SOFT_DROP_POINTS"]
        if inp.consume(Action.ROTATE_CW):
            rotate(p, b, True)
        if inp.consume(Action.ROTATE_CCW):
            rotate(p, b, False)
        if inp.consume(Action.HARD_DROP):
            self.hard_drop()

    def hard_drop(self):
        if self.current is None:
            return
        dropped = 0
        while can_move(self.current, self.board, 0, 1):
            self.current.y += 1
            dropped += 1
        self.score += dropped * CONFIG["HARD_DROP_POINTS"]
        self.lock_piece()

    def lock_piece(self):
        if self.current is None:
            return
        lock(self.current, self.board)
        self.board_version += 1
        logger.debug("locked %s at (%d, %d)", self.current.t, self.current.x, self.current.y)
        cleared = self.board.clear_full_lines()
        if cleared:
            self.lines += cleared
            self.score += CONFIG["LINE_CLEAR_POINTS"] * cleared * (self.level + 1)
            logger.debug("cleared %d lines, total %d", cleared, self.lines)
            new_level = self.lines // CONFIG["LINES_PER_LEVEL"] + 1
            if new_level > self.level:
                self.level = new_level
                self.gravity_ms = gravity_interval(self.level)
                logger.info("level %d, gravity %d ms", self.level, self.gravity_ms)

        self.current = spawn(self.rng)
        if not can_move(self.current, self.board, 0, 0):
            self._game_over()
