
"""Uniform piece randomizer"""
import random
from typing import Optional
from tetris_config import CONFIG

class PieceRandom:
    PIECES = ["I","O","T","S","Z","J","L"]
    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = CONFIG["SEED"]
        self.seed = seed
        self._rng = random.Random(seed)

    def next_piece(self) -> str:
        return self._rng.choice(self.PIECES)
