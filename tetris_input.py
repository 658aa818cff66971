
"""Edge-triggered key state: one action per physical press"""
from enum import Enum
from typing import Dict

class Action(Enum):
    LEFT = "left"
    RIGHT = "right"
    SOFT_DROP = "soft_drop"
    ROTATE_CW = "rotate_cw"
    ROTATE_CCW = "rotate_ccw"
    HARD_DROP = "hard_drop"
    PAUSE = "pause"
    RESTART = "restart"
    START = "start"

class EdgeInput:
    """Two flags per action: held (key is down) and consumed (already fired this press)."""
    def __init__(self):
        self.held: Dict[Action, bool] = {}
        self.consumed: Dict[Action, bool] = {}

    def press(self, action: Action):
        self.held[action] = True

    def release(self, action: Action):
        self.held[action] = False
        self.consumed[action] = False

    def consume(self, action: Action) -> bool:
        if self.held.get(action) and not self.consumed.get(action):
            self.consumed[action] = True
            return True
        return False
