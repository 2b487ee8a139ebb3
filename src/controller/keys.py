"""
Key bindings for the Minesweeper controller.

Maps raw keystrokes read from the terminal to game actions.
"""
from enum import Enum, auto
from typing import Dict, Optional

from game import Direction
from terminal import KEY_UP, KEY_DOWN, KEY_LEFT, KEY_RIGHT


class Action(Enum):
    """Player actions recognised while playing."""

    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    REVEAL = auto()
    QUIT = auto()


KEY_BINDINGS: Dict[str, Action] = {
    "w": Action.MOVE_UP,
    "s": Action.MOVE_DOWN,
    "a": Action.MOVE_LEFT,
    "d": Action.MOVE_RIGHT,
    KEY_UP: Action.MOVE_UP,
    KEY_DOWN: Action.MOVE_DOWN,
    KEY_LEFT: Action.MOVE_LEFT,
    KEY_RIGHT: Action.MOVE_RIGHT,
    " ": Action.REVEAL,
    "q": Action.QUIT,
}

MOVES: Dict[Action, Direction] = {
    Action.MOVE_UP: Direction.UP,
    Action.MOVE_DOWN: Direction.DOWN,
    Action.MOVE_LEFT: Direction.LEFT,
    Action.MOVE_RIGHT: Direction.RIGHT,
}

# Only this key confirms the quit prompt; anything else cancels it.
CONFIRM_QUIT_KEY = "y"


def action_for_key(key: str) -> Optional[Action]:
    """Look up the action bound to a keystroke, or None if unbound."""
    return KEY_BINDINGS.get(key)
