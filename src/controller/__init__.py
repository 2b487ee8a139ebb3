"""
Controller module for Minesweeper.

Provides the game state machine, key bindings and the terminal game loop.
"""
from .keys import Action, KEY_BINDINGS, CONFIRM_QUIT_KEY, action_for_key
from .state import GamePhase, GameState
from .controller import GameController, QUIT_PROMPT, EXIT_PROMPT, END_MESSAGES

__all__ = [
    "Action",
    "KEY_BINDINGS",
    "CONFIRM_QUIT_KEY",
    "action_for_key",
    "GamePhase",
    "GameState",
    "GameController",
    "QUIT_PROMPT",
    "EXIT_PROMPT",
    "END_MESSAGES",
]
